"""Точка входа в приложение."""
import sys

from badge.cli import run_cli


def main() -> None:
    """Разбирает аргументы и выполняет один запуск инструмента."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()

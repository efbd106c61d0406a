"""Командная строка: разбор аргументов, настройка логирования, вывод статуса."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from badge.controllers.badge_controller import BadgeController

__version__ = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="badge",
        description="Player badge validator/formater tool for images",
    )
    parser.add_argument("filepath", help="Path to the image file")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check if the image is already a valid circular badge (never writes output.png)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_cli(argv: Optional[List[str]] = None, controller: Optional[BadgeController] = None) -> int:
    """Выполняет один запуск и печатает одну строку статуса.

    Код возврата всегда 0: отказ проверки сообщается только текстом в stderr.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    controller = controller or BadgeController()
    try:
        outcome = controller.run(args.filepath, check=args.check)
    except OSError as exc:
        # например, output.png недоступен для записи
        print(f"Validation failed: {exc}", file=sys.stderr)
        return 0

    if outcome.ok:
        print(outcome.message)
    else:
        print(f"Validation failed: {outcome.message}", file=sys.stderr)
    return 0

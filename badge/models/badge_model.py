"""Модели бейджа: геометрия круга, цвет и результат проверки.

`Circle` — единственный источник геометрии: и генератор маски, и валидатор
берут границы строк только из `Circle.row_span`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

ColorSample = Tuple[int, int, int]


@dataclass(frozen=True)
class Circle:
    """Круг, вписанный в изображение width x height.

    Центр считается делением с плавающей точкой: при чётных размерах он лежит
    между пикселями, при нечётных — на пикселе.
    """
    cx: float
    cy: float
    radius: float
    width: int
    height: int

    @classmethod
    def for_size(cls, width: int, height: int) -> "Circle":
        return cls(
            cx=width / 2,
            cy=height / 2,
            radius=min(width, height) / 2,
            width=width,
            height=height,
        )

    def row_span(self, y: int) -> Tuple[int, int]:
        """Полуинтервал столбцов [start, stop) внутри круга для строки `y`.

        Столбец x внутри, если left <= x < right, где
        left/right = cx -/+ sqrt(r^2 - (y - cy)^2). Строки за пределами
        круга по вертикали дают пустой интервал (0, 0).
        """
        dy = y - self.cy
        rest = self.radius * self.radius - dy * dy
        if rest < 0:
            return 0, 0
        half = math.sqrt(rest)
        start = max(0, math.ceil(self.cx - half))
        stop = min(self.width, math.ceil(self.cx + half))
        if stop <= start:
            return 0, 0
        return start, stop


@dataclass(frozen=True)
class HSLColor:
    """Цвет в HSL: hue в градусах [0, 360), saturation и lightness в [0, 1]."""
    hue: float
    saturation: float
    lightness: float


@dataclass(frozen=True)
class MoodRules:
    """Таблица правил "весёлого" цвета.

    Fields:
        hue_range: Допустимый тон, включительно с обеих сторон, градусы.
        min_saturation: Минимальная насыщенность.
        min_lightness: Минимальная светлота.
        weights: Веса правил (тон, насыщенность, светлота).
        threshold: Порог суммы весов выполненных правил.

    С таблицей по умолчанию правило тона необходимо и достаточно:
    насыщенность и светлота вместе дают только 0.3 < 0.6.
    """
    hue_range: Tuple[float, float] = (50.0, 220.0)
    min_saturation: float = 0.5
    min_lightness: float = 0.6
    weights: Tuple[float, float, float] = (0.7, 0.2, 0.1)
    threshold: float = 0.6


DEFAULT_MOOD_RULES = MoodRules()


class FailureReason(Enum):
    FILE_MISSING = "file-missing"
    METADATA_UNREADABLE = "metadata-unreadable"
    WRONG_FORMAT = "wrong-format"
    OVERSIZE = "oversize"
    NON_CIRCULAR = "non-circular"
    NOT_HAPPY = "not-happy"


@dataclass(frozen=True)
class ValidationOutcome:
    """Итог одного запуска: успех или классифицированная причина отказа."""
    ok: bool
    message: str
    reason: Optional[FailureReason] = None

    @classmethod
    def success(cls, message: str) -> "ValidationOutcome":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, reason: FailureReason, message: str) -> "ValidationOutcome":
        return cls(ok=False, message=message, reason=reason)

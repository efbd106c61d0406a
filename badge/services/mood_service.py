from __future__ import annotations

import logging

from badge.models.badge_model import DEFAULT_MOOD_RULES, ColorSample, HSLColor, MoodRules

logger = logging.getLogger(__name__)


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    """Стандартное преобразование RGB (0..255) в HSL; hue в градусах [0, 360).

    Тон считается по секторам 60° с порядком операций `(x - y) / d + offset`,
    затем `* 60`: так границы таблицы правил (например, ровно 220°)
    получаются без ошибки округления.
    """
    r, g, b = r / 255, g / 255, b / 255
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    lightness = (c_max + c_min) / 2
    if c_max == c_min:
        return HSLColor(hue=0.0, saturation=0.0, lightness=lightness)

    d = c_max - c_min
    if lightness > 0.5:
        saturation = d / (2 - c_max - c_min)
    else:
        saturation = d / (c_max + c_min)

    if c_max == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif c_max == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    hue *= 60
    return HSLColor(hue=hue % 360.0, saturation=saturation, lightness=lightness)


class MoodService:
    """Оценка "весёлости" цвета по взвешенной таблице правил в пространстве HSL."""

    def __init__(self, rules: MoodRules = DEFAULT_MOOD_RULES) -> None:
        self.rules = rules

    def score(self, color: HSLColor) -> float:
        hue_min, hue_max = self.rules.hue_range
        w_hue, w_saturation, w_lightness = self.rules.weights
        total = 0.0
        if hue_min <= color.hue <= hue_max:
            total += w_hue
        if color.saturation >= self.rules.min_saturation:
            total += w_saturation
        if color.lightness >= self.rules.min_lightness:
            total += w_lightness
        return total

    def is_happy(self, color: HSLColor) -> bool:
        return self.score(color) >= self.rules.threshold

    def is_happy_rgb(self, rgb: ColorSample) -> bool:
        hsl = rgb_to_hsl(*rgb)
        happy = self.is_happy(hsl)
        logger.debug(
            "RGB %s -> HSL(%.1f, %.2f, %.2f), score %.2f, happy=%s",
            rgb, hsl.hue, hsl.saturation, hsl.lightness, self.score(hsl), happy,
        )
        return happy

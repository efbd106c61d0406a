"""Правила проверки бейджа: формат, размеры и круглая прозрачность.

Каждое правило либо молча проходит, либо бросает свою классифицированную
ошибку из `badge.errors`. Входные данные не изменяются.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from badge.errors import NonCircularError, OversizeError, WrongFormatError
from badge.services.mask_service import ALPHA_OFFSET, MaskService

logger = logging.getLogger(__name__)

REQUIRED_FORMAT = "PNG"
MAX_DIMENSION = 512
# альфа <= 50 вне круга считается артефактом сглаживания, а не нарушением
ALPHA_VISIBILITY_THRESHOLD = 50


class ValidationService:
    def __init__(self, mask_service: Optional[MaskService] = None) -> None:
        self._mask_service = mask_service or MaskService()

    def check_format(self, image_format: Optional[str]) -> None:
        """Формат декодера должен совпадать с "PNG" с учётом регистра."""
        if image_format != REQUIRED_FORMAT:
            raise WrongFormatError()

    def check_dimensions(self, width: int, height: int) -> None:
        """Ровно 512x512 ещё допустимо."""
        if width > MAX_DIMENSION or height > MAX_DIMENSION:
            raise OversizeError()

    def check_circular(self, rgba: np.ndarray, width: int, height: int) -> None:
        """
        Проверяет, что вне круга нет видимых пикселей.

        Args:
            rgba: Массив uint8 формы (height, width, 4).

        Raises:
            NonCircularError: если хотя бы у одного пикселя вне интервала строки
                альфа больше `ALPHA_VISIBILITY_THRESHOLD`.
        """
        if rgba.shape != (height, width, 4):
            raise ValueError(f"Expected RGBA buffer of shape {(height, width, 4)}, got {rgba.shape}")

        exterior = ~self._mask_service.interior(width, height)
        visible = rgba[..., ALPHA_OFFSET] > ALPHA_VISIBILITY_THRESHOLD
        leaks = exterior & visible
        if leaks.any():
            # первое нарушение в построчном порядке
            y, x = divmod(int(np.argmax(leaks)), width)
            logger.debug("Visible pixel outside the circle at (%d, %d), alpha=%d", x, y, int(rgba[y, x, ALPHA_OFFSET]))
            raise NonCircularError()

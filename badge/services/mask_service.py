from __future__ import annotations

import io
import logging
from typing import Union

import numpy as np
from PIL import Image

from badge.models.badge_model import Circle

logger = logging.getLogger(__name__)

ALPHA_OFFSET = 3
RGBA_CHANNELS = 4


class MaskService:
    def interior(self, width: int, height: int) -> np.ndarray:
        """
        Булева карта (height, width): True для пикселей внутри круга.
        Строится построчно по `Circle.row_span`, без проверки каждого пикселя.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Mask size must be positive, got {width}x{height}")
        circle = Circle.for_size(width, height)
        inside = np.zeros((height, width), dtype=bool)
        for y in range(height):
            start, stop = circle.row_span(y)
            inside[y, start:stop] = True
        return inside

    def create_circular_mask(self, width: int, height: int, raw: bool = True) -> Union[np.ndarray, bytes]:
        """
        Круглая маска width x height: RGB всегда 0, альфа 255 внутри круга и 0 снаружи.

        Args:
            raw: True — массив uint8 (height, width, 4) для попиксельного сравнения;
                False — тот же буфер, закодированный в PNG, для композиции.
        """
        mask = np.zeros((height, width, RGBA_CHANNELS), dtype=np.uint8)
        mask[..., ALPHA_OFFSET][self.interior(width, height)] = 255

        if raw:
            return mask

        buffer = io.BytesIO()
        Image.fromarray(mask).save(buffer, format="PNG")
        logger.debug("Encoded %dx%d circular mask", width, height)
        return buffer.getvalue()

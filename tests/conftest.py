from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import numpy as np
import pytest
from PIL import Image

from badge.services.mask_service import MaskService

GREEN = (0, 150, 0)
RED = (255, 0, 0)


def make_badge_array(size: Tuple[int, int], rgb: Tuple[int, int, int]) -> np.ndarray:
    """RGBA-массив: цвет `rgb` везде, альфа — круглая маска."""
    width, height = size
    arr = MaskService().create_circular_mask(width, height, raw=True).copy()
    arr[..., 0], arr[..., 1], arr[..., 2] = rgb
    return arr


@pytest.fixture
def write_badge(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str = "badge.png", size: Tuple[int, int] = (64, 64), rgb=GREEN) -> Path:
        path = tmp_path / name
        Image.fromarray(make_badge_array(size, rgb)).save(path, format="PNG")
        return path
    return _write


@pytest.fixture
def write_square(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str = "square.png", size: Tuple[int, int] = (64, 64), rgb=GREEN, fmt: str = "PNG") -> Path:
        path = tmp_path / name
        if fmt == "PNG":
            Image.new("RGBA", size, rgb + (255,)).save(path, format=fmt)
        else:
            Image.new("RGB", size, rgb).save(path, format=fmt)
        return path
    return _write

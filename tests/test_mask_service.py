from __future__ import annotations

import io
import math

import numpy as np
import pytest
from PIL import Image

from badge.models.badge_model import Circle
from badge.services.mask_service import MaskService


def test_circle_center_and_radius():
    circle = Circle.for_size(6, 4)
    assert (circle.cx, circle.cy, circle.radius) == (3.0, 2.0, 2.0)

    odd = Circle.for_size(5, 5)
    assert (odd.cx, odd.cy, odd.radius) == (2.5, 2.5, 2.5)


def test_row_span_outside_vertical_extent_is_empty():
    circle = Circle.for_size(4, 8)
    assert circle.row_span(0) == (0, 0)
    assert circle.row_span(1) == (0, 0)
    assert circle.row_span(3) == (1, 4)
    assert circle.row_span(4) == (0, 4)
    assert circle.row_span(7) == (0, 0)


def test_small_square_mask_is_exact():
    alpha = MaskService().create_circular_mask(4, 4)[..., 3]
    expected = np.array(
        [
            [0, 0, 0, 0],
            [0, 255, 255, 255],
            [255, 255, 255, 255],
            [0, 255, 255, 255],
        ],
        dtype=np.uint8,
    )
    np.testing.assert_array_equal(alpha, expected)


def test_non_square_mask_uses_smaller_side():
    inside = MaskService().interior(6, 4)
    assert inside.sum(axis=1).tolist() == [0, 3, 4, 3]
    assert inside[2].tolist() == [False, True, True, True, True, False]


def test_mask_alpha_is_binary_and_color_is_zero():
    mask = MaskService().create_circular_mask(37, 21)
    assert mask.shape == (21, 37, 4)
    assert mask.dtype == np.uint8
    assert set(np.unique(mask[..., 3]).tolist()) <= {0, 255}
    assert not mask[..., :3].any()


def test_mask_is_reproducible():
    service = MaskService()
    first = service.create_circular_mask(50, 50)
    second = service.create_circular_mask(50, 50)
    assert first.tobytes() == second.tobytes()


@pytest.mark.parametrize("size", [64, 200, 512])
def test_interior_matches_disc_area(size):
    count = int(MaskService().interior(size, size).sum())
    area = math.pi * (size / 2) ** 2
    assert abs(count - area) / area < 0.01


def test_encoded_mask_decodes_to_raw_mask():
    service = MaskService()
    raw = service.create_circular_mask(30, 20, raw=True)
    encoded = service.create_circular_mask(30, 20, raw=False)

    assert isinstance(encoded, bytes)
    assert encoded.startswith(b"\x89PNG")
    with Image.open(io.BytesIO(encoded)) as decoded:
        assert decoded.size == (30, 20)
        np.testing.assert_array_equal(np.array(decoded.convert("RGBA")), raw)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        MaskService().interior(0, 10)

from __future__ import annotations

import pytest
from PIL import Image

from weighted_range.utils.image import BACKGROUND_RGB, BAR_RGB, render_histogram_png


def test_render_histogram(tmp_path):
    out = render_histogram_png({1: 0, 2: 10}, tmp_path / "sub" / "hist.png")
    assert out.exists()
    with Image.open(out) as im:
        assert im.size == (640, 360)
        assert im.mode == "RGB"
        assert im.getpixel((470, 200)) == BAR_RGB
        assert im.getpixel((170, 200)) == BACKGROUND_RGB


def test_render_histogram_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        render_histogram_png({}, tmp_path / "x.png")

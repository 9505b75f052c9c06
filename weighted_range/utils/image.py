"""Image-related helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from PIL import Image, ImageDraw

BACKGROUND_RGB: tuple[int, int, int] = (255, 255, 255)
BAR_RGB: tuple[int, int, int] = (70, 110, 160)
AXIS_RGB: tuple[int, int, int] = (40, 40, 40)


def render_histogram_png(
    counts: Mapping[int, float],
    png_path: Path,
    *,
    width: int = 640,
    height: int = 360,
    margin: int = 20,
) -> Path:
    """Write a bar chart with one bar per key, in key order.

    Bar heights are scaled to the largest value. Works for both tallies and
    percentage tables.
    """

    if not counts:
        raise ValueError("nothing to render: counts is empty")
    if width <= 2 * margin or height <= 2 * margin:
        raise ValueError("image too small for the margin")

    keys = sorted(counts)
    peak = max(float(counts[k]) for k in keys)

    im = Image.new("RGB", (width, height), BACKGROUND_RGB)
    draw = ImageDraw.Draw(im)

    plot_w = width - 2 * margin
    plot_h = height - 2 * margin
    baseline = height - margin
    slot = plot_w / len(keys)

    for i, k in enumerate(keys):
        v = float(counts[k])
        if v <= 0.0 or peak <= 0.0:
            continue
        bar_h = max(1, round(plot_h * v / peak))
        x0 = margin + round(i * slot)
        x1 = margin + round((i + 1) * slot) - 1
        # Leave a one-pixel gap between adjacent bars when there is room.
        if x1 - x0 >= 2:
            x1 -= 1
        draw.rectangle([x0, baseline - bar_h, x1, baseline - 1], fill=BAR_RGB)

    draw.line([(margin, baseline), (width - margin, baseline)], fill=AXIS_RGB)

    png_path = Path(png_path)
    png_path.parent.mkdir(parents=True, exist_ok=True)
    im.save(png_path, format="PNG")
    return png_path

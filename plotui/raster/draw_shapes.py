from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from plotui.primitives import Fill, VerticalGradient
from plotui.raster.canvas import draw_hline


def _row_color(fill: Fill, row_y: float, top: float, bottom: float):
    if isinstance(fill, VerticalGradient):
        span = bottom - top
        return fill.at((row_y - top) / span if span > 0 else 0.0)
    return fill


def _pixel_span(a: float, b: float) -> tuple[int, int] | None:
    """Pixel columns whose centres fall in ``[a, b)``; at least one for a non-empty span."""
    if b <= a:
        return None
    first = int(math.ceil(a - 0.5))
    last = int(math.ceil(b - 0.5)) - 1
    if last < first:
        last = first
    return first, last


def draw_rect(
    dst: np.ndarray,
    x: float,
    y: float,
    width: float,
    height: float,
    fill: Fill,
    corner_radius: float = 0.0,
) -> None:
    rows = _pixel_span(y, y + height)
    if rows is None or width <= 0:
        return
    radius = max(0.0, min(corner_radius, width / 2.0, height / 2.0))
    top = y
    bottom = y + height
    for row in range(max(0, rows[0]), min(dst.shape[0] - 1, rows[1]) + 1):
        yc = row + 0.5
        inset = 0.0
        if radius > 0:
            if yc < top + radius:
                dy = top + radius - yc
            elif yc > bottom - radius:
                dy = yc - (bottom - radius)
            else:
                dy = 0.0
            if dy > 0:
                inset = radius - math.sqrt(max(0.0, radius * radius - dy * dy))
        cols = _pixel_span(x + inset, x + width - inset)
        if cols is None:
            continue
        draw_hline(dst, cols[0], cols[1], row, _row_color(fill, yc, top, bottom))


def fill_polygon(dst: np.ndarray, points: Sequence[tuple[float, float]], fill: Fill) -> None:
    """Even-odd scanline fill."""
    if len(points) < 3:
        return
    ys = [p[1] for p in points]
    top = min(ys)
    bottom = max(ys)
    rows = _pixel_span(top, bottom)
    if rows is None:
        return
    edges = list(zip(points, list(points[1:]) + [points[0]]))
    for row in range(max(0, rows[0]), min(dst.shape[0] - 1, rows[1]) + 1):
        yc = row + 0.5
        crossings: list[float] = []
        for (xa, ya), (xb, yb) in edges:
            if (ya <= yc < yb) or (yb <= yc < ya):
                crossings.append(xa + (yc - ya) * (xb - xa) / (yb - ya))
        crossings.sort()
        color = _row_color(fill, yc, top, bottom)
        for a, b in zip(crossings[0::2], crossings[1::2]):
            cols = _pixel_span(a, b)
            if cols is not None:
                draw_hline(dst, cols[0], cols[1], row, color)

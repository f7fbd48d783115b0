from __future__ import annotations

import math

import numpy as np

from plotui.primitives import RGBA
from plotui.raster.canvas import draw_hline


def draw_disc(dst: np.ndarray, cx: float, cy: float, diameter: float, color: RGBA) -> None:
    radius = diameter / 2.0
    if radius <= 0:
        return
    for row in range(int(math.floor(cy - radius)), int(math.ceil(cy + radius)) + 1):
        dy = row + 0.5 - cy
        if abs(dy) > radius:
            continue
        half = math.sqrt(radius * radius - dy * dy)
        draw_hline(dst, int(math.ceil(cx - half - 0.5)), int(math.ceil(cx + half - 0.5)) - 1, row, color)


def draw_ring(dst: np.ndarray, cx: float, cy: float, diameter: float, color: RGBA, width: float = 1.0) -> None:
    """Stroke a circle outline centred on its nominal radius."""
    radius = diameter / 2.0
    outer = radius + width / 2.0
    inner = max(0.0, radius - width / 2.0)
    if outer <= 0:
        return
    for row in range(int(math.floor(cy - outer)), int(math.ceil(cy + outer)) + 1):
        dy = row + 0.5 - cy
        if abs(dy) > outer:
            continue
        out_half = math.sqrt(outer * outer - dy * dy)
        if abs(dy) < inner:
            in_half = math.sqrt(inner * inner - dy * dy)
            draw_hline(dst, int(round(cx - out_half)), int(round(cx - in_half)) - 1, row, color)
            draw_hline(dst, int(round(cx + in_half)), int(round(cx + out_half)) - 1, row, color)
        else:
            draw_hline(dst, int(round(cx - out_half)), int(round(cx + out_half)) - 1, row, color)

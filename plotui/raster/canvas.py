from __future__ import annotations

import numpy as np

from plotui.primitives import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width and height must be > 0")
    return np.tile(np.asarray(color, dtype=np.uint8), (height, width, 1))


def scale_alpha(color: RGBA, factor: float) -> RGBA:
    return (color[0], color[1], color[2], int(round(color[3] * max(0.0, min(1.0, factor)))))


def _blend(region: np.ndarray, color: RGBA) -> None:
    """Source-over ``color`` onto an RGBA slice in place; the result is opaque."""
    a = color[3] / 255.0
    ink = np.asarray(color[:3], dtype=np.float32) * a
    region[..., :3] = (ink + region[..., :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    region[..., 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if 0 <= y < dst.shape[0] and 0 <= x < dst.shape[1]:
        _blend(dst[y, x], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    """Blend columns ``x0..x1`` inclusive on row ``y``; an inverted span draws nothing."""
    if not 0 <= y < dst.shape[0] or color[3] == 0:
        return
    start = max(0, x0)
    stop = min(dst.shape[1] - 1, x1)
    if start <= stop:
        _blend(dst[y, start : stop + 1], color)

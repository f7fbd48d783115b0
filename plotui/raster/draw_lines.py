from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from plotui.primitives import RGBA
from plotui.raster.canvas import draw_pixel, scale_alpha


def draw_polyline(
    dst: np.ndarray,
    points: Sequence[tuple[float, float]],
    color: RGBA,
    width: float = 1.0,
    dash: Sequence[float] = (),
    closed: bool = False,
) -> None:
    """Stroke a polyline; widths under one pixel are drawn as faint hairlines."""
    if len(points) < 2:
        return
    brush = max(1, int(round(width)))
    if width < 1.0:
        color = scale_alpha(color, max(width, 0.1))
    pts = list(points)
    if closed:
        pts.append(pts[0])
    pattern = _normalize_dash(dash)
    phase = 0.0
    for (x0, y0), (x1, y1) in zip(pts[:-1], pts[1:]):
        if pattern:
            pieces, phase = _dash_pieces(x0, y0, x1, y1, pattern, phase)
        else:
            pieces = [(x0, y0, x1, y1)]
        for ax, ay, bx, by in pieces:
            _draw_line_segment(dst, int(round(ax)), int(round(ay)), int(round(bx)), int(round(by)), color=color, width=brush)


def _normalize_dash(dash: Sequence[float]) -> tuple[float, ...]:
    lengths = tuple(float(d) for d in dash if d > 0)
    if not lengths:
        return ()
    if len(lengths) % 2 == 1:
        # An odd pattern repeats with on/off swapped.
        lengths = lengths + lengths
    return lengths


def _dash_pieces(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    pattern: tuple[float, ...],
    phase: float,
) -> tuple[list[tuple[float, float, float, float]], float]:
    length = math.hypot(x1 - x0, y1 - y0)
    if length == 0:
        return [], phase
    period = sum(pattern)
    pieces: list[tuple[float, float, float, float]] = []
    pos = 0.0
    while pos < length:
        offset = (phase + pos) % period
        acc = 0.0
        remaining = period - offset
        on = False
        for idx, dash_len in enumerate(pattern):
            if offset < acc + dash_len:
                remaining = acc + dash_len - offset
                on = idx % 2 == 0
                break
            acc += dash_len
        end = min(length, pos + max(remaining, 1e-6))
        if on:
            t0 = pos / length
            t1 = end / length
            pieces.append((x0 + (x1 - x0) * t0, y0 + (y1 - y0) * t0, x0 + (x1 - x0) * t1, y0 + (y1 - y0) * t1))
        pos = end
    return pieces, (phase + length) % period


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)

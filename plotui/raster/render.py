from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from plotui.primitives import (
    RGBA,
    BarPrimitive,
    CirclePrimitive,
    PathPrimitive,
    Primitive,
    RectPrimitive,
    SegmentPrimitive,
    TextPrimitive,
)
from plotui.raster.canvas import new_canvas
from plotui.raster.draw_lines import draw_polyline
from plotui.raster.draw_markers import draw_disc, draw_ring
from plotui.raster.draw_shapes import draw_rect, fill_polygon
from plotui.raster.draw_text import draw_text


LOGGER = logging.getLogger(__name__)


def rasterize(
    primitives: Iterable[Primitive],
    width: int,
    height: int,
    background: RGBA = (255, 255, 255, 255),
) -> np.ndarray:
    """Paint primitives in order onto a fresh ``(height, width, 4)`` uint8 canvas."""
    canvas = new_canvas(width, height, color=background)
    for primitive in primitives:
        draw_primitive(canvas, primitive)
    return canvas


def draw_primitive(canvas: np.ndarray, primitive: Primitive) -> None:
    if isinstance(primitive, BarPrimitive):
        draw_primitive(canvas, primitive.rounded)
        draw_primitive(canvas, primitive.overlay)
    elif isinstance(primitive, RectPrimitive):
        r = primitive.rect
        draw_rect(canvas, r.x, r.y, r.width, r.height, primitive.fill, corner_radius=primitive.corner_radius)
    elif isinstance(primitive, PathPrimitive):
        if primitive.fill is not None and primitive.closed:
            fill_polygon(canvas, primitive.points, primitive.fill)
        if primitive.stroke is not None:
            stroke = primitive.stroke
            draw_polyline(
                canvas,
                primitive.points,
                stroke.color,
                width=stroke.line_width,
                dash=stroke.dash,
                closed=primitive.closed,
            )
    elif isinstance(primitive, CirclePrimitive):
        if primitive.fill is not None:
            draw_disc(canvas, primitive.cx, primitive.cy, primitive.diameter, primitive.fill)
        if primitive.stroke is not None and primitive.stroke.line_width > 0:
            draw_ring(canvas, primitive.cx, primitive.cy, primitive.diameter, primitive.stroke.color, primitive.stroke.line_width)
    elif isinstance(primitive, SegmentPrimitive):
        stroke = primitive.stroke
        draw_polyline(
            canvas,
            ((primitive.x1, primitive.y1), (primitive.x2, primitive.y2)),
            stroke.color,
            width=stroke.line_width,
            dash=stroke.dash,
        )
    elif isinstance(primitive, TextPrimitive):
        draw_text(
            canvas,
            primitive.x,
            primitive.y,
            primitive.text,
            primitive.color,
            anchor=primitive.anchor,
            font_size_px=primitive.font_size_px,
        )
    else:
        LOGGER.warning("skipping unsupported primitive %r", type(primitive).__name__)

from __future__ import annotations

import logging
import math
from typing import Any

from plotui.disposition import Disposition
from plotui.geometry.points import paired_finite
from plotui.primitives import CirclePrimitive
from plotui.scales import build_transform, map_to_pixels
from plotui.style import ScatterStyle
from plotui.viewport import Rect


LOGGER = logging.getLogger(__name__)


def _fully_visible(circle: CirclePrimitive, rect: Rect) -> bool:
    clamped = circle.bounding_rect.intersection(rect)
    if clamped is None:
        return False
    return math.isclose(clamped.width, circle.diameter, abs_tol=1e-9) and math.isclose(
        clamped.height, circle.diameter, abs_tol=1e-9
    )


def scatter_geometry(
    x: Any,
    y: Any,
    disposition: Disposition,
    rect: Rect,
    style: ScatterStyle = ScatterStyle(),
) -> list[CirclePrimitive]:
    xs, ys = paired_finite(x, y)
    if xs.size == 0:
        return []

    transform = build_transform(disposition, rect)
    px, py = map_to_pixels(xs, ys, transform)

    fills: list[CirclePrimitive] = []
    for cx, cy in zip(px.tolist(), py.tolist()):
        circle = CirclePrimitive(cx=cx, cy=cy, diameter=style.size, fill=style.color)
        # Circles cut by the plot edge are dropped rather than drawn partially.
        if _fully_visible(circle, rect):
            fills.append(circle)
    if len(fills) < xs.size:
        LOGGER.debug("skipped %d scatter point(s) crossing the plot edge", xs.size - len(fills))

    if style.stroke.line_width <= 0:
        return fills
    outlines = [CirclePrimitive(cx=c.cx, cy=c.cy, diameter=c.diameter, stroke=style.stroke) for c in fills]
    return fills + outlines

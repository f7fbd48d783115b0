from __future__ import annotations

from typing import Any

from plotui.disposition import Disposition
from plotui.geometry.points import paired_finite
from plotui.primitives import PathPrimitive
from plotui.scales import build_transform, map_to_pixels
from plotui.style import LineStyle
from plotui.viewport import Rect


def line_geometry(
    x: Any,
    y: Any,
    disposition: Disposition,
    rect: Rect,
    style: LineStyle = LineStyle(),
) -> list[PathPrimitive]:
    """Return the filled area under the line followed by the stroked line.

    Points are connected in the order given. The area is closed down to the
    ``y = 0`` pixel row, clamped into ``rect``.
    """
    xs, ys = paired_finite(x, y)
    if xs.size == 0:
        return []

    transform = build_transform(disposition, rect)
    px, py = map_to_pixels(xs, ys, transform)
    points = tuple((float(a), float(b)) for a, b in zip(px.tolist(), py.tolist()))
    baseline = min(max(transform.y(0.0), rect.min_y), rect.max_y)

    area = PathPrimitive(
        points=((points[0][0], baseline),) + points + ((points[-1][0], baseline),),
        closed=True,
        fill=style.fill,
    )
    line = PathPrimitive(points=points, closed=False, stroke=style.stroke)
    return [area, line]

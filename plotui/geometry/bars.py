from __future__ import annotations

import logging
from typing import Any

from plotui.disposition import Disposition
from plotui.geometry.points import paired_finite
from plotui.primitives import BarPrimitive, RectPrimitive
from plotui.scales import build_transform, map_to_pixels
from plotui.style import BarStyle
from plotui.viewport import Rect


LOGGER = logging.getLogger(__name__)


def bar_geometry(
    x: Any,
    y: Any,
    disposition: Disposition,
    rect: Rect,
    style: BarStyle = BarStyle(),
) -> list[BarPrimitive]:
    """Build one bar per point, growing from ``y = 0`` towards the value.

    Bars are clipped to ``rect``; a bar with no visible area is left out.
    Only the end away from the baseline is rounded: a square overlay of
    height ``min(bar height, corner_radius)`` covers the baseline end.
    """
    xs, ys = paired_finite(x, y)
    if xs.size == 0:
        return []

    transform = build_transform(disposition, rect)
    px, py = map_to_pixels(xs, ys, transform)
    baseline = transform.y(0.0)
    half_width = style.width / 2.0

    out: list[BarPrimitive] = []
    skipped = 0
    for i in range(xs.size):
        center = float(px[i])
        value_y = float(py[i])
        bar = Rect.from_edges(center - half_width, min(baseline, value_y), center + half_width, max(baseline, value_y))
        clipped = bar.intersection(rect)
        if clipped is None:
            skipped += 1
            continue

        overlay_h = min(clipped.height, style.corner_radius)
        if ys[i] >= 0:
            overlay_y = clipped.max_y - overlay_h
        else:
            overlay_y = clipped.min_y
        out.append(
            BarPrimitive(
                rounded=RectPrimitive(rect=clipped, fill=style.fill, corner_radius=style.corner_radius),
                overlay=RectPrimitive(
                    rect=Rect(x=clipped.x, y=overlay_y, width=clipped.width, height=overlay_h),
                    fill=style.fill,
                ),
            )
        )
    if skipped:
        LOGGER.debug("skipped %d bar(s) outside the plot area", skipped)
    return out

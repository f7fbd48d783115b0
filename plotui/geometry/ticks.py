from __future__ import annotations

import logging
from typing import Iterable

from plotui.disposition import Disposition
from plotui.primitives import Primitive, SegmentPrimitive, TextAnchor, TextPrimitive
from plotui.scales import build_transform
from plotui.style import TickLabelStyle, TickStyle
from plotui.ticks import Tick
from plotui.viewport import Rect, Viewport


LOGGER = logging.getLogger(__name__)


def label_anchor(style: TickLabelStyle, tick_rect: Rect, padding: float) -> tuple[float, float, TextAnchor] | None:
    """Where a tick's label goes relative to the tick line's bounding box."""
    if style == "empty":
        return None
    if style == "bottom":
        return (tick_rect.max_x, tick_rect.max_y + padding, "center")
    if style == "bottom_trailing":
        return (tick_rect.max_x + padding / 4.0, tick_rect.max_y - padding, "top_left")
    if style == "trailing":
        return (tick_rect.max_x + padding / 3.0, tick_rect.max_y - padding * 2.0 / 3.0, "top_left")
    raise ValueError(f"unsupported tick label style: {style}")


def tick_geometry(
    tick: Tick,
    disposition: Disposition,
    viewport: Viewport,
    frame_size: tuple[float, float],
    style: TickStyle = TickStyle(),
) -> list[Primitive]:
    """Line plus optional label for one tick; empty when the tick is off the plot area.

    Vertical ticks run from the top of the plot area to the bottom of the
    frame, horizontal ones from the plot's leading edge to the frame's
    trailing edge, so they extend into the inset margins. Labels of
    horizontal ticks are anchored to the plot area's trailing edge and sit
    in the trailing inset.
    """
    frame_w, frame_h = frame_size
    rect = viewport.inset(Rect.from_size(frame_w, frame_h))
    transform = build_transform(disposition, rect)

    if tick.orientation == "vertical":
        x = transform.x(tick.value)
        if not rect.contains_x(x):
            return []
        segment = SegmentPrimitive(x1=x, y1=rect.min_y, x2=x, y2=float(frame_h), stroke=style.stroke)
        label_box = segment.bounding_rect
    else:
        y = transform.y(tick.value)
        if not rect.contains_y(y):
            return []
        segment = SegmentPrimitive(x1=rect.min_x, y1=y, x2=float(frame_w), y2=y, stroke=style.stroke)
        label_box = Rect.from_edges(rect.min_x, y, rect.max_x, y)

    out: list[Primitive] = [segment]
    anchor = label_anchor(style.label_style, label_box, style.padding)
    if anchor is not None and tick.label:
        ax, ay, kind = anchor
        out.append(
            TextPrimitive(x=ax, y=ay, text=tick.label, color=style.label_color, anchor=kind, font_size_px=style.font_size_px)
        )
    return out


def ticks_geometry(
    ticks: Iterable[Tick],
    disposition: Disposition,
    viewport: Viewport,
    frame_size: tuple[float, float],
    style: TickStyle = TickStyle(),
) -> list[Primitive]:
    out: list[Primitive] = []
    hidden = 0
    for tick in ticks:
        parts = tick_geometry(tick, disposition, viewport, frame_size, style)
        if not parts:
            hidden += 1
        out.extend(parts)
    if hidden:
        LOGGER.debug("%d tick(s) fall outside the plot area", hidden)
    return out

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from pathlib import Path
from typing import Any, Sequence

import numpy as np
from PIL import Image

from plotui.context import RenderContext
from plotui.disposition import Disposition, joined
from plotui.geometry import ticks_geometry
from plotui.primitives import RGBA, Primitive, StrokeStyle
from plotui.raster import FrameCache, rasterize
from plotui.series import ChartContent
from plotui.style import WHITE, TickLabelStyle
from plotui.ticks import Tick, TickOrientation, explicit_ticks, partition_ticks
from plotui.viewport import Rect, Viewport


LOGGER = logging.getLogger(__name__)

DEFAULT_X_PARTITIONS = 10
DEFAULT_Y_PARTITIONS = 4


@dataclass(frozen=True)
class AxisTicks:
    """Either an automatic partition count or explicit values with labels."""

    partitions: int | None = None
    values: tuple[float, ...] | None = None
    labels: tuple[str, ...] | None = None

    def resolve(self, disposition: Disposition, orientation: TickOrientation) -> list[Tick]:
        if self.values is not None:
            return explicit_ticks(self.values, self.labels, orientation)
        return partition_ticks(disposition, self.partitions or 1, orientation)


def _axis_ticks(partitions: int | None, values: Sequence[float] | None, labels: Sequence[str] | None) -> AxisTicks:
    if values is not None:
        return AxisTicks(
            values=tuple(float(v) for v in values),
            labels=tuple(str(label) for label in labels) if labels is not None else None,
        )
    if partitions is None:
        raise ValueError("pass either a partition count or explicit tick values")
    if partitions < 1:
        raise ValueError("partitions must be >= 1")
    return AxisTicks(partitions=int(partitions))


@dataclass
class Plot:
    """Container that lays chart content and axis ticks out on one drawing surface.

    Content dispositions are joined into one window, and the context's own
    disposition overrides that window field by field. Every content is then
    drawn against the same window so that layers line up.

    X-axis ticks are vertical lines and y-axis ticks are horizontal lines.
    """

    contents: list[ChartContent] = field(default_factory=list)
    context: RenderContext = field(default_factory=RenderContext)
    background: RGBA = WHITE

    _x_ticks: AxisTicks | None = field(default_factory=lambda: AxisTicks(partitions=DEFAULT_X_PARTITIONS))
    _y_ticks: AxisTicks | None = field(default_factory=lambda: AxisTicks(partitions=DEFAULT_Y_PARTITIONS))
    _cache: FrameCache = field(default_factory=FrameCache)

    def add(self, content: ChartContent) -> "Plot":
        self.contents.append(content)
        return self

    def content_disposition(
        self,
        *,
        min_x: float | None = None,
        max_x: float | None = None,
        min_y: float | None = None,
        max_y: float | None = None,
    ) -> "Plot":
        self.context = self.context.with_disposition(Disposition(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y))
        return self

    def viewport(
        self,
        *,
        top: float | None = None,
        leading: float | None = None,
        bottom: float | None = None,
        trailing: float | None = None,
    ) -> "Plot":
        insets = Viewport(top=top or 0.0, leading=leading or 0.0, bottom=bottom or 0.0, trailing=trailing or 0.0)
        self.context = self.context.with_viewport(insets)
        return self

    def tick_insets(
        self,
        *,
        top: float | None = None,
        leading: float | None = None,
        bottom: float | None = None,
        trailing: float | None = None,
    ) -> "Plot":
        return self.viewport(top=top, leading=leading, bottom=bottom, trailing=trailing)

    def tick_stroke(self, stroke: StrokeStyle) -> "Plot":
        ctx = self.context
        self.context = ctx.with_tick_style(
            horizontal=replace(ctx.horizontal_tick_style, stroke=stroke),
            vertical=replace(ctx.vertical_tick_style, stroke=stroke),
        )
        return self

    def tick_color(self, color: RGBA) -> "Plot":
        ctx = self.context
        self.context = ctx.with_tick_style(
            horizontal=replace(
                ctx.horizontal_tick_style,
                stroke=replace(ctx.horizontal_tick_style.stroke, color=color),
                label_color=color,
            ),
            vertical=replace(
                ctx.vertical_tick_style,
                stroke=replace(ctx.vertical_tick_style.stroke, color=color),
                label_color=color,
            ),
        )
        return self

    def tick_font_size(self, font_size_px: float) -> "Plot":
        if font_size_px <= 0:
            raise ValueError("font size must be > 0")
        ctx = self.context
        self.context = ctx.with_tick_style(
            horizontal=replace(ctx.horizontal_tick_style, font_size_px=float(font_size_px)),
            vertical=replace(ctx.vertical_tick_style, font_size_px=float(font_size_px)),
        )
        return self

    def x_tick_label_style(self, style: TickLabelStyle) -> "Plot":
        self.context = self.context.with_tick_style(vertical=replace(self.context.vertical_tick_style, label_style=style))
        return self

    def y_tick_label_style(self, style: TickLabelStyle) -> "Plot":
        self.context = self.context.with_tick_style(
            horizontal=replace(self.context.horizontal_tick_style, label_style=style)
        )
        return self

    def x_ticks(
        self,
        partitions: int | None = None,
        *,
        values: Sequence[float] | None = None,
        labels: Sequence[str] | None = None,
    ) -> "Plot":
        self._x_ticks = _axis_ticks(partitions, values, labels)
        return self

    def y_ticks(
        self,
        partitions: int | None = None,
        *,
        values: Sequence[float] | None = None,
        labels: Sequence[str] | None = None,
    ) -> "Plot":
        self._y_ticks = _axis_ticks(partitions, values, labels)
        return self

    def hide_x_ticks(self) -> "Plot":
        self._x_ticks = None
        return self

    def hide_y_ticks(self) -> "Plot":
        self._y_ticks = None
        return self

    def disposition(self) -> Disposition:
        return self.context.disposition.merge(joined(*(content.disposition for content in self.contents)))

    def ticks(self) -> tuple[list[Tick], list[Tick]]:
        disposition = self.disposition()
        x_ticks = self._x_ticks.resolve(disposition, "vertical") if self._x_ticks is not None else []
        y_ticks = self._y_ticks.resolve(disposition, "horizontal") if self._y_ticks is not None else []
        return x_ticks, y_ticks

    def plot_rect(self, width: float, height: float) -> Rect:
        return self.context.viewport.inset(Rect.from_size(width, height))

    def layout(self, width: float, height: float) -> list[Primitive]:
        """Primitives in paint order: x ticks, y ticks, then contents as added."""
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        disposition = self.disposition()
        viewport = self.context.viewport
        rect = viewport.inset(Rect.from_size(width, height))
        if rect.is_empty:
            LOGGER.debug("viewport insets leave no plot area in %sx%s frame", width, height)

        x_ticks, y_ticks = self.ticks()
        out: list[Primitive] = []
        out.extend(ticks_geometry(x_ticks, disposition, viewport, (width, height), self.context.vertical_tick_style))
        out.extend(ticks_geometry(y_ticks, disposition, viewport, (width, height), self.context.horizontal_tick_style))
        for content in self.contents:
            out.extend(content.geometry(content.resolve_disposition(disposition), rect))
        return out

    def _frame_key(self, width: int, height: int) -> tuple[Any, ...]:
        return (
            width,
            height,
            self.background,
            self.disposition().bounds,
            self.context,
            self._x_ticks,
            self._y_ticks,
            tuple((c.kind, c.data.digest(), c.style, c.disposition.bounds) for c in self.contents),
        )

    def to_rgba(self, width: int, height: int) -> np.ndarray:
        key = self._frame_key(width, height)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        frame = rasterize(self.layout(width, height), width, height, background=self.background)
        self._cache.put(key, frame)
        return frame

    def save_png(self, path: str | Path, width: int, height: int) -> Path:
        out = Path(path)
        Image.fromarray(self.to_rgba(width, height)).save(out, format="PNG")
        return out

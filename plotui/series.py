from __future__ import annotations

from dataclasses import dataclass, field, replace
import hashlib
from typing import Literal, Union

import numpy as np

from plotui.disposition import Disposition, joined
from plotui.geometry import bar_geometry, line_geometry, scatter_geometry
from plotui.primitives import RGBA, BarPrimitive, CirclePrimitive, Fill, PathPrimitive, StrokeStyle
from plotui.style import BarStyle, LineStyle, ScatterStyle
from plotui.viewport import Rect


ContentKind = Literal["bar", "line", "scatter"]


@dataclass(frozen=True, eq=False)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    mask: np.ndarray

    @property
    def finite_x(self) -> np.ndarray:
        return self.x[self.mask]

    @property
    def finite_y(self) -> np.ndarray:
        return self.y[self.mask]

    def digest(self) -> str:
        h = hashlib.sha1()
        h.update(np.ascontiguousarray(self.x).tobytes())
        h.update(np.ascontiguousarray(self.y).tobytes())
        return h.hexdigest()


@dataclass(frozen=True, eq=False)
class BarSeries:
    data: SeriesData
    disposition: Disposition
    style: BarStyle = field(default_factory=BarStyle)
    kind: Literal["bar"] = field(default="bar", init=False)

    @classmethod
    def from_data(cls, data: SeriesData, disposition: Disposition | None = None) -> "BarSeries":
        if disposition is None:
            disposition = Disposition.from_data(data.finite_x, data.finite_y)
            if data.finite_y.size:
                # Bars grow from zero, so the baseline belongs in the window.
                disposition = joined(disposition, Disposition(min_y=0.0, max_y=0.0))
        return cls(data=data, disposition=disposition)

    def resolve_disposition(self, ambient: Disposition) -> Disposition:
        return ambient.merge(self.disposition)

    def geometry(self, disposition: Disposition, rect: Rect) -> list[BarPrimitive]:
        return bar_geometry(self.data.finite_x, self.data.finite_y, disposition, rect, self.style)

    def with_disposition(self, disposition: Disposition) -> "BarSeries":
        return replace(self, disposition=disposition)

    def fill(self, fill: Fill) -> "BarSeries":
        return replace(self, style=replace(self.style, fill=fill))

    def bar_width(self, width: float) -> "BarSeries":
        return replace(self, style=replace(self.style, width=float(width)))

    def corner_radius(self, radius: float) -> "BarSeries":
        return replace(self, style=replace(self.style, corner_radius=float(radius)))


@dataclass(frozen=True, eq=False)
class LineSeries:
    data: SeriesData
    disposition: Disposition
    style: LineStyle = field(default_factory=LineStyle)
    kind: Literal["line"] = field(default="line", init=False)

    @classmethod
    def from_data(cls, data: SeriesData, disposition: Disposition | None = None) -> "LineSeries":
        if disposition is None:
            disposition = Disposition.from_data(data.finite_x, data.finite_y)
        return cls(data=data, disposition=disposition)

    def resolve_disposition(self, ambient: Disposition) -> Disposition:
        return ambient.merge(self.disposition)

    def geometry(self, disposition: Disposition, rect: Rect) -> list[PathPrimitive]:
        return line_geometry(self.data.finite_x, self.data.finite_y, disposition, rect, self.style)

    def with_disposition(self, disposition: Disposition) -> "LineSeries":
        return replace(self, disposition=disposition)

    def line_stroke(self, stroke: StrokeStyle) -> "LineSeries":
        return replace(self, style=replace(self.style, stroke=stroke))

    def line_color(self, color: RGBA) -> "LineSeries":
        return self.line_stroke(replace(self.style.stroke, color=color))

    def line_fill(self, fill: Fill | None) -> "LineSeries":
        return replace(self, style=replace(self.style, fill=fill))


@dataclass(frozen=True, eq=False)
class ScatterSeries:
    data: SeriesData
    disposition: Disposition
    style: ScatterStyle = field(default_factory=ScatterStyle)
    kind: Literal["scatter"] = field(default="scatter", init=False)

    @classmethod
    def from_data(cls, data: SeriesData, disposition: Disposition | None = None) -> "ScatterSeries":
        if disposition is None:
            disposition = Disposition.from_data(data.finite_x, data.finite_y)
        return cls(data=data, disposition=disposition)

    def resolve_disposition(self, ambient: Disposition) -> Disposition:
        return ambient.merge(self.disposition)

    def geometry(self, disposition: Disposition, rect: Rect) -> list[CirclePrimitive]:
        return scatter_geometry(self.data.finite_x, self.data.finite_y, disposition, rect, self.style)

    def with_disposition(self, disposition: Disposition) -> "ScatterSeries":
        return replace(self, disposition=disposition)

    def scatter_size(self, size: float) -> "ScatterSeries":
        return replace(self, style=replace(self.style, size=float(size)))

    def scatter_color(self, color: RGBA) -> "ScatterSeries":
        return replace(self, style=replace(self.style, color=color))

    def scatter_stroke(self, stroke: StrokeStyle | None = None, *, line_width: float | None = None) -> "ScatterSeries":
        if stroke is None:
            if line_width is None:
                raise ValueError("scatter_stroke needs a stroke style or a line_width")
            stroke = replace(self.style.stroke, line_width=float(line_width))
        return replace(self, style=replace(self.style, stroke=stroke))

    def scatter_stroke_color(self, color: RGBA) -> "ScatterSeries":
        return self.scatter_stroke(replace(self.style.stroke, color=color))


ChartContent = Union[BarSeries, LineSeries, ScatterSeries]

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from plotui.viewport import Rect


RGBA = tuple[int, int, int, int]

TextAnchor = Literal["center", "top_left"]


@dataclass(frozen=True)
class StrokeStyle:
    color: RGBA = (128, 128, 128, 255)
    line_width: float = 1.0
    dash: tuple[float, ...] = ()


@dataclass(frozen=True)
class VerticalGradient:
    """Fill that blends from ``top`` at the shape's top edge to ``bottom``."""

    top: RGBA
    bottom: RGBA

    def at(self, t: float) -> RGBA:
        t = max(0.0, min(1.0, t))
        return tuple(int(round(a + (b - a) * t)) for a, b in zip(self.top, self.bottom))  # type: ignore[return-value]


Fill = Union[RGBA, VerticalGradient]


@dataclass(frozen=True)
class RectPrimitive:
    rect: Rect
    fill: Fill
    corner_radius: float = 0.0


@dataclass(frozen=True)
class BarPrimitive:
    """A bar drawn as a rounded rectangle plus a square baseline overlay."""

    rounded: RectPrimitive
    overlay: RectPrimitive


@dataclass(frozen=True)
class PathPrimitive:
    points: tuple[tuple[float, float], ...]
    closed: bool = False
    fill: Fill | None = None
    stroke: StrokeStyle | None = None


@dataclass(frozen=True)
class CirclePrimitive:
    cx: float
    cy: float
    diameter: float
    fill: RGBA | None = None
    stroke: StrokeStyle | None = None

    @property
    def bounding_rect(self) -> Rect:
        r = self.diameter / 2.0
        return Rect(x=self.cx - r, y=self.cy - r, width=self.diameter, height=self.diameter)


@dataclass(frozen=True)
class SegmentPrimitive:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: StrokeStyle

    @property
    def bounding_rect(self) -> Rect:
        return Rect.from_edges(min(self.x1, self.x2), min(self.y1, self.y2), max(self.x1, self.x2), max(self.y1, self.y2))


@dataclass(frozen=True)
class TextPrimitive:
    x: float
    y: float
    text: str
    color: RGBA
    anchor: TextAnchor = "top_left"
    font_size_px: float = 11.0


Primitive = Union[RectPrimitive, BarPrimitive, PathPrimitive, CirclePrimitive, SegmentPrimitive, TextPrimitive]

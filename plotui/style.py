from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from plotui.primitives import RGBA, Fill, StrokeStyle, VerticalGradient


GRAY: RGBA = (142, 142, 147, 255)
GREEN: RGBA = (52, 199, 89, 255)
BLUE: RGBA = (0, 122, 255, 255)
WHITE: RGBA = (255, 255, 255, 255)

TickLabelStyle = Literal["bottom", "bottom_trailing", "trailing", "empty"]


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = int(max(0.0, min(1.0, alpha)) * 255)
        return (r, g, b, a)
    r, g, b, a = color
    out_a = int(max(0.0, min(1.0, alpha)) * a)
    return (r, g, b, out_a)


def _fade(color: RGBA, alpha: float) -> RGBA:
    return coerce_color(color[:3], alpha * color[3] / 255.0)


@dataclass(frozen=True)
class BarStyle:
    fill: Fill = GRAY
    width: float = 5.0
    corner_radius: float = 2.0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("bar width must be > 0")
        if self.corner_radius < 0:
            raise ValueError("bar corner radius must be >= 0")


@dataclass(frozen=True)
class LineStyle:
    stroke: StrokeStyle = field(default_factory=lambda: StrokeStyle(color=GREEN, line_width=2.0))
    fill: Fill | None = field(default_factory=lambda: VerticalGradient(top=_fade(GREEN, 0.5), bottom=_fade(GREEN, 0.0)))


@dataclass(frozen=True)
class ScatterStyle:
    color: RGBA = BLUE
    size: float = 7.0
    stroke: StrokeStyle = field(default_factory=lambda: StrokeStyle(color=WHITE, line_width=2.0))

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("scatter size must be > 0")


@dataclass(frozen=True)
class TickStyle:
    stroke: StrokeStyle = field(default_factory=lambda: StrokeStyle(color=GRAY, line_width=0.2))
    label_color: RGBA = GRAY
    font_size_px: float = 11.0
    padding: float = 10.0
    label_style: TickLabelStyle = "bottom"


def tiny_dashed(color: RGBA = GRAY) -> StrokeStyle:
    return StrokeStyle(color=color, line_width=0.2, dash=(2.0,))

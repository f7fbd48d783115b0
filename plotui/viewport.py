from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal


Edge = Literal["top", "leading", "bottom", "trailing"]

ALL_EDGES: tuple[Edge, ...] = ("top", "leading", "bottom", "trailing")


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel rectangle; y grows downward."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        # Frozen, so clamp through object.__setattr__.
        if self.width < 0:
            object.__setattr__(self, "width", 0.0)
        if self.height < 0:
            object.__setattr__(self, "height", 0.0)

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        return cls(x=0.0, y=0.0, width=float(width), height=float(height))

    @classmethod
    def from_edges(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains_x(self, x: float) -> bool:
        return self.min_x <= x <= self.max_x

    def contains_y(self, y: float) -> bool:
        return self.min_y <= y <= self.max_y

    def intersection(self, other: "Rect") -> "Rect | None":
        x0 = max(self.min_x, other.min_x)
        y0 = max(self.min_y, other.min_y)
        x1 = min(self.max_x, other.max_x)
        y1 = min(self.max_y, other.max_y)
        if x1 <= x0 or y1 <= y0:
            return None
        return Rect.from_edges(x0, y0, x1, y1)


@dataclass(frozen=True)
class Viewport:
    """Pixel insets subtracted from a drawing surface to get the plot area."""

    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    def __post_init__(self) -> None:
        if min(self.top, self.leading, self.bottom, self.trailing) < 0:
            raise ValueError("viewport insets must be >= 0")

    @classmethod
    def uniform(cls, length: float, edges: Iterable[Edge] = ALL_EDGES) -> "Viewport":
        chosen = set(edges)
        unknown = chosen.difference(ALL_EDGES)
        if unknown:
            raise ValueError(f"unknown viewport edges: {sorted(unknown)}")
        return cls(**{edge: float(length) for edge in chosen})

    def inset(self, rect: Rect) -> Rect:
        return Rect(
            x=rect.x + self.leading,
            y=rect.y + self.top,
            width=max(0.0, rect.width - (self.leading + self.trailing)),
            height=max(0.0, rect.height - (self.top + self.bottom)),
        )

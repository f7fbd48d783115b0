from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, NamedTuple

import numpy as np


class Bounds(NamedTuple):
    left: float
    right: float
    bottom: float
    top: float

    @property
    def width(self) -> float:
        return abs(self.right - self.left)

    @property
    def height(self) -> float:
        return abs(self.top - self.bottom)


def _effective_max(raw_max: float | None, effective_min: float) -> float:
    upper = 1.0 if raw_max is None else float(raw_max)
    return max(upper, effective_min + 1.0)


@dataclass(frozen=True, eq=False)
class Disposition:
    """Data-space window that chart content is plotted against.

    Each bound is optional so that an unset bound can be told apart from an
    explicit zero. Unset minimums resolve to ``0``; maximums resolve to at
    least ``min + 1``, which keeps the effective width and height positive
    even for empty or single-point data.

    Two dispositions compare equal when their effective bounds match.
    """

    min_x: float | None = None
    max_x: float | None = None
    min_y: float | None = None
    max_y: float | None = None

    def __post_init__(self) -> None:
        for name in ("min_x", "max_x", "min_y", "max_y"):
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")

    @property
    def effective_min_x(self) -> float:
        return 0.0 if self.min_x is None else float(self.min_x)

    @property
    def effective_max_x(self) -> float:
        return _effective_max(self.max_x, self.effective_min_x)

    @property
    def effective_min_y(self) -> float:
        return 0.0 if self.min_y is None else float(self.min_y)

    @property
    def effective_max_y(self) -> float:
        return _effective_max(self.max_y, self.effective_min_y)

    @property
    def bounds(self) -> Bounds:
        return Bounds(
            left=self.effective_min_x,
            right=self.effective_max_x,
            bottom=self.effective_min_y,
            top=self.effective_max_y,
        )

    @property
    def width(self) -> float:
        return abs(self.effective_max_x - self.effective_min_x)

    @property
    def height(self) -> float:
        return abs(self.effective_max_y - self.effective_min_y)

    @property
    def is_empty(self) -> bool:
        return self.min_x is None and self.max_x is None and self.min_y is None and self.max_y is None

    def merge(self, other: "Disposition") -> "Disposition":
        """Fill every bound missing here from ``other``; present bounds win."""
        return Disposition(
            min_x=self.min_x if self.min_x is not None else other.min_x,
            max_x=self.max_x if self.max_x is not None else other.max_x,
            min_y=self.min_y if self.min_y is not None else other.min_y,
            max_y=self.max_y if self.max_y is not None else other.max_y,
        )

    def partition(self, x_count: int, y_count: int) -> tuple[np.ndarray, np.ndarray]:
        """Split both axes into evenly spaced values, ``count + 1`` per axis."""
        x_parts = max(1, int(x_count))
        y_parts = max(1, int(y_count))
        xs = np.linspace(self.effective_min_x, self.effective_max_x, x_parts + 1, dtype=np.float64)
        ys = np.linspace(self.effective_min_y, self.effective_max_y, y_parts + 1, dtype=np.float64)
        return xs, ys

    @classmethod
    def from_data(cls, x: Any, y: Any) -> "Disposition":
        xs = _finite(x)
        ys = _finite(y)
        return cls(
            min_x=float(np.min(xs)) if xs.size else None,
            max_x=float(np.max(xs)) if xs.size else None,
            min_y=float(np.min(ys)) if ys.size else None,
            max_y=float(np.max(ys)) if ys.size else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Disposition):
            return NotImplemented
        return self.bounds == other.bounds

    def __hash__(self) -> int:
        return hash(self.bounds)


def joined(*dispositions: Disposition) -> Disposition:
    """Smallest disposition containing every layer's present bounds."""
    min_xs = [d.min_x for d in dispositions if d.min_x is not None]
    max_xs = [d.max_x for d in dispositions if d.max_x is not None]
    min_ys = [d.min_y for d in dispositions if d.min_y is not None]
    max_ys = [d.max_y for d in dispositions if d.max_y is not None]
    return Disposition(
        min_x=min(min_xs) if min_xs else None,
        max_x=max(max_xs) if max_xs else None,
        min_y=min(min_ys) if min_ys else None,
        max_y=max(max_ys) if max_ys else None,
    )


def _finite(values: Any) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    return arr[np.isfinite(arr)]

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from plotui.disposition import Bounds, Disposition
from plotui.errors import DegenerateRangeError
from plotui.viewport import Rect


@dataclass(frozen=True)
class PlotTransform:
    """Affine data-to-pixel mapping: ``px = x*sx + tx`` and ``py = ty - y*sy``."""

    sx: float
    tx: float
    sy: float
    ty: float

    def x(self, value: float) -> float:
        return value * self.sx + self.tx

    def y(self, value: float) -> float:
        return self.ty - value * self.sy

    def inverse_x(self, px: float) -> float:
        if self.sx == 0:
            raise DegenerateRangeError("cannot invert x mapping onto a zero-width viewport")
        return (px - self.tx) / self.sx

    def inverse_y(self, py: float) -> float:
        if self.sy == 0:
            raise DegenerateRangeError("cannot invert y mapping onto a zero-height viewport")
        return (self.ty - py) / self.sy


def _as_bounds(disposition: Disposition | Bounds) -> Bounds:
    if isinstance(disposition, Disposition):
        return disposition.bounds
    return disposition


def build_transform(disposition: Disposition | Bounds, rect: Rect) -> PlotTransform:
    bounds = _as_bounds(disposition)
    width = bounds.width
    height = bounds.height
    if not np.isfinite(width) or width <= 0:
        raise DegenerateRangeError(f"disposition width must be > 0, got {width}")
    if not np.isfinite(height) or height <= 0:
        raise DegenerateRangeError(f"disposition height must be > 0, got {height}")
    sx = rect.width / width
    sy = rect.height / height
    return PlotTransform(
        sx=sx,
        tx=rect.min_x - bounds.left * sx,
        sy=sy,
        ty=rect.max_y + bounds.bottom * sy,
    )


def translate_x(disposition: Disposition | Bounds, rect: Rect, value: float) -> float:
    return build_transform(disposition, rect).x(value)


def translate_y(disposition: Disposition | Bounds, rect: Rect, value: float) -> float:
    return build_transform(disposition, rect).y(value)


def project(disposition: Disposition | Bounds, rect: Rect, point: tuple[float, float]) -> tuple[float, float]:
    transform = build_transform(disposition, rect)
    x, y = point
    return (transform.x(x), transform.y(y))


def unproject_x(disposition: Disposition | Bounds, rect: Rect, px: float) -> float:
    return build_transform(disposition, rect).inverse_x(px)


def unproject_y(disposition: Disposition | Bounds, rect: Rect, py: float) -> float:
    return build_transform(disposition, rect).inverse_y(py)


def map_to_pixels(x: np.ndarray, y: np.ndarray, transform: PlotTransform) -> tuple[np.ndarray, np.ndarray]:
    px = np.asarray(x, dtype=np.float64) * transform.sx + transform.tx
    py = transform.ty - np.asarray(y, dtype=np.float64) * transform.sy
    return px, py


def format_tick(value: float) -> str:
    if not np.isfinite(value):
        return str(value)
    out = f"{value:.2f}"
    # Small negatives round to "-0.00".
    if out == "-0.00":
        out = "0.00"
    return out


def format_ticks(values: np.ndarray) -> list[str]:
    return [format_tick(float(v)) for v in np.asarray(values, dtype=np.float64)]

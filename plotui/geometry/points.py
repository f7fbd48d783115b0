from __future__ import annotations

import logging
from typing import Any

import numpy as np


LOGGER = logging.getLogger(__name__)


def paired_finite(x: Any, y: Any) -> tuple[np.ndarray, np.ndarray]:
    """Truncate ``x``/``y`` to the shorter length and drop non-finite pairs."""
    xs = np.asarray(x, dtype=np.float64).reshape(-1)
    ys = np.asarray(y, dtype=np.float64).reshape(-1)
    n = min(xs.size, ys.size)
    if xs.size != ys.size:
        LOGGER.debug("truncating series to %d points (x=%d, y=%d)", n, xs.size, ys.size)
    xs = xs[:n]
    ys = ys[:n]
    mask = np.isfinite(xs) & np.isfinite(ys)
    return xs[mask], ys[mask]

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
import logging
from typing import Any

import numpy as np

from plotui.errors import PlotDataError
from plotui.series import SeriesData


LOGGER = logging.getLogger(__name__)

try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]

_NUMERIC_KINDS = frozenset("iufb")


def normalize_xy(x: Any, y: Any, *, data: Any = None) -> SeriesData:
    """Coerce paired x/y input into float64 arrays of equal length.

    Lengths that differ are truncated to the shorter prefix. Empty input is
    allowed; ``None`` and other non-finite values stay in the arrays but are
    excluded by ``mask``.
    """
    xs = _as_float_array(_lookup(x, data), axis="x")
    ys = _as_float_array(_lookup(y, data), axis="y")

    n = min(xs.size, ys.size)
    if xs.size != ys.size:
        LOGGER.debug("x has %d values and y has %d; keeping the first %d pairs", xs.size, ys.size, n)
        xs, ys = xs[:n], ys[:n]

    return SeriesData(x=xs, y=ys, mask=np.isfinite(xs) & np.isfinite(ys))


def _lookup(value: Any, data: Any) -> Any:
    """Resolve column names against ``data`` and unwrap single-column frames."""
    if data is None:
        if pd is not None and isinstance(value, pd.DataFrame):
            return _only_numeric_column(value)
        return value

    if pd is None:
        raise PlotDataError("pandas is required when using `data=`")
    if not isinstance(data, pd.DataFrame):
        raise PlotDataError("`data` must be a pandas DataFrame")
    if not isinstance(value, str):
        return value
    if value not in data.columns:
        raise PlotDataError(f"column not found: {value}")
    return data[value]


def _only_numeric_column(frame: Any) -> Any:
    numeric = [name for name in frame.columns if pd.api.types.is_numeric_dtype(frame[name])]
    if len(numeric) != 1:
        raise PlotDataError("DataFrame input must contain exactly one numeric column")
    return frame[numeric[0]]


def _as_float_array(value: Any, *, axis: str) -> np.ndarray:
    if value is None:
        raise PlotDataError(f"{axis} input is required")

    if torch is not None and isinstance(value, torch.Tensor):
        if value.ndim != 1:
            raise PlotDataError(f"{axis} must be 1-D")
        return value.detach().cpu().to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        value = np.asarray(list(value), dtype=object)
    elif not isinstance(value, np.ndarray):
        raise PlotDataError(f"unsupported {axis} input type: {type(value)!r}")

    if value.ndim != 1:
        raise PlotDataError(f"{axis} must be 1-D")
    if value.dtype.kind in _NUMERIC_KINDS:
        return value.astype(np.float64, copy=False)
    return np.fromiter((_as_float(item, axis, i) for i, item in enumerate(value.tolist())), dtype=np.float64, count=value.size)


def _as_float(item: Any, axis: str, index: int) -> float:
    if item is None:
        return float("nan")
    if isinstance(item, Decimal):
        return float(item)
    try:
        return float(item)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{axis} contains non-numeric value at index {index}: {item!r}") from exc

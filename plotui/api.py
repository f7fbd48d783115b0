from __future__ import annotations

from typing import Any

from plotui.adapters import normalize_xy
from plotui.context import RenderContext
from plotui.disposition import Disposition
from plotui.plot import Plot
from plotui.series import BarSeries, ChartContent, LineSeries, ScatterSeries


def bar(
    x: Any,
    y: Any,
    *,
    disposition: Disposition | None = None,
    data: Any = None,
) -> BarSeries:
    return BarSeries.from_data(normalize_xy(x, y, data=data), disposition)


def line(
    x: Any,
    y: Any,
    *,
    disposition: Disposition | None = None,
    data: Any = None,
) -> LineSeries:
    return LineSeries.from_data(normalize_xy(x, y, data=data), disposition)


def scatter(
    x: Any,
    y: Any,
    *,
    disposition: Disposition | None = None,
    data: Any = None,
) -> ScatterSeries:
    return ScatterSeries.from_data(normalize_xy(x, y, data=data), disposition)


def plot(*contents: ChartContent, context: RenderContext | None = None) -> Plot:
    return Plot(contents=list(contents), context=context if context is not None else RenderContext())

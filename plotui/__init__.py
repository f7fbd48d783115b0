from plotui.api import bar, line, plot, scatter
from plotui.context import RenderContext
from plotui.disposition import Bounds, Disposition, joined
from plotui.errors import DegenerateRangeError, PlotDataError
from plotui.plot import Plot
from plotui.primitives import StrokeStyle, VerticalGradient
from plotui.scales import PlotTransform, build_transform
from plotui.series import BarSeries, LineSeries, ScatterSeries
from plotui.style import BarStyle, LineStyle, ScatterStyle, TickStyle
from plotui.ticks import Tick
from plotui.viewport import Rect, Viewport

__all__ = [
    "BarSeries",
    "BarStyle",
    "Bounds",
    "DegenerateRangeError",
    "Disposition",
    "LineSeries",
    "LineStyle",
    "Plot",
    "PlotDataError",
    "PlotTransform",
    "Rect",
    "RenderContext",
    "ScatterSeries",
    "ScatterStyle",
    "StrokeStyle",
    "Tick",
    "TickStyle",
    "VerticalGradient",
    "Viewport",
    "bar",
    "build_transform",
    "joined",
    "line",
    "plot",
    "scatter",
]

from .bars import bar_geometry
from .lines import line_geometry
from .markers import scatter_geometry
from .points import paired_finite
from .ticks import label_anchor, tick_geometry, ticks_geometry

__all__ = [
    "bar_geometry",
    "label_anchor",
    "line_geometry",
    "paired_finite",
    "scatter_geometry",
    "tick_geometry",
    "ticks_geometry",
]

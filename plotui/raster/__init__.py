from .canvas import draw_hline, draw_pixel, new_canvas
from .draw_lines import draw_polyline
from .draw_markers import draw_disc, draw_ring
from .draw_shapes import draw_rect, fill_polygon
from .draw_text import draw_text, text_size
from .layers import FrameCache
from .render import draw_primitive, rasterize

__all__ = [
    "FrameCache",
    "draw_disc",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_primitive",
    "draw_rect",
    "draw_ring",
    "draw_text",
    "fill_polygon",
    "new_canvas",
    "rasterize",
    "text_size",
]

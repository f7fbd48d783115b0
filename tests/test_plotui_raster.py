from __future__ import annotations

import unittest

import numpy as np

from plotui import Rect, VerticalGradient
from plotui.primitives import BarPrimitive, CirclePrimitive, PathPrimitive, RectPrimitive, StrokeStyle, TextPrimitive
from plotui.raster import (
    FrameCache,
    draw_disc,
    draw_polyline,
    draw_rect,
    draw_ring,
    fill_polygon,
    new_canvas,
    rasterize,
    text_size,
)
from plotui.raster import draw_text as raster_draw_text


RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


class CanvasTests(unittest.TestCase):
    def test_new_canvas_shape_and_validation(self) -> None:
        canvas = new_canvas(12, 8, color=(1, 2, 3, 4))
        self.assertEqual(canvas.shape, (8, 12, 4))
        self.assertEqual(tuple(canvas[0, 0]), (1, 2, 3, 4))
        with self.assertRaises(ValueError):
            new_canvas(0, 8)

    def test_rect_fill_covers_pixel_centres(self) -> None:
        canvas = new_canvas(10, 10)
        draw_rect(canvas, 2.0, 3.0, 4.0, 5.0, RED)
        mask = np.all(canvas[:, :, :3] == np.asarray([255, 0, 0], dtype=np.uint8), axis=2)
        self.assertEqual(int(mask.sum()), 20)
        self.assertTrue(mask[3, 2])
        self.assertTrue(mask[7, 5])
        self.assertFalse(mask[8, 5])

    def test_rounded_rect_leaves_corners_empty(self) -> None:
        canvas = new_canvas(20, 20)
        draw_rect(canvas, 0.0, 0.0, 20.0, 20.0, RED, corner_radius=6.0)
        self.assertEqual(tuple(canvas[0, 0, :3]), (255, 255, 255))
        self.assertEqual(tuple(canvas[10, 10, :3]), (255, 0, 0))
        self.assertEqual(tuple(canvas[0, 10, :3]), (255, 0, 0))

    def test_gradient_fill_varies_by_row(self) -> None:
        canvas = new_canvas(4, 10, color=(0, 0, 0, 255))
        draw_rect(canvas, 0.0, 0.0, 4.0, 10.0, VerticalGradient(top=(255, 255, 255, 255), bottom=(255, 255, 255, 0)))
        self.assertGreater(int(canvas[0, 1, 0]), int(canvas[9, 1, 0]))

    def test_polygon_fill(self) -> None:
        canvas = new_canvas(10, 10)
        fill_polygon(canvas, [(0.0, 10.0), (0.0, 0.0), (10.0, 10.0)], RED)
        self.assertEqual(tuple(canvas[9, 1, :3]), (255, 0, 0))
        self.assertEqual(tuple(canvas[1, 8, :3]), (255, 255, 255))

    def test_dashed_line_skips_pixels(self) -> None:
        solid = new_canvas(40, 5)
        dashed = new_canvas(40, 5)
        draw_polyline(solid, [(0.0, 2.0), (39.0, 2.0)], BLACK)
        draw_polyline(dashed, [(0.0, 2.0), (39.0, 2.0)], BLACK, dash=(4.0, 4.0))
        solid_count = int(np.sum(solid[2, :, 0] == 0))
        dashed_count = int(np.sum(dashed[2, :, 0] == 0))
        self.assertEqual(solid_count, 40)
        self.assertGreater(dashed_count, 0)
        self.assertLess(dashed_count, solid_count)

    def test_hairline_is_faint(self) -> None:
        canvas = new_canvas(10, 3)
        draw_polyline(canvas, [(0.0, 1.0), (9.0, 1.0)], BLACK, width=0.2)
        self.assertTrue(np.all(canvas[1, :, 0] > 0))
        self.assertTrue(np.all(canvas[1, :, 0] < 255))

    def test_disc_and_ring(self) -> None:
        canvas = new_canvas(21, 21)
        draw_disc(canvas, 10.5, 10.5, 14.0, RED)
        draw_ring(canvas, 10.5, 10.5, 14.0, BLACK, width=2.0)
        self.assertEqual(tuple(canvas[10, 10, :3]), (255, 0, 0))
        self.assertEqual(tuple(canvas[10, 3, :3]), (0, 0, 0))
        self.assertEqual(tuple(canvas[0, 0, :3]), (255, 255, 255))

    def test_text_renderer_uses_antialias_coverage(self) -> None:
        canvas = new_canvas(220, 80, color=(0, 0, 0, 0))
        raster_draw_text(canvas, 10, 20, "Static 1-D Plot", (255, 255, 255, 255), font_size_px=24.0)
        chan = canvas[:, :, 0]
        self.assertTrue(np.any(chan > 0))
        self.assertEqual(int(canvas[0, 0, 3]), 0)

    def test_text_size_is_positive(self) -> None:
        w, h = text_size("10.00", font_size_px=11.0)
        self.assertGreater(w, 0)
        self.assertGreater(h, 0)
        self.assertEqual(text_size("", font_size_px=11.0)[0], 0)


class RasterizeTests(unittest.TestCase):
    def test_primitives_paint_in_order(self) -> None:
        under = RectPrimitive(rect=Rect(x=0.0, y=0.0, width=10.0, height=10.0), fill=RED)
        over = RectPrimitive(rect=Rect(x=0.0, y=0.0, width=5.0, height=10.0), fill=BLACK)
        frame = rasterize([under, over], 10, 10)
        self.assertEqual(tuple(frame[5, 2, :3]), (0, 0, 0))
        self.assertEqual(tuple(frame[5, 7, :3]), (255, 0, 0))

    def test_every_primitive_kind_renders(self) -> None:
        bar = BarPrimitive(
            rounded=RectPrimitive(rect=Rect(x=2.0, y=2.0, width=6.0, height=20.0), fill=RED, corner_radius=2.0),
            overlay=RectPrimitive(rect=Rect(x=2.0, y=20.0, width=6.0, height=2.0), fill=RED),
        )
        prims = [
            bar,
            PathPrimitive(points=((10.0, 30.0), (20.0, 10.0), (30.0, 30.0)), closed=True, fill=RED, stroke=StrokeStyle(color=BLACK)),
            CirclePrimitive(cx=40.0, cy=10.0, diameter=8.0, fill=RED, stroke=StrokeStyle(color=BLACK, line_width=1.0)),
            TextPrimitive(x=2.0, y=34.0, text="ok", color=BLACK, anchor="top_left"),
        ]
        frame = rasterize(prims, 50, 50)
        self.assertEqual(tuple(frame[21, 5, :3]), (255, 0, 0))
        self.assertEqual(tuple(frame[25, 20, :3]), (255, 0, 0))
        self.assertEqual(tuple(frame[10, 40, :3]), (255, 0, 0))
        self.assertFalse(np.all(frame[34:48, 0:20, :3] == 255))

    def test_frame_cache_returns_copies(self) -> None:
        cache = FrameCache()
        frame = new_canvas(2, 2)
        cache.put(("k",), frame)
        hit = cache.get(("k",))
        assert hit is not None
        hit[:, :] = 0
        self.assertTrue(np.array_equal(cache.get(("k",)), frame))
        self.assertIsNone(cache.get(("other",)))


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import importlib
from pathlib import Path
import tempfile
import unittest
from unittest import mock

import numpy as np
from PIL import Image

from plotui import Bounds, Rect, bar, line, plot, scatter
from plotui.primitives import BarPrimitive, PathPrimitive, SegmentPrimitive, TextPrimitive
from plotui.raster import rasterize


RED = (255, 0, 0, 255)


class PlotLayoutTests(unittest.TestCase):
    def test_default_layout_draws_ticks_then_content(self) -> None:
        chart = plot(bar(x=[0.0, 1.0, 2.0], y=[1.0, 2.0, 4.0]))
        prims = chart.layout(200, 100)

        segments = [p for p in prims if isinstance(p, SegmentPrimitive)]
        labels = [p for p in prims if isinstance(p, TextPrimitive)]
        bars = [p for p in prims if isinstance(p, BarPrimitive)]
        self.assertEqual(len(segments), 16)
        self.assertEqual(len(labels), 16)
        self.assertEqual(len(bars), 3)

        # 11 x ticks first, each a vertical segment plus its label.
        for seg in prims[0:22:2]:
            self.assertIsInstance(seg, SegmentPrimitive)
            self.assertEqual(seg.x1, seg.x2)
        for seg in prims[22:32:2]:
            self.assertEqual(seg.y1, seg.y2)
        self.assertTrue(all(isinstance(p, BarPrimitive) for p in prims[32:]))

    def test_default_x_ticks_are_dashed(self) -> None:
        prims = plot(bar(x=[0.0, 1.0], y=[1.0, 2.0])).layout(100, 100)
        vertical = [p for p in prims if isinstance(p, SegmentPrimitive) and p.x1 == p.x2]
        horizontal = [p for p in prims if isinstance(p, SegmentPrimitive) and p.y1 == p.y2]
        self.assertTrue(all(p.stroke.dash for p in vertical))
        self.assertTrue(all(not p.stroke.dash for p in horizontal))

    def test_content_disposition_overrides_joined_bounds(self) -> None:
        chart = plot(bar(x=[0.0, 1.0, 2.0], y=[1.0, 2.0, 4.0]))
        self.assertEqual(chart.disposition().bounds, Bounds(left=0.0, right=2.0, bottom=0.0, top=4.0))

        chart.content_disposition(min_y=-1.0)
        self.assertEqual(chart.disposition().bounds, Bounds(left=0.0, right=2.0, bottom=-1.0, top=4.0))

        chart.content_disposition(min_y=-2.0, max_x=5.0)
        self.assertEqual(chart.disposition().bounds, Bounds(left=0.0, right=5.0, bottom=-2.0, top=4.0))

    def test_layers_share_the_combined_disposition(self) -> None:
        chart = plot(line(x=[0.0, 1.0], y=[0.0, 1.0]), scatter(x=[0.0, 2.0], y=[0.0, 4.0]))
        chart.hide_x_ticks().hide_y_ticks()
        prims = chart.layout(200, 400)

        # Both scatter points sit on the plot edge and are dropped.
        self.assertEqual(len(prims), 2)
        area, stroke = prims
        self.assertIsInstance(area, PathPrimitive)
        self.assertEqual(stroke.points, ((0.0, 400.0), (100.0, 300.0)))

    def test_viewport_insets_plot_area(self) -> None:
        chart = plot(bar(x=[1.0], y=[1.0])).viewport(top=10, leading=20)
        self.assertEqual(chart.plot_rect(200, 100), Rect(x=20.0, y=10.0, width=180.0, height=90.0))

    def test_explicit_tick_values_and_labels(self) -> None:
        chart = plot(bar(x=[0.0, 1.0], y=[1.0, 2.0])).x_ticks(values=[0.5], labels=["half"]).hide_y_ticks()
        texts = [p.text for p in chart.layout(100, 100) if isinstance(p, TextPrimitive)]
        self.assertEqual(texts, ["half"])

    def test_tick_configuration_validation(self) -> None:
        chart = plot()
        with self.assertRaises(ValueError):
            chart.x_ticks()
        with self.assertRaises(ValueError):
            chart.y_ticks(0)
        with self.assertRaises(ValueError):
            chart.tick_font_size(0)
        with self.assertRaises(ValueError):
            chart.layout(0, 10)

    def test_tick_color_keeps_dash_pattern(self) -> None:
        chart = plot().tick_color(RED)
        self.assertEqual(chart.context.vertical_tick_style.stroke.color, RED)
        self.assertEqual(chart.context.vertical_tick_style.label_color, RED)
        self.assertEqual(chart.context.vertical_tick_style.stroke.dash, (2.0,))
        self.assertEqual(chart.context.horizontal_tick_style.stroke.color, RED)

    def test_empty_plot_has_ticks_only(self) -> None:
        prims = plot().layout(100, 100)
        self.assertTrue(prims)
        self.assertTrue(all(isinstance(p, (SegmentPrimitive, TextPrimitive)) for p in prims))


class PlotRenderTests(unittest.TestCase):
    def test_render_is_deterministic(self) -> None:
        chart = plot(
            bar(x=[0.0, 1.0, 2.0, 3.0], y=[2.0, -1.5, 3.5, -2.2]),
            line(x=[0.0, 1.0, 2.0, 3.0], y=[1.0, 4.0, 2.0, 6.0]),
            scatter(x=[0.5, 1.5], y=[1.0, 2.0]),
        ).viewport(bottom=20, trailing=30)

        frame1 = chart.to_rgba(128, 96)
        frame2 = plot(*chart.contents).viewport(bottom=20, trailing=30).to_rgba(128, 96)

        self.assertEqual(frame1.shape, (96, 128, 4))
        self.assertEqual(frame1.dtype, np.uint8)
        self.assertTrue(np.array_equal(frame1, frame2))

    def test_bar_pixels_use_fill_color(self) -> None:
        chart = plot(bar(x=[1.0], y=[2.0]).fill(RED))
        chart.content_disposition(min_x=0.0, max_x=2.0, min_y=0.0, max_y=4.0).hide_x_ticks().hide_y_ticks()
        frame = chart.to_rgba(100, 100)

        self.assertEqual(tuple(frame[75, 49, :3]), (255, 0, 0))
        self.assertEqual(tuple(frame[75, 60, :3]), (255, 255, 255))
        self.assertEqual(tuple(frame[25, 49, :3]), (255, 255, 255))

    def test_y_tick_labels_are_drawn_in_trailing_margin(self) -> None:
        def chart():
            return plot(bar(x=[0.0, 1.0, 2.0], y=[1.0, 2.0, 4.0])).viewport(top=20, leading=20, bottom=40, trailing=60)

        labelled = chart().to_rgba(400, 300)
        unlabelled = chart().y_tick_label_style("empty").to_rgba(400, 300)

        changed = np.argwhere(np.any(labelled != unlabelled, axis=2))
        self.assertTrue(changed.size)
        self.assertGreaterEqual(int(changed[:, 1].min()), 340)

    def test_frame_cache_reuses_unchanged_frame(self) -> None:
        chart = plot(scatter(x=[1.0, 2.0], y=[1.0, 2.0]))
        plot_module = importlib.import_module("plotui.plot")
        with mock.patch.object(plot_module, "rasterize", wraps=rasterize) as spy:
            first = chart.to_rgba(64, 48)
            first[:, :] = 0
            second = chart.to_rgba(64, 48)
            self.assertEqual(spy.call_count, 1)
            self.assertFalse(np.array_equal(first, second))

            chart.content_disposition(max_y=10.0)
            chart.to_rgba(64, 48)
            self.assertEqual(spy.call_count, 2)

    def test_save_png_writes_frame(self) -> None:
        chart = plot(line(x=[0.0, 1.0, 2.0], y=[0.0, 2.0, 1.0]))
        with tempfile.TemporaryDirectory() as tmp:
            out = chart.save_png(Path(tmp) / "chart.png", 80, 60)
            with Image.open(out) as image:
                self.assertEqual(image.size, (80, 60))
                self.assertEqual(image.mode, "RGBA")


if __name__ == "__main__":
    unittest.main()

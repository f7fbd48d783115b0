from __future__ import annotations

import unittest

from plotui import Rect, Viewport


class ViewportTests(unittest.TestCase):
    def test_inset_subtracts_each_edge(self) -> None:
        rect = Viewport(top=10, leading=20, bottom=5, trailing=15).inset(Rect.from_size(100, 80))
        self.assertEqual(rect, Rect(x=20.0, y=10.0, width=65.0, height=65.0))

    def test_inset_clamps_to_zero_size(self) -> None:
        rect = Viewport.uniform(60).inset(Rect.from_size(100, 100))
        self.assertEqual(rect.width, 0.0)
        self.assertEqual(rect.height, 0.0)
        self.assertTrue(rect.is_empty)

    def test_negative_inset_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Viewport(top=-1.0)

    def test_uniform_applies_to_selected_edges(self) -> None:
        vp = Viewport.uniform(5, ["top", "trailing"])
        self.assertEqual(vp, Viewport(top=5.0, trailing=5.0))

    def test_uniform_rejects_unknown_edge(self) -> None:
        with self.assertRaises(ValueError):
            Viewport.uniform(5, ["left"])  # type: ignore[list-item]

    def test_rect_clamps_negative_size(self) -> None:
        rect = Rect(x=3.0, y=4.0, width=-2.0, height=-1.0)
        self.assertEqual((rect.width, rect.height), (0.0, 0.0))

    def test_rect_intersection(self) -> None:
        a = Rect(x=0.0, y=0.0, width=10.0, height=10.0)
        b = Rect(x=5.0, y=-5.0, width=10.0, height=10.0)
        self.assertEqual(a.intersection(b), Rect(x=5.0, y=0.0, width=5.0, height=5.0))
        self.assertIsNone(a.intersection(Rect(x=10.0, y=0.0, width=5.0, height=5.0)))

    def test_rect_contains_is_inclusive(self) -> None:
        rect = Rect(x=10.0, y=20.0, width=30.0, height=40.0)
        self.assertTrue(rect.contains_x(10.0))
        self.assertTrue(rect.contains_x(40.0))
        self.assertFalse(rect.contains_x(40.5))
        self.assertTrue(rect.contains_y(60.0))
        self.assertFalse(rect.contains_y(19.0))
        self.assertEqual((rect.mid_x, rect.mid_y), (25.0, 40.0))


if __name__ == "__main__":
    unittest.main()

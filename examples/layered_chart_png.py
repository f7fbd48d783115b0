from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from plotui import StrokeStyle, bar, line, plot, scatter


def _build_chart():
    x = np.arange(12, dtype=np.float64)
    y = np.asarray([4, -2, 5, 3, -3, 2, 4, -1, 3, -4, 5, 2], dtype=np.float64)
    trend = np.cumsum(y) * 0.4

    chart = plot(
        bar(x=x, y=y).fill((96, 182, 255, 255)).bar_width(14.0).corner_radius(4.0),
        line(x=x, y=trend).line_stroke(StrokeStyle(color=(255, 150, 40, 255), line_width=2.0)),
        scatter(x=x, y=trend).scatter_size(9.0),
    )
    chart.content_disposition(min_x=-1.0, max_x=12.0, min_y=-6.0, max_y=8.0)
    chart.viewport(top=20, leading=20, bottom=40, trailing=60)
    chart.x_ticks(values=x, labels=[f"m{int(v) + 1}" for v in x])
    chart.y_ticks(7)
    return chart


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a bar/line/scatter chart to PNG.")
    parser.add_argument("--out", type=Path, default=Path("layered_chart.png"))
    parser.add_argument("--width", type=int, default=960)
    parser.add_argument("--height", type=int, default=540)
    args = parser.parse_args()

    out = _build_chart().save_png(args.out, args.width, args.height)
    print(f"wrote {out}")


if __name__ == "__main__":
    main()

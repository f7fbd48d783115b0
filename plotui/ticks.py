from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np

from plotui.disposition import Disposition
from plotui.scales import format_tick


TickOrientation = Literal["vertical", "horizontal"]


@dataclass(frozen=True)
class Tick:
    """A labelled position on one axis.

    A ``vertical`` tick marks a value on the x axis and is drawn as a vertical
    line; a ``horizontal`` tick marks a y value and is drawn across.
    """

    value: float
    label: str
    orientation: TickOrientation


def _check_orientation(orientation: str) -> None:
    if orientation not in ("vertical", "horizontal"):
        raise ValueError(f"unsupported tick orientation: {orientation}")


def partition_ticks(disposition: Disposition, partitions: int, orientation: TickOrientation) -> list[Tick]:
    _check_orientation(orientation)
    if orientation == "vertical":
        values, _ = disposition.partition(partitions, 0)
    else:
        _, values = disposition.partition(0, partitions)
    return [Tick(value=float(v), label=format_tick(float(v)), orientation=orientation) for v in values]


def explicit_ticks(
    values: Sequence[float] | np.ndarray,
    labels: Sequence[str] | None,
    orientation: TickOrientation,
) -> list[Tick]:
    _check_orientation(orientation)
    names = list(labels) if labels is not None else []
    return [
        Tick(value=float(v), label=str(names[i]) if i < len(names) else "", orientation=orientation)
        for i, v in enumerate(np.asarray(values, dtype=np.float64).reshape(-1).tolist())
    ]

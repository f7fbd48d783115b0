from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when series input cannot be turned into plottable numbers."""


class DegenerateRangeError(ArithmeticError):
    """Raised when a coordinate mapping would divide by a zero-sized range.

    Dispositions always resolve to a width and height of at least one, so this
    signals a broken invariant upstream rather than a recoverable condition.
    """

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import numpy as np


LOGGER = logging.getLogger(__name__)


@dataclass
class FrameCache:
    """Last rendered frame, reused while its key is unchanged.

    The key must cover everything the frame depends on: effective bounds,
    insets, frame size, styles and a digest of the series data.
    """

    key: tuple[Any, ...] | None = None
    frame: np.ndarray | None = None

    def get(self, key: tuple[Any, ...]) -> np.ndarray | None:
        if self.frame is None or self.key != key:
            return None
        LOGGER.debug("frame cache hit")
        return self.frame.copy()

    def put(self, key: tuple[Any, ...], frame: np.ndarray) -> None:
        self.key = key
        self.frame = frame.copy()

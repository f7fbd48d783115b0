from __future__ import annotations

from functools import lru_cache
import logging

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from plotui.primitives import RGBA, TextAnchor


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 11.0

# Pillow searches the platform font directories for bare file names.
FONT_FILES = {
    "dejavu sans": ("DejaVuSans.ttf",),
    "helvetica": ("Helvetica.ttc", "HelveticaNeue.ttc"),
    "arial": ("Arial.ttf", "arial.ttf"),
    "liberation sans": ("LiberationSans-Regular.ttf",),
}
FALLBACK_FAMILIES = ("dejavu sans", "helvetica", "arial", "liberation sans")


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    anchor: TextAnchor = "top_left",
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> None:
    """Blend antialiased text into ``dst``; ``anchor`` says what ``(x, y)`` refers to."""
    if not text:
        return
    coverage = _glyph_mask(text, font_family.strip().lower(), _pixel_size(font_size_px))
    rows, cols = coverage.shape
    if anchor == "center":
        x -= cols / 2.0
        y -= rows / 2.0
    _composite(dst, int(round(x)), int(round(y)), coverage, color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    """Pixel ``(width, height)`` of ``text``; empty text keeps the line height."""
    font = _load_font(font_family.strip().lower(), _pixel_size(font_size_px))
    if not text:
        ascent, descent = font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    return _glyph_mask(text, font_family.strip().lower(), _pixel_size(font_size_px)).shape[::-1]


def _pixel_size(font_size_px: float) -> int:
    return max(1, int(round(font_size_px)))


def _composite(dst: np.ndarray, left: int, top: int, coverage: np.ndarray, color: RGBA) -> None:
    rows, cols = coverage.shape
    canvas_h, canvas_w = dst.shape[:2]
    x0, x1 = max(0, left), min(canvas_w, left + cols)
    y0, y1 = max(0, top), min(canvas_h, top + rows)
    if x0 >= x1 or y0 >= y1:
        return

    alpha = coverage[y0 - top : y1 - top, x0 - left : x1 - left].astype(np.float32) * (color[3] / (255.0 * 255.0))
    if not alpha.any():
        return
    alpha = alpha[:, :, None]
    region = dst[y0:y1, x0:x1]
    ink = np.asarray(color[:3], dtype=np.float32)
    blended = ink * alpha + region[:, :, :3].astype(np.float32) * (1.0 - alpha)
    region[:, :, :3] = np.clip(blended, 0, 255).astype(np.uint8)
    region[:, :, 3] = 255


@lru_cache(maxsize=256)
def _glyph_mask(text: str, family: str, size: int) -> np.ndarray:
    font = _load_font(family, size)
    left, top, right, bottom = font.getbbox(text)
    mask = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(mask).text((-left, -top), text, fill=255, font=font)
    return np.asarray(mask, dtype=np.uint8)


@lru_cache(maxsize=32)
def _load_font(family: str, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    wanted = family or DEFAULT_FONT_FAMILY.lower()
    for name in (wanted,) + tuple(f for f in FALLBACK_FAMILIES if f != wanted):
        for filename in FONT_FILES.get(name, (name,)):
            try:
                return ImageFont.truetype(filename, size=size)
            except OSError:
                continue
    LOGGER.warning("no TrueType font found for %r; using Pillow's default font", family)
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        # Pillow < 10.1 has no sized default font.
        return ImageFont.load_default()

"""Pixel canvas and grid lines.

A room of ``cols x rows`` cells at ``scale`` pixels per cell is drawn onto an
image of ``cols * scale + 1`` by ``rows * scale + 1`` pixels; the extra row
and column hold the closing grid line. Cell ``(col, row)`` starts at pixel
``(col * scale + 1, row * scale + 1)``.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from room_canvas.config import (
    BACKGROUND_COLOR,
    DEFAULT_ROOM_MAX_COLUMNS,
    DEFAULT_ROOM_MAX_ROWS,
    DEFAULT_SCALE_FACTOR,
    GRID_COLOR,
    MAX_CANVAS_PIXELS,
    validate_scale,
)
from room_canvas.errors import ConfigurationError
from room_canvas.utils.image import UInt8Array, to_rgba_array

logger = logging.getLogger(__name__)


@dataclass
class Canvas:
    """Mutable RGBA render target. Operations modify ``image`` in place."""

    image: Image.Image
    cols: int
    rows: int
    scale: int

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def resolve_scale(self, scale: Optional[int] = None) -> int:
        """Return ``scale``, or the canvas scale when omitted; reject non-positive values."""
        return validate_scale(self.scale if scale is None else scale)

    def cell_box(self, col: int, row: int, scale: Optional[int] = None) -> Tuple[int, int, int, int]:
        """Return the ``(left, top, right, bottom)`` pixel box of a cell."""
        scale = self.resolve_scale(scale)
        x, y = cell_origin(col, row, scale)
        return x, y, x + scale, y + scale

    def to_array(self) -> UInt8Array:
        return to_rgba_array(self.image)


def canvas_size(cols: int, rows: int, scale: int) -> Tuple[int, int]:
    """Derive canvas pixel dimensions, rejecting degenerate or huge sizes."""
    if cols <= 0 or rows <= 0:
        raise ConfigurationError(f"Canvas needs at least one cell, got {cols}x{rows}")
    validate_scale(scale)
    width = cols * scale + 1
    height = rows * scale + 1
    if width * height > MAX_CANVAS_PIXELS:
        raise ConfigurationError(
            f"Canvas of {width}x{height} pixels exceeds the {MAX_CANVAS_PIXELS} pixel limit"
        )
    return width, height


def cell_origin(col: int, row: int, scale: int) -> Tuple[int, int]:
    """Top-left pixel of cell ``(col, row)``."""
    return col * scale + 1, row * scale + 1


def create_canvas(
    cols: int = DEFAULT_ROOM_MAX_COLUMNS,
    rows: int = DEFAULT_ROOM_MAX_ROWS,
    scale: int = DEFAULT_SCALE_FACTOR,
) -> Canvas:
    """Allocate an opaque black canvas for a ``cols x rows`` room."""
    width, height = canvas_size(cols, rows, scale)
    logger.debug("Creating %dx%d canvas (%dx%d cells @ %d)", width, height, cols, rows, scale)
    image = Image.new("RGBA", (width, height), BACKGROUND_COLOR)
    return Canvas(image=image, cols=cols, rows=rows, scale=scale)


def draw_grid(canvas: Canvas, scale: Optional[int] = None) -> None:
    """Overwrite every pixel on a multiple of ``scale`` with translucent white.

    Pixels are replaced, not blended, so repeated calls leave the same result.
    """
    scale = canvas.resolve_scale(scale)
    arr = canvas.to_array()
    height, width = arr.shape[:2]
    on_col = np.arange(width) % scale == 0
    on_row = np.arange(height) % scale == 0
    mask = on_row[:, None] | on_col[None, :]
    arr[mask] = GRID_COLOR
    canvas.image.paste(Image.fromarray(arr))

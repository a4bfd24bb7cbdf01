"""Cell labels.

Two placements are supported:

* :func:`draw_label` anchors text at a small inset from the cell's top-left
  corner at a caller-chosen font size.
* :func:`draw_centered_label` picks a font size that fits the padded cell and
  centres the text in it.

Text is rasterised on a transparent layer and alpha-composited, so labels
blend with tiles and heatmap cells underneath.
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from room_canvas.assets import AssetRegistry, FontHandle
from room_canvas.canvas import Canvas
from room_canvas.config import LABEL_BORDER, LABEL_INSET, TEXT_COLOR, nominal_font_size
from room_canvas.utils.image import composite_clipped

logger = logging.getLogger(__name__)


def measure_text(text: str, font: FontHandle) -> Tuple[int, int, int, int]:
    """Return the ink bounding box of ``text`` drawn at the origin."""
    left, top, right, bottom = font.getbbox(text)
    return int(left), int(top), int(right), int(bottom)


def text_width(text: str, font: FontHandle) -> int:
    left, _, right, _ = measure_text(text, font)
    return right - left


def fit_font_size(
    text: str, available: int, registry: AssetRegistry, start_size: int
) -> int:
    """Shrink ``start_size`` so ``text`` fits in ``available`` pixels.

    One proportional correction is applied from the width measured at
    ``start_size``; the result is not iterated to the exact largest fit, since
    glyph metrics are close enough to linear at label sizes.
    """
    size = max(1, start_size)
    measured = text_width(text, registry.get_font(size))
    if measured <= available:
        return size
    return max(1, int(size * available / measured))


def _render_text_layer(
    text: str, font: FontHandle, size: Tuple[int, int], offset: Tuple[int, int]
) -> Image.Image:
    layer = Image.new("RGBA", size, (0, 0, 0, 0))
    ImageDraw.Draw(layer).text(offset, text, fill=TEXT_COLOR, font=font)
    return layer


def draw_label(
    canvas: Canvas,
    col: int,
    row: int,
    text: str,
    registry: AssetRegistry,
    scale: Optional[int] = None,
    font_size: Optional[int] = None,
) -> None:
    """Draw white ``text`` starting at ``(col*scale+2, row*scale+2)``.

    The text may run past the cell's right edge; it is only clipped to the
    canvas.
    """
    scale = canvas.resolve_scale(scale)
    if not text:
        return
    font = registry.get_font(font_size or nominal_font_size(scale))
    _, _, right, bottom = measure_text(text, font)
    if right <= 0 or bottom <= 0:
        return
    x, y = col * scale + LABEL_INSET, row * scale + LABEL_INSET
    layer = _render_text_layer(text, font, (right, bottom), (0, 0))
    composite_clipped(canvas.image, layer, (x, y), (x, y, canvas.width, canvas.height))


def draw_centered_label(
    canvas: Canvas,
    col: int,
    row: int,
    text: str,
    registry: AssetRegistry,
    scale: Optional[int] = None,
) -> None:
    """Draw ``text`` centred in the cell, shrunk to fit inside a 2px border."""
    scale = canvas.resolve_scale(scale)
    if not text:
        return
    available = scale - 2 * LABEL_BORDER
    if available <= 0:
        return
    size = fit_font_size(text, available, registry, start_size=available)
    font = registry.get_font(size)
    left, top, right, bottom = measure_text(text, font)
    offset = (
        (available - (right - left)) // 2 - left,
        (available - (bottom - top)) // 2 - top,
    )
    logger.debug("Centered label %r at %s size %d", text, (col, row), size)

    x = col * scale + 1 + LABEL_BORDER
    y = row * scale + 1 + LABEL_BORDER
    layer = _render_text_layer(text, font, (available, available), offset)
    composite_clipped(canvas.image, layer, (x, y), (x, y, x + available, y + available))

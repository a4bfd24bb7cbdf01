"""Cost-field heatmap overlay.

Every non-zero cell of a sparse cost field becomes a solid ``scale x scale``
block whose colour is interpolated from the value:

``t = (clamp(v) - v_min) / (v_max - v_min)``
``b = b_max - lerp(0, b_max, t)``
``r = g = lerp(b_max, 0, b / b_max)``

so ``v_min`` paints pure blue at ``b_max`` and ``v_max`` paints red+green at
``b_max`` with no blue. All blocks are painted into one transparent overlay
which is composited onto the canvas in a single pass; each surviving cell is
then labelled with its value.

With :attr:`ClipPolicy.SKIP` out-of-range cells are dropped entirely (no
block, no label) instead of being clamped.
"""

import logging
from collections.abc import Mapping
from typing import Iterable, List, Optional, Tuple

import numpy as np
from PIL import Image

from room_canvas.assets import AssetRegistry
from room_canvas.canvas import Canvas, cell_origin
from room_canvas.config import (
    MAX_COST_VALUE,
    MULTI_DIGIT_FONT_PERCENT,
    HeatmapStyle,
    nominal_font_size,
    validate_scale,
)
from room_canvas.errors import ConfigurationError
from room_canvas.renderer.text import draw_label
from room_canvas.types import RGBA, Cell, CostField

logger = logging.getLogger(__name__)

CostEntry = Tuple[Cell, int]


def lerp(v0: float, v1: float, t: float) -> int:
    """Linear interpolation, truncated toward zero."""
    return int((1 - t) * v0 + t * v1)


def iter_cost_field(field: CostField) -> Iterable[CostEntry]:
    if isinstance(field, Mapping):
        return field.items()
    return field


def is_visible(value: int, style: HeatmapStyle) -> bool:
    """Return True if a cell with ``value`` is painted and labelled."""
    if value == 0:
        return False
    if style.skip and not style.v_min <= value <= style.v_max:
        return False
    return True


def cost_color(value: int, style: HeatmapStyle) -> RGBA:
    """Overlay colour for ``value`` after clamping into the style's range."""
    clamped = min(max(value, style.v_min), style.v_max)
    t = (clamped - style.v_min) / (style.v_max - style.v_min)
    blue = style.b_max - lerp(0, style.b_max, t)
    red_green = lerp(style.b_max, 0, blue / style.b_max)
    alpha = style.alpha if value != 0 else 0
    return red_green, red_green, blue, alpha


def build_cost_overlay(
    field: CostField,
    style: HeatmapStyle,
    size: Tuple[int, int],
    scale: int,
) -> Tuple[Image.Image, List[CostEntry]]:
    """Paint the heatmap into a transparent image of ``size``.

    Returns:
        Tuple[Image.Image, List[CostEntry]]: the overlay and the cells that
        were painted, in field order.

    Raises:
        ConfigurationError: a value lies outside 0..255 or ``scale`` is not
        positive. Nothing has been drawn at that point.
    """
    validate_scale(scale)
    width, height = size
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    painted: List[CostEntry] = []
    skipped = 0
    for (col, row), value in iter_cost_field(field):
        if not 0 <= value <= MAX_COST_VALUE:
            raise ConfigurationError(
                f"Cost value {value} at {(col, row)} is outside 0..{MAX_COST_VALUE}"
            )
        if not is_visible(value, style):
            if value != 0:
                skipped += 1
            continue
        x, y = cell_origin(col, row, scale)
        arr[max(y, 0) : max(y + scale, 0), max(x, 0) : max(x + scale, 0)] = cost_color(
            value, style
        )
        painted.append(((col, row), value))
    logger.debug("Cost overlay: %d cells painted, %d skipped", len(painted), skipped)
    return Image.fromarray(arr), painted


def label_font_size(value: int, scale: int) -> int:
    """Label size for ``value``; multi-digit values are drawn smaller."""
    size = nominal_font_size(scale)
    if len(str(value)) >= 2:
        size = max(1, size * MULTI_DIGIT_FONT_PERCENT // 100)
    return size


def draw_cost_field(
    canvas: Canvas,
    field: CostField,
    style: HeatmapStyle,
    registry: AssetRegistry,
    scale: Optional[int] = None,
) -> None:
    """Composite the heatmap for ``field`` and label each painted cell."""
    scale = canvas.resolve_scale(scale)
    overlay, painted = build_cost_overlay(field, style, canvas.size, scale)
    if not painted:
        return
    canvas.image.alpha_composite(overlay)
    for (col, row), value in painted:
        draw_label(
            canvas,
            col,
            row,
            str(value),
            registry,
            scale=scale,
            font_size=label_font_size(value, scale),
        )

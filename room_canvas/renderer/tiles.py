"""Tile compositing.

Tiles are straight-alpha composited over whatever the canvas already holds
and never touch pixels outside their ``scale x scale`` cell. Cells outside
the room are the caller's responsibility: they are clipped, not rejected.
"""

from typing import Optional

from room_canvas.assets import AssetRegistry
from room_canvas.canvas import Canvas, cell_origin
from room_canvas.types import TileKind
from room_canvas.utils.image import composite_clipped


def draw_tile(
    canvas: Canvas,
    col: int,
    row: int,
    kind: TileKind,
    registry: AssetRegistry,
    scale: Optional[int] = None,
) -> None:
    """Composite the tile for ``kind`` onto cell ``(col, row)``."""
    scale = canvas.resolve_scale(scale)
    tile = registry.get_scaled_tile(kind, scale)
    x, y = cell_origin(col, row, scale)
    composite_clipped(canvas.image, tile, (x, y), (x, y, x + scale, y + scale))

"""Raster renderer for grid-based rooms.

Draws terrain, resources, structures, a cost-field heatmap, labels and grid
lines onto an RGBA Pillow image. The package holds no game logic; it only
turns already-computed grid data into pixels.

Typical use::

    registry = AssetRegistry.from_directory("assets")
    canvas = create_canvas(cols=50, rows=50, scale=50)
    draw_tile(canvas, 10, 12, Terrain.WALL, registry)
    draw_cost_field(canvas, costs, HeatmapStyle(v_min=0, v_max=10), registry)
    draw_grid(canvas)
    canvas.image.save("room.png")
"""

from room_canvas.assets import AssetRegistry
from room_canvas.canvas import Canvas, cell_origin, create_canvas, draw_grid
from room_canvas.config import HeatmapStyle, RenderConfig
from room_canvas.errors import AssetError, ConfigurationError, RoomCanvasError
from room_canvas.layout import RoomLayout
from room_canvas.renderer import (
    RoomRenderer,
    draw_centered_label,
    draw_cost_field,
    draw_label,
    draw_tile,
    render_room,
)
from room_canvas.types import (
    ClipPolicy,
    Resource,
    Structure,
    Terrain,
    TileKind,
    resource_from_name,
    structure_from_name,
    terrain_from_mask,
)

__all__ = [
    "AssetError",
    "AssetRegistry",
    "Canvas",
    "ClipPolicy",
    "ConfigurationError",
    "HeatmapStyle",
    "RenderConfig",
    "Resource",
    "RoomCanvasError",
    "RoomLayout",
    "RoomRenderer",
    "Structure",
    "Terrain",
    "TileKind",
    "cell_origin",
    "create_canvas",
    "draw_centered_label",
    "draw_cost_field",
    "draw_grid",
    "draw_label",
    "draw_tile",
    "render_room",
    "resource_from_name",
    "structure_from_name",
    "terrain_from_mask",
]

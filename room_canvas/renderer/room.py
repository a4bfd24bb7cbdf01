from typing import Optional

from room_canvas.assets import AssetRegistry
from room_canvas.canvas import Canvas, create_canvas, draw_grid
from room_canvas.config import HeatmapStyle, RenderConfig
from room_canvas.layout import RoomLayout
from room_canvas.renderer.heatmap import draw_cost_field
from room_canvas.renderer.text import draw_centered_label, draw_label
from room_canvas.renderer.tiles import draw_tile
from room_canvas.types import CostField, Resource, Structure, Terrain


def render_room(
    layout: RoomLayout,
    registry: AssetRegistry,
    config: Optional[RenderConfig] = None,
) -> Canvas:
    """
    Renders a room layout onto a fresh canvas.

    Layers, bottom to top: terrain, structures, resources, cost heatmap,
    labels, grid lines.
    """
    config = config or RenderConfig()
    scale = config.scale

    canvas = create_canvas(layout.cols, layout.rows, scale)
    for layer in (layout.terrain, layout.structures, layout.resources):
        for (col, row), kind in layer.items():
            draw_tile(canvas, col, row, kind, registry, scale)

    if layout.heatmap is not None and layout.cost_field:
        draw_cost_field(canvas, layout.cost_field, layout.heatmap, registry, scale)

    for (col, row), text in layout.labels.items():
        draw_centered_label(canvas, col, row, text, registry, scale)

    if config.draw_grid:
        draw_grid(canvas, scale)
    return canvas


class RoomRenderer:
    """Binds an asset registry and render geometry for repeated draw calls."""

    registry: AssetRegistry
    config: RenderConfig

    def __init__(
        self,
        registry: Optional[AssetRegistry] = None,
        config: Optional[RenderConfig] = None,
    ):
        self.registry = registry or AssetRegistry()
        self.config = config or RenderConfig()

    @property
    def scale(self) -> int:
        return self.config.scale

    def new_canvas(self) -> Canvas:
        return create_canvas(self.config.cols, self.config.rows, self.scale)

    def draw_terrain(self, canvas: Canvas, col: int, row: int, terrain: Terrain) -> None:
        draw_tile(canvas, col, row, terrain, self.registry, self.scale)

    def draw_resource(self, canvas: Canvas, col: int, row: int, resource: Resource) -> None:
        draw_tile(canvas, col, row, resource, self.registry, self.scale)

    def draw_structure(
        self, canvas: Canvas, col: int, row: int, structure: Structure
    ) -> None:
        draw_tile(canvas, col, row, structure, self.registry, self.scale)

    def draw_label(
        self,
        canvas: Canvas,
        col: int,
        row: int,
        text: str,
        font_size: Optional[int] = None,
    ) -> None:
        draw_label(canvas, col, row, text, self.registry, self.scale, font_size)

    def draw_centered_label(self, canvas: Canvas, col: int, row: int, text: str) -> None:
        draw_centered_label(canvas, col, row, text, self.registry, self.scale)

    def draw_cost_field(
        self, canvas: Canvas, field: CostField, style: HeatmapStyle
    ) -> None:
        draw_cost_field(canvas, field, style, self.registry, self.scale)

    def draw_grid(self, canvas: Canvas) -> None:
        draw_grid(canvas, self.scale)

    def render(self, layout: RoomLayout) -> Canvas:
        return render_room(layout, self.registry, self.config)

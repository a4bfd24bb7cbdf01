"""Rendering subpackage.

Composites room contents onto a :class:`~room_canvas.canvas.Canvas`:

* :mod:`~room_canvas.renderer.tiles` - terrain / structure / resource tiles,
  resampled with nearest-neighbour when the asset size differs from the scale.
* :mod:`~room_canvas.renderer.heatmap` - translucent blue heatmap for a sparse
  cost field, with clamp or skip handling of out-of-range values.
* :mod:`~room_canvas.renderer.text` - fixed-inset and centred, auto-fitted
  labels.

Every operation mutates the canvas in place and later calls paint over
earlier ones. :class:`RoomRenderer` bundles an asset registry with a scale for
callers issuing many draw calls.
"""

from room_canvas.renderer.heatmap import build_cost_overlay, cost_color, draw_cost_field, lerp
from room_canvas.renderer.room import RoomRenderer, render_room
from room_canvas.renderer.text import draw_centered_label, draw_label, fit_font_size
from room_canvas.renderer.tiles import draw_tile

__all__ = [
    "RoomRenderer",
    "build_cost_overlay",
    "cost_color",
    "draw_centered_label",
    "draw_cost_field",
    "draw_label",
    "draw_tile",
    "fit_font_size",
    "lerp",
    "render_room",
]

"""Immutable room description consumed by :func:`room_canvas.renderer.render_room`.

A ``RoomLayout`` is a plain snapshot of what sits on each cell. It is built by
the embedding application (or from raw game identifiers with
:meth:`RoomLayout.from_names`) and never mutated by the renderer.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from room_canvas.config import DEFAULT_ROOM_MAX_COLUMNS, DEFAULT_ROOM_MAX_ROWS, HeatmapStyle
from room_canvas.types import (
    Cell,
    Resource,
    Structure,
    Terrain,
    resource_from_name,
    structure_from_name,
    terrain_from_name,
)


@dataclass(frozen=True)
class RoomLayout:
    """Per-cell contents of one room.

    Attributes:
        cols: Room width in cells.
        rows: Room height in cells.
        terrain: Terrain per cell; missing cells stay background black.
        structures: Buildable structure per cell.
        resources: Resource deposit per cell.
        cost_field: Sparse scalar field drawn as a heatmap when ``heatmap`` is set.
        labels: Free text drawn centred in a cell.
        heatmap: Heatmap parameters, or ``None`` to skip the overlay.
    """

    cols: int = DEFAULT_ROOM_MAX_COLUMNS
    rows: int = DEFAULT_ROOM_MAX_ROWS
    terrain: PMap[Cell, Terrain] = field(default_factory=pmap)
    structures: PMap[Cell, Structure] = field(default_factory=pmap)
    resources: PMap[Cell, Resource] = field(default_factory=pmap)
    cost_field: PMap[Cell, int] = field(default_factory=pmap)
    labels: PMap[Cell, str] = field(default_factory=pmap)
    heatmap: Optional[HeatmapStyle] = None

    @classmethod
    def from_names(
        cls,
        cols: int = DEFAULT_ROOM_MAX_COLUMNS,
        rows: int = DEFAULT_ROOM_MAX_ROWS,
        terrain: Optional[Mapping[Cell, str]] = None,
        structures: Optional[Mapping[Cell, str]] = None,
        resources: Optional[Mapping[Cell, str]] = None,
        cost_field: Optional[Mapping[Cell, int]] = None,
        labels: Optional[Mapping[Cell, str]] = None,
        heatmap: Optional[HeatmapStyle] = None,
    ) -> "RoomLayout":
        """Build a layout from external identifiers.

        Unrecognized structure or resource names render with the ``UNKNOWN``
        tile instead of failing.
        """
        return cls(
            cols=cols,
            rows=rows,
            terrain=pmap({c: terrain_from_name(n) for c, n in (terrain or {}).items()}),
            structures=pmap(
                {c: structure_from_name(n) for c, n in (structures or {}).items()}
            ),
            resources=pmap(
                {c: resource_from_name(n) for c, n in (resources or {}).items()}
            ),
            cost_field=pmap(cost_field or {}),
            labels=pmap(labels or {}),
            heatmap=heatmap,
        )

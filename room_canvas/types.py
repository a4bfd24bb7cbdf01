"""Common type aliases and tile kind enumerations.

Each enum variant maps to exactly one raster asset (see
:data:`room_canvas.assets.TILE_ASSET_PATHS`). Conversions from external
identifiers are *total*: anything unrecognized resolves to the ``UNKNOWN``
variant of its category rather than raising.
"""

from enum import StrEnum, auto
from typing import Iterable, Mapping, Tuple, Union


Cell = Tuple[int, int]
"""``(col, row)`` grid coordinate."""

RGBA = Tuple[int, int, int, int]

# Values must lie in 0..255; anything else is rejected when the field is drawn.
CostField = Union[Mapping[Cell, int], Iterable[Tuple[Cell, int]]]


class Terrain(StrEnum):
    PLAIN = auto()
    SWAMP = auto()
    WALL = auto()


class Resource(StrEnum):
    SOURCE = auto()
    HYDROGEN = auto()
    OXYGEN = auto()
    KEANIUM = auto()
    LEMERGIUM = auto()
    UTRIUM = auto()
    ZYNTHIUM = auto()
    CATALYST = auto()
    UNKNOWN = "unknown_resource"


class Structure(StrEnum):
    CONSTRUCTED_WALL = auto()
    CONTAINER = auto()
    CONTROLLER = auto()
    EXTENSION = auto()
    EXTRACTOR = auto()
    FACTORY = auto()
    LAB = auto()
    LINK = auto()
    NUKER = auto()
    OBSERVER = auto()
    POWER_SPAWN = auto()
    RAMPART = auto()
    ROAD = auto()
    SPAWN = auto()
    STORAGE = auto()
    TERMINAL = auto()
    TOWER = auto()
    UNKNOWN = "unknown_structure"


class ClipPolicy(StrEnum):
    """How heatmap values outside ``[v_min, v_max]`` are treated."""

    CLAMP = auto()
    SKIP = auto()


# Enum values are unique across categories so kinds can share one mapping.
TileKind = Union[Terrain, Resource, Structure]


TERRAIN_MASK_WALL = 1
TERRAIN_MASK_SWAMP = 2

# External identifiers as reported by the game API.
RESOURCE_NAMES: Mapping[str, Resource] = {
    "source": Resource.SOURCE,
    "H": Resource.HYDROGEN,
    "O": Resource.OXYGEN,
    "K": Resource.KEANIUM,
    "L": Resource.LEMERGIUM,
    "U": Resource.UTRIUM,
    "Z": Resource.ZYNTHIUM,
    "X": Resource.CATALYST,
}

STRUCTURE_NAMES: Mapping[str, Structure] = {
    "constructedWall": Structure.CONSTRUCTED_WALL,
    "container": Structure.CONTAINER,
    "controller": Structure.CONTROLLER,
    "extension": Structure.EXTENSION,
    "extractor": Structure.EXTRACTOR,
    "factory": Structure.FACTORY,
    "lab": Structure.LAB,
    "link": Structure.LINK,
    "nuker": Structure.NUKER,
    "observer": Structure.OBSERVER,
    "powerSpawn": Structure.POWER_SPAWN,
    "rampart": Structure.RAMPART,
    "road": Structure.ROAD,
    "spawn": Structure.SPAWN,
    "storage": Structure.STORAGE,
    "terminal": Structure.TERMINAL,
    "tower": Structure.TOWER,
}


def resource_from_name(name: str) -> Resource:
    """Map an external resource identifier to a :class:`Resource`.

    Accepts either the game identifier (``"H"``) or the enum value
    (``"hydrogen"``). Anything else yields ``Resource.UNKNOWN``.
    """
    if name in RESOURCE_NAMES:
        return RESOURCE_NAMES[name]
    try:
        return Resource(name)
    except ValueError:
        return Resource.UNKNOWN


def structure_from_name(name: str) -> Structure:
    """Map an external structure type to a :class:`Structure` (total)."""
    if name in STRUCTURE_NAMES:
        return STRUCTURE_NAMES[name]
    try:
        return Structure(name)
    except ValueError:
        return Structure.UNKNOWN


def terrain_from_mask(mask: int) -> Terrain:
    """Decode a packed terrain mask. Wall takes precedence over swamp."""
    if mask & TERRAIN_MASK_WALL:
        return Terrain.WALL
    if mask & TERRAIN_MASK_SWAMP:
        return Terrain.SWAMP
    return Terrain.PLAIN


def terrain_from_name(name: str) -> Terrain:
    """Map ``"plain"``/``"swamp"``/``"wall"``; anything else is plain ground."""
    try:
        return Terrain(name)
    except ValueError:
        return Terrain.PLAIN

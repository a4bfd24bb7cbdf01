"""Tile and font asset registry.

``AssetRegistry`` maps every :data:`~room_canvas.types.TileKind` to a decoded
RGBA image and hands out TrueType fonts by size. Each entry is decoded on
first use and kept for the lifetime of the registry; there is no eviction
because the key set is small and fixed.

Sources are resolved in this order:

1. ``sources[kind]`` passed to the constructor: raw encoded bytes or a path.
2. ``asset_root / TILE_ASSET_PATHS[kind]`` on disk.

A missing or undecodable asset raises :class:`~room_canvas.errors.AssetError`.
The asset set is expected to be complete, so callers should let that error
abort setup (``warm()`` surfaces it up front).

First access is serialized with a lock so concurrent renderers never decode
the same key twice or observe a half-built image. Later reads are lock free.
"""

import logging
import os
import threading
from io import BytesIO
from typing import Dict, Mapping, Optional, Tuple, Union

from PIL import Image, ImageFont
from pyrsistent import pmap
from pyrsistent.typing import PMap

from room_canvas.config import DEFAULT_ASSET_ROOT, DEFAULT_FONT_SIZE, validate_scale
from room_canvas.errors import AssetError
from room_canvas.types import Resource, Structure, Terrain, TileKind
from room_canvas.utils.image import resize_nearest

logger = logging.getLogger(__name__)

AssetSource = Union[bytes, str, "os.PathLike[str]"]
FontHandle = ImageFont.FreeTypeFont


TILE_ASSET_PATHS: PMap[TileKind, str] = pmap(
    {
        Terrain.PLAIN: "terrains/plain.png",
        Terrain.SWAMP: "terrains/swamp.png",
        Terrain.WALL: "terrains/wall.png",
        Resource.SOURCE: "resources/source.png",
        Resource.HYDROGEN: "resources/H.png",
        Resource.OXYGEN: "resources/O.png",
        Resource.KEANIUM: "resources/K.png",
        Resource.LEMERGIUM: "resources/L.png",
        Resource.UTRIUM: "resources/U.png",
        Resource.ZYNTHIUM: "resources/Z.png",
        Resource.CATALYST: "resources/X.png",
        Resource.UNKNOWN: "resources/unknown.png",
        Structure.CONSTRUCTED_WALL: "structures/constructedWall.png",
        Structure.CONTAINER: "structures/container.png",
        Structure.CONTROLLER: "structures/controller.png",
        Structure.EXTENSION: "structures/extension.png",
        Structure.EXTRACTOR: "structures/extractor.png",
        Structure.FACTORY: "structures/factory.png",
        Structure.LAB: "structures/lab.png",
        Structure.LINK: "structures/link.png",
        Structure.NUKER: "structures/nuker.png",
        Structure.OBSERVER: "structures/observer.png",
        Structure.POWER_SPAWN: "structures/powerSpawn.png",
        Structure.RAMPART: "structures/rampart.png",
        Structure.ROAD: "structures/road.png",
        Structure.SPAWN: "structures/spawn.png",
        Structure.STORAGE: "structures/storage.png",
        Structure.TERMINAL: "structures/terminal.png",
        Structure.TOWER: "structures/tower.png",
        Structure.UNKNOWN: "structures/icon.png",
    }
)

FONT_ASSET_PATH = "fonts/FreeMono.ttf"


def decode_image(source: AssetSource) -> Image.Image:
    """Decode encoded image bytes or a file into a loaded RGBA image."""
    try:
        if isinstance(source, bytes):
            with Image.open(BytesIO(source)) as im:
                return im.convert("RGBA")
        with Image.open(source) as im:
            return im.convert("RGBA")
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        label = "<bytes>" if isinstance(source, bytes) else os.fspath(source)
        raise AssetError(f"Could not decode image {label}") from exc


def decode_font(source: Optional[AssetSource], size: int) -> FontHandle:
    """Load a TrueType font at ``size``; ``None`` selects Pillow's bundled font."""
    try:
        if source is None:
            font = ImageFont.load_default(size=size)
        elif isinstance(source, bytes):
            font = ImageFont.truetype(BytesIO(source), size=size)
        else:
            font = ImageFont.truetype(os.fspath(source), size=size)
    except (OSError, ValueError) as exc:
        raise AssetError(f"Could not load font at size {size}") from exc
    if not isinstance(font, ImageFont.FreeTypeFont):
        raise AssetError("Font rendering requires Pillow built with FreeType")
    return font


class AssetRegistry:
    """Decode-once cache of tile images and fonts.

    Images returned by :meth:`get_tile` and :meth:`get_scaled_tile` are
    shared; callers must treat them as read-only.

    Tiles and the font resolve independently. ``asset_root`` only locates
    tiles; the font comes from ``font_source``, and when that is ``None``
    Pillow's bundled TrueType font is used even if ``asset_root`` holds
    ``fonts/FreeMono.ttf``. Use :meth:`from_directory` to take both from one
    asset directory.
    """

    asset_root: str
    sources: Mapping[TileKind, AssetSource]
    font_source: Optional[AssetSource]

    def __init__(
        self,
        asset_root: str = DEFAULT_ASSET_ROOT,
        sources: Optional[Mapping[TileKind, AssetSource]] = None,
        font_source: Optional[AssetSource] = None,
    ):
        self.asset_root = asset_root
        self.sources = pmap(sources or {})
        self.font_source = font_source
        self.decode_count = 0
        self._lock = threading.Lock()
        self._tiles: Dict[TileKind, Image.Image] = {}
        self._scaled: Dict[Tuple[TileKind, int], Image.Image] = {}
        self._fonts: Dict[int, FontHandle] = {}

    @classmethod
    def from_directory(cls, asset_root: str) -> "AssetRegistry":
        """Registry reading tiles and ``fonts/FreeMono.ttf`` below ``asset_root``."""
        return cls(
            asset_root=asset_root,
            font_source=os.path.join(asset_root, FONT_ASSET_PATH),
        )

    def source_for(self, kind: TileKind) -> AssetSource:
        if kind in self.sources:
            return self.sources[kind]
        return os.path.join(self.asset_root, TILE_ASSET_PATHS[kind])

    def get_tile(self, kind: TileKind) -> Image.Image:
        """Return the decoded tile image for ``kind`` at its native size."""
        tile = self._tiles.get(kind)
        if tile is not None:
            return tile
        with self._lock:
            tile = self._tiles.get(kind)
            if tile is None:
                tile = decode_image(self.source_for(kind))
                self.decode_count += 1
                logger.debug("Decoded tile %s (%dx%d)", kind, *tile.size)
                self._tiles[kind] = tile
        return tile

    def get_scaled_tile(self, kind: TileKind, scale: int) -> Image.Image:
        """Return the tile for ``kind`` as ``scale x scale`` pixels.

        Tiles that already match are returned as-is; others are resized once
        per ``(kind, scale)`` with nearest-neighbour sampling.
        """
        validate_scale(scale)
        tile = self.get_tile(kind)
        if tile.size == (scale, scale):
            return tile
        key = (kind, scale)
        scaled = self._scaled.get(key)
        if scaled is not None:
            return scaled
        with self._lock:
            scaled = self._scaled.get(key)
            if scaled is None:
                scaled = resize_nearest(tile, scale)
                logger.debug("Resized tile %s from %dx%d to %d", kind, *tile.size, scale)
                self._scaled[key] = scaled
        return scaled

    def get_font(self, size: int = DEFAULT_FONT_SIZE) -> FontHandle:
        """Return the shared label font at ``size`` pixels."""
        size = max(1, int(size))
        font = self._fonts.get(size)
        if font is not None:
            return font
        with self._lock:
            font = self._fonts.get(size)
            if font is None:
                font = decode_font(self.font_source, size)
                self.decode_count += 1
                logger.debug("Loaded font at size %d", size)
                self._fonts[size] = font
        return font

    def warm(self) -> None:
        """Decode every tile and the default font now, failing fast."""
        for kind in TILE_ASSET_PATHS:
            self.get_tile(kind)
        self.get_font()

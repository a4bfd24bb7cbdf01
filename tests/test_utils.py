from io import BytesIO
from typing import Dict, Optional, Tuple

import numpy as np
from PIL import Image

from room_canvas.assets import TILE_ASSET_PATHS, AssetRegistry, AssetSource
from room_canvas.types import TileKind
from room_canvas.utils.image import UInt8Array

Color = Tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def make_solid_png(color: Color, size: int = 50) -> bytes:
    return encode_png(Image.new("RGBA", (size, size), color))


def make_checker_png(size: int, a: Color, b: Color) -> bytes:
    """Checkerboard of single pixels, so any resampling is visible."""
    arr = np.zeros((size, size, 4), dtype=np.uint8)
    yy, xx = np.indices((size, size))
    arr[(xx + yy) % 2 == 0] = a
    arr[(xx + yy) % 2 == 1] = b
    return encode_png(Image.fromarray(arr))


def kind_color(index: int) -> Color:
    """Distinct opaque colour per tile kind index."""
    return ((index * 37) % 256, 255 - (index * 11) % 256, 60 + index, 255)


def make_tile_sources(size: int = 50) -> Dict[TileKind, AssetSource]:
    return {
        kind: make_solid_png(kind_color(i), size)
        for i, kind in enumerate(TILE_ASSET_PATHS)
    }


def make_registry(
    size: int = 50, overrides: Optional[Dict[TileKind, AssetSource]] = None
) -> AssetRegistry:
    """Registry with a solid, uniquely coloured in-memory PNG for every kind."""
    sources = make_tile_sources(size)
    sources.update(overrides or {})
    return AssetRegistry(sources=sources)


def decode_expected(source: bytes, scale: int) -> UInt8Array:
    """Reference pixels: decode and nearest-resize independently of the registry."""
    image = Image.open(BytesIO(source)).convert("RGBA")
    if image.size != (scale, scale):
        image = image.resize((scale, scale), resample=Image.Resampling.NEAREST)
    return np.array(image, dtype=np.uint8)


def cell_block(arr: UInt8Array, col: int, row: int, scale: int) -> UInt8Array:
    x, y = col * scale + 1, row * scale + 1
    return arr[y : y + scale, x : x + scale]


def changed_pixels(before: UInt8Array, after: UInt8Array) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(ys, xs)`` of pixels that differ between two canvases."""
    diff = np.any(before != after, axis=-1)
    return np.nonzero(diff)

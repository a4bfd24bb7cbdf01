import numpy as np
import numpy.typing as npt
from PIL import Image
from typing import Tuple

UInt8Array = npt.NDArray[np.uint8]


def to_rgba_array(image: Image.Image) -> UInt8Array:
    """Return an ``(H, W, 4)`` uint8 copy of ``image``."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.array(image, dtype=np.uint8)


def composite_clipped(
    base: Image.Image,
    layer: Image.Image,
    dest: Tuple[int, int],
    limit: Tuple[int, int, int, int],
) -> None:
    """Alpha-composite ``layer`` onto ``base`` at ``dest``, in place.

    Only pixels inside ``limit`` (a ``(left, top, right, bottom)`` box, right
    and bottom exclusive) and inside ``base`` are written.
    """
    x, y = dest
    left = max(x, limit[0], 0)
    top = max(y, limit[1], 0)
    right = min(x + layer.width, limit[2], base.width)
    bottom = min(y + layer.height, limit[3], base.height)
    if right <= left or bottom <= top:
        return
    source = (left - x, top - y, right - x, bottom - y)
    base.alpha_composite(layer, dest=(left, top), source=source)


def resize_nearest(image: Image.Image, size: int) -> Image.Image:
    """Return ``image`` as ``size x size``, resampling only on mismatch.

    Nearest-neighbour keeps pixel-art edges crisp. When the image already has
    the requested size it is returned unchanged (no copy).
    """
    if image.size == (size, size):
        return image
    return image.resize((size, size), resample=Image.Resampling.NEAREST)

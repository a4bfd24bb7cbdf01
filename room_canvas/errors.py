"""Exception hierarchy.

Two failure families exist:

* :class:`AssetError` - a baked-in tile or font could not be read or decoded.
  The asset set is fixed, so this is fatal and aborts renderer setup.
* :class:`ConfigurationError` - a caller passed degenerate numeric parameters
  (empty canvas, ``v_min == v_max`` ...). The call is rejected, never coerced.

Unknown resource / structure identifiers are *not* errors; see
:mod:`room_canvas.types`.
"""


class RoomCanvasError(Exception):
    """Base class for all package errors."""


class AssetError(RoomCanvasError, RuntimeError):
    """A tile or font asset failed to load."""


class ConfigurationError(RoomCanvasError, ValueError):
    """Rendering parameters are invalid."""

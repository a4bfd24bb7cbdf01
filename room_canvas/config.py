"""Rendering defaults and parameter bundles.

Defaults mirror a standard 50x50 room drawn at 50 pixels per cell. The
dataclasses validate on construction so that a bad parameter set is rejected
before any pixel is touched.
"""

from dataclasses import dataclass

from room_canvas.errors import ConfigurationError
from room_canvas.types import ClipPolicy


DEFAULT_ROOM_MAX_COLUMNS = 50
DEFAULT_ROOM_MAX_ROWS = 50
DEFAULT_SCALE_FACTOR = 50
DEFAULT_ASSET_ROOT = "assets"

# Upper bound on canvas area; anything larger is treated as a bad size.
MAX_CANVAS_PIXELS = 1 << 28

# Label font size as a percentage of the cell edge (15px at the default scale).
FONT_SCALE_PERCENT = 30
MULTI_DIGIT_FONT_PERCENT = 75
LABEL_INSET = 2
LABEL_BORDER = 2

BACKGROUND_COLOR = (0, 0, 0, 255)
GRID_COLOR = (255, 255, 255, 128)
TEXT_COLOR = (255, 255, 255, 255)

DEFAULT_FONT_SIZE = DEFAULT_SCALE_FACTOR * FONT_SCALE_PERCENT // 100

# Cost field values are 8-bit; 0 means no cost.
MAX_COST_VALUE = 255


def nominal_font_size(scale: int) -> int:
    """Font size used for cell labels at ``scale`` pixels per cell."""
    return max(1, scale * FONT_SCALE_PERCENT // 100)


def validate_scale(scale: int) -> int:
    if scale <= 0:
        raise ConfigurationError(f"Scale factor must be positive, got {scale}")
    return scale


@dataclass(frozen=True)
class HeatmapStyle:
    """Parameters of the cost-field overlay.

    Attributes:
        v_min: Value mapped to full blue.
        v_max: Value mapped to zero blue. Must differ from ``v_min``.
        b_max: Peak channel intensity (1..255).
        alpha: Overlay opacity for every painted cell (0..255).
        clip_policy: Clamp out-of-range values or skip those cells.
    """

    v_min: int = 0
    v_max: int = 255
    b_max: int = 255
    alpha: int = 128
    clip_policy: ClipPolicy = ClipPolicy.CLAMP

    def __post_init__(self) -> None:
        if self.v_min == self.v_max:
            raise ConfigurationError(
                f"Heatmap range is empty: v_min == v_max == {self.v_min}"
            )
        if self.v_min > self.v_max:
            raise ConfigurationError(
                f"Heatmap range is inverted: v_min={self.v_min} > v_max={self.v_max}"
            )
        if not 0 < self.b_max <= 255:
            raise ConfigurationError(f"b_max must be in 1..255, got {self.b_max}")
        if not 0 <= self.alpha <= 255:
            raise ConfigurationError(f"alpha must be in 0..255, got {self.alpha}")

    @property
    def skip(self) -> bool:
        return self.clip_policy is ClipPolicy.SKIP


@dataclass(frozen=True)
class RenderConfig:
    """Canvas geometry and layering switches used by ``RoomRenderer``."""

    cols: int = DEFAULT_ROOM_MAX_COLUMNS
    rows: int = DEFAULT_ROOM_MAX_ROWS
    scale: int = DEFAULT_SCALE_FACTOR
    draw_grid: bool = True

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ConfigurationError(
                f"Room must have at least one cell, got {self.cols}x{self.rows}"
            )
        validate_scale(self.scale)

import numpy as np
import pytest

from room_canvas.canvas import create_canvas
from room_canvas.config import LABEL_BORDER
from room_canvas.errors import ConfigurationError
from room_canvas.renderer.text import (
    draw_centered_label,
    draw_label,
    fit_font_size,
    text_width,
)
from tests.test_utils import changed_pixels, make_registry


@pytest.mark.parametrize("col, row", [(0, 0), (1, 1), (2, 0)])
def test_label_starts_at_fixed_inset(col: int, row: int) -> None:
    registry = make_registry()
    canvas = create_canvas(3, 2, 50)
    before = canvas.to_array()
    draw_label(canvas, col, row, "88", registry)
    ys, xs = changed_pixels(before, canvas.to_array())
    assert len(xs) > 0
    assert xs.min() >= col * 50 + 2
    assert ys.min() >= row * 50 + 2


def test_label_is_white() -> None:
    registry = make_registry()
    canvas = create_canvas(1, 1, 50)
    draw_label(canvas, 0, 0, "8", registry, font_size=30)
    arr = canvas.to_array()
    brightest = arr[..., :3].min(axis=-1).max()
    assert brightest >= 250
    # Grey levels only, never coloured.
    assert np.all(arr[..., 0] == arr[..., 2])


def test_larger_font_covers_more_pixels() -> None:
    registry = make_registry()
    small = create_canvas(1, 1, 50)
    large = create_canvas(1, 1, 50)
    draw_label(small, 0, 0, "8", registry, font_size=10)
    draw_label(large, 0, 0, "8", registry, font_size=30)
    assert large.to_array()[..., 0].sum() > small.to_array()[..., 0].sum()


def test_empty_label_is_noop() -> None:
    registry = make_registry()
    canvas = create_canvas(1, 1, 50)
    before = canvas.to_array()
    draw_label(canvas, 0, 0, "", registry)
    draw_centered_label(canvas, 0, 0, "", registry)
    assert np.array_equal(before, canvas.to_array())


def test_fit_font_size_keeps_short_text() -> None:
    registry = make_registry()
    assert fit_font_size("1", 46, registry, start_size=20) == 20


def test_fit_font_size_shrinks_long_text() -> None:
    registry = make_registry()
    text = "a rather long label"
    size = fit_font_size(text, 46, registry, start_size=46)
    assert 1 <= size < 46
    assert text_width(text, registry.get_font(46)) > 46


@pytest.mark.parametrize(
    "text",
    ["1", "42", "1234", "W7N3", "a rather long label", "x" * 200],
)
def test_centered_label_stays_in_padded_area(text: str) -> None:
    registry = make_registry()
    scale = 50
    canvas = create_canvas(3, 3, scale)
    before = canvas.to_array()
    draw_centered_label(canvas, 1, 2, text, registry)
    ys, xs = changed_pixels(before, canvas.to_array())
    if len(xs) == 0:
        # Very long text may shrink below a visible size.
        return
    left = 1 * scale + 1 + LABEL_BORDER
    top = 2 * scale + 1 + LABEL_BORDER
    available = scale - 2 * LABEL_BORDER
    assert xs.min() >= left and xs.max() < left + available
    assert ys.min() >= top and ys.max() < top + available


def test_centered_label_is_centred() -> None:
    registry = make_registry()
    canvas = create_canvas(1, 1, 50)
    before = canvas.to_array()
    draw_centered_label(canvas, 0, 0, "88", registry)
    ys, xs = changed_pixels(before, canvas.to_array())
    centre = 1 + (50 - 1) / 2
    assert abs((xs.min() + xs.max()) / 2 - centre) <= 3
    assert abs((ys.min() + ys.max()) / 2 - centre) <= 3


def test_centered_label_too_small_cell_is_noop() -> None:
    registry = make_registry()
    canvas = create_canvas(2, 2, 4)
    before = canvas.to_array()
    draw_centered_label(canvas, 0, 0, "9", registry)
    assert np.array_equal(before, canvas.to_array())


def test_centered_label_shrinks_but_stays_visible() -> None:
    registry = make_registry()
    canvas = create_canvas(1, 1, 50)
    before = canvas.to_array()
    draw_centered_label(canvas, 0, 0, "12345", registry)
    ys, xs = changed_pixels(before, canvas.to_array())
    assert len(xs) > 0
    assert xs.max() - xs.min() < 50 - 2 * LABEL_BORDER


@pytest.mark.parametrize("scale", [0, -5])
@pytest.mark.parametrize("text", ["7", ""])
def test_labels_reject_bad_scale(scale: int, text: str) -> None:
    registry = make_registry()
    canvas = create_canvas(2, 2, 50)
    before = canvas.to_array()
    with pytest.raises(ConfigurationError):
        draw_label(canvas, 0, 0, text, registry, scale=scale)
    with pytest.raises(ConfigurationError):
        draw_centered_label(canvas, 0, 0, text, registry, scale=scale)
    assert np.array_equal(before, canvas.to_array())

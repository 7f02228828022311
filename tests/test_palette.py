"""
Palette source tests: the default palette, JSON files and matplotlib colormaps.
"""
import json

import pytest

from mandel.errors import ConfigurationError
from mandel.palette import DEFAULT_PALETTE, colormap_palette, load_palette, parse_palette


def _write(tmp_path, payload):
    path = tmp_path / "palette.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_default_palette_is_rgba_bytes():
    assert len(DEFAULT_PALETTE) >= 1
    for color in DEFAULT_PALETTE:
        assert len(color) == 4
        assert all(0 <= channel <= 255 for channel in color)


def test_load_palette_preserves_order(tmp_path):
    path = _write(tmp_path, [[255, 0, 0, 255], [0, 255, 0, 128], [0, 0, 255, 0]])
    assert load_palette(path) == ((255, 0, 0, 255), (0, 255, 0, 128), (0, 0, 255, 0))


def test_load_palette_accepts_string_path(tmp_path):
    path = _write(tmp_path, [[1, 2, 3, 4]])
    assert load_palette(str(path)) == ((1, 2, 3, 4),)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Error reading palette file"):
        load_palette(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = _write(tmp_path, "[[1, 2, 3, 4]")
    with pytest.raises(ConfigurationError, match="Error parsing palette JSON data"):
        load_palette(path)


@pytest.mark.parametrize(
    "payload, message",
    [
        ([], "at least one color"),
        ({"colors": []}, "JSON array"),
        ([[1, 2, 3]], "exactly 4 elements"),
        ([[1, 2, 3, 4, 5]], "exactly 4 elements"),
        ([[1, 2, 3, 256]], "0 to 255"),
        ([[1, 2, -1, 4]], "0 to 255"),
        ([[1.5, 2, 3, 4]], "0 to 255"),
        ([[True, 2, 3, 4]], "0 to 255"),
        (["red"], "exactly 4 elements"),
    ],
)
def test_malformed_palettes(tmp_path, payload, message):
    with pytest.raises(ConfigurationError, match=message):
        load_palette(_write(tmp_path, payload))


def test_malformed_entry_is_quoted():
    with pytest.raises(ConfigurationError, match=r"\[9, 9\]"):
        parse_palette([[0, 0, 0, 0], [9, 9]])


def test_colormap_palette_samples_requested_size():
    palette = colormap_palette("viridis", 16)
    assert len(palette) == 16
    for color in palette:
        assert len(color) == 4
        assert all(isinstance(channel, int) and 0 <= channel <= 255 for channel in color)
        assert color[3] == 255
    assert palette[0] != palette[-1]


def test_colormap_palette_single_color():
    assert len(colormap_palette("gray", 1)) == 1


def test_unknown_colormap():
    with pytest.raises(ConfigurationError, match="Unknown matplotlib colormap"):
        colormap_palette("not-a-colormap")


def test_colormap_size_must_be_positive():
    with pytest.raises(ConfigurationError):
        colormap_palette("viridis", 0)

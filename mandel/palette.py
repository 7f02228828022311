"""Palette sources: the built-in default, JSON files and matplotlib colormaps."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

import matplotlib
import numpy as np

from .errors import ConfigurationError

RGBA = tuple[int, int, int, int]

DEFAULT_PALETTE: tuple[RGBA, ...] = (
    (66, 30, 15, 255),
    (25, 7, 26, 255),
    (9, 1, 47, 255),
    (4, 4, 73, 255),
    (0, 7, 100, 255),
    (12, 44, 138, 255),
    (24, 82, 177, 255),
    (57, 125, 209, 255),
    (134, 181, 229, 255),
    (211, 236, 248, 255),
    (241, 233, 191, 255),
    (248, 201, 95, 255),
    (255, 170, 0, 255),
    (204, 128, 0, 255),
    (153, 87, 0, 255),
    (106, 52, 3, 255),
)


def _is_byte(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def parse_palette(colors: Any) -> tuple[RGBA, ...]:
    """Validate decoded palette data and convert it to RGBA tuples."""

    if not isinstance(colors, list):
        raise ConfigurationError("Palette must be a JSON array of colors")
    if len(colors) < 1:
        raise ConfigurationError("Palette must have at least one color")

    palette: list[RGBA] = []
    for entry in colors:
        if not isinstance(entry, list) or len(entry) != 4:
            raise ConfigurationError(
                "Error in palette: each color must have exactly 4 elements: "
                f"red, green, blue, and alpha: found {entry!r}"
            )
        if not all(_is_byte(channel) for channel in entry):
            raise ConfigurationError(
                f"Error in palette: color channels must be integers from 0 to 255: found {entry!r}"
            )
        palette.append((entry[0], entry[1], entry[2], entry[3]))
    return tuple(palette)


def load_palette(path: str | Path) -> tuple[RGBA, ...]:
    """Read a palette from a JSON file shaped as an array of RGBA byte arrays."""

    palette_path = Path(path).expanduser()
    try:
        raw = palette_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Error reading palette file {palette_path}: {exc}") from exc
    try:
        colors = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Error parsing palette JSON data in {palette_path}: {exc}") from exc
    return parse_palette(colors)


def colormap_palette(name: str, size: int = 256) -> tuple[RGBA, ...]:
    """Sample ``size`` evenly spaced colors from a matplotlib colormap."""

    if size < 1:
        raise ConfigurationError(f"Colormap palette size must be 1 or higher: found {size}")
    try:
        cmap = matplotlib.colormaps[name]
    except KeyError as exc:
        raise ConfigurationError(f"Unknown matplotlib colormap '{name}'") from exc

    rgba = np.array(cmap(np.linspace(0.0, 1.0, size)), copy=True)
    rgba_uint8 = np.uint8(np.clip(rgba * 255, 0, 255))
    return tuple(tuple(int(channel) for channel in color) for color in rgba_uint8)


def describe_palette(palette: Sequence[Sequence[int]]) -> str:
    """Short human-readable summary used by verbose logging."""

    first = tuple(palette[0][:3])
    last = tuple(palette[-1][:3])
    return f"{len(palette)} colors, {first} .. {last}"

"""Public API for the parallel Mandelbrot render engine."""

from .coloring import INSIDE_COLOR, map_color
from .errors import ConfigurationError, MandelError, OutputError, RenderStateError
from .escape import HORIZON, SMOOTH_HORIZON, escape_time
from .output import canvas_to_image, write_image
from .palette import DEFAULT_PALETTE, colormap_palette, load_palette, parse_palette
from .renderer import PixelSampler, RenderEngine, RenderParameters, render_image, subpixel_offsets
from .scheduler import default_workers, render_rows

__all__ = [
    "ConfigurationError",
    "DEFAULT_PALETTE",
    "HORIZON",
    "INSIDE_COLOR",
    "MandelError",
    "OutputError",
    "PixelSampler",
    "RenderEngine",
    "RenderParameters",
    "RenderStateError",
    "SMOOTH_HORIZON",
    "canvas_to_image",
    "colormap_palette",
    "default_workers",
    "escape_time",
    "load_palette",
    "map_color",
    "parse_palette",
    "render_image",
    "render_rows",
    "subpixel_offsets",
    "write_image",
]

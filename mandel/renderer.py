"""Render parameters, antialiased pixel sampling and the render engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from .coloring import INSIDE_COLOR, map_color
from .errors import ConfigurationError, RenderStateError
from .escape import escape_time
from .palette import DEFAULT_PALETTE
from .scheduler import ProgressCallback, render_rows

Evaluator = Callable[[float, float, int, bool], float]
RGBA = tuple[int, int, int, int]


def _is_byte(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and 0 <= value <= 255


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of the Mandelbrot set."""

    x_res: int = 1024
    y_res: int = 768
    x_center: float = -0.75
    y_center: float = 0.0
    magnification: float = 0.4
    max_iterations: int = 1000
    antialias: int = 2
    continuous: bool = False
    palette: tuple[tuple[int, ...], ...] = DEFAULT_PALETTE
    inside_color: tuple[int, int, int] = INSIDE_COLOR

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if any parameter is out of range."""

        if self.antialias < 1:
            raise ConfigurationError(f"Anti-aliasing level must be 1 or higher: found {self.antialias}")
        if self.max_iterations < 1:
            raise ConfigurationError(f"Maximum iterations must be 1 or higher: found {self.max_iterations}")
        if self.x_res < 1 or self.y_res < 1:
            raise ConfigurationError(f"Image size must be at least 1x1: found {self.x_res}x{self.y_res}")
        if not self.magnification > 0:
            raise ConfigurationError(f"Magnification must be positive: found {self.magnification}")
        if len(self.palette) < 1:
            raise ConfigurationError("Palette must have at least one color")
        for color in self.palette:
            if len(color) not in (3, 4) or not all(_is_byte(channel) for channel in color):
                raise ConfigurationError(f"Palette colors must have 3 or 4 byte channels: found {color!r}")
        if len(self.inside_color) != 3 or not all(_is_byte(channel) for channel in self.inside_color):
            raise ConfigurationError(f"Inside color must have 3 byte channels: found {self.inside_color!r}")


def subpixel_offsets(antialias: int) -> tuple[float, ...]:
    """Evenly spaced offsets in (-0.5, 0.5) for an ``antialias`` x ``antialias`` grid."""

    return tuple((0.5 + i) / antialias - 0.5 for i in range(antialias))


class PixelSampler:
    """Average an N x N grid of escape-time samples into one pixel color."""

    def __init__(self, params: RenderParameters, offsets: Sequence[float], evaluator: Evaluator = escape_time):
        self.params = params
        self.offsets = tuple(offsets)
        self.evaluator = evaluator
        min_dim = min(params.x_res, params.y_res)
        self._scale = params.magnification * max(min_dim - 1, 1)
        self._half_x = params.x_res // 2
        self._half_y = params.y_res // 2
        self._samples = len(self.offsets) ** 2

    def point(self, col: float, row: float, x_offset: float = 0.0, y_offset: float = 0.0) -> tuple[float, float]:
        """Complex-plane coordinate of a (sub)pixel. Rows grow downward, the imaginary axis upward."""

        p = self.params
        x = p.x_center + ((col - self._half_x) + x_offset) / self._scale
        y = p.y_center - ((row - self._half_y) - y_offset) / self._scale
        return x, y

    def sample(self, col: int, row: int) -> RGBA:
        p = self.params
        r = g = b = 0
        for y_offset in self.offsets:
            for x_offset in self.offsets:
                x, y = self.point(col, row, x_offset, y_offset)
                iters = self.evaluator(x, y, p.max_iterations, p.continuous)
                rs, gs, bs = map_color(iters, p.palette, p.continuous, p.inside_color)
                r, g, b = r + rs, g + gs, b + bs
        n = self._samples
        return r // n, g // n, b // n, 255

    def sample_row(self, row: int) -> list[RGBA]:
        return [self.sample(col, row) for col in range(self.params.x_res)]


class RenderEngine:
    """Validate parameters once, then render the whole image in parallel."""

    def __init__(self, params: RenderParameters, *, evaluator: Evaluator = escape_time):
        self.params = params
        self.evaluator = evaluator
        self.offsets: Optional[tuple[float, ...]] = None
        self._sampler: Optional[PixelSampler] = None

    @property
    def initialized(self) -> bool:
        return self._sampler is not None

    def initialize(self) -> "RenderEngine":
        self.params.validate()
        self.offsets = subpixel_offsets(self.params.antialias)
        self._sampler = PixelSampler(self.params, self.offsets, self.evaluator)
        return self

    def _require_sampler(self) -> PixelSampler:
        if self._sampler is None:
            raise RenderStateError("RenderEngine.initialize() must be called before rendering")
        return self._sampler

    def sample_pixel(self, col: int, row: int) -> RGBA:
        return self._require_sampler().sample(col, row)

    def render(self, *, workers: Optional[int] = None, progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """Render every pixel and return a ``(y_res, x_res, 4)`` uint8 RGBA canvas."""

        sampler = self._require_sampler()
        return render_rows(
            self.params.x_res,
            self.params.y_res,
            sampler.sample_row,
            workers=workers,
            progress=progress,
        )


def render_image(
    params: RenderParameters,
    *,
    workers: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> np.ndarray:
    """Render a Mandelbrot image given the supplied parameters."""

    return RenderEngine(params).initialize().render(workers=workers, progress=progress)

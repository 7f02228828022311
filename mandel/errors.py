"""Exception types raised by the render engine and its collaborators."""

from __future__ import annotations


class MandelError(Exception):
    """Base class for every error raised by :mod:`mandel`."""


class ConfigurationError(MandelError, ValueError):
    """Invalid render parameters or palette data, detected before rendering."""


class RenderStateError(MandelError, RuntimeError):
    """Per-pixel or whole-image computation requested before initialization."""


class OutputError(MandelError, OSError):
    """The finished canvas could not be written or encoded."""

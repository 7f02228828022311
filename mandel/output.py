"""Encoding finished canvases to image files with Pillow."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import PIL.Image

from .errors import OutputError

_OPAQUE_ONLY = {"JPEG", "BMP", "PPM"}


def pil_format_name(ext: str) -> str:
    upper = ext.upper().lstrip(".")
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def canvas_to_image(canvas: np.ndarray) -> PIL.Image.Image:
    """Wrap a ``(height, width, 4)`` uint8 canvas as an RGBA Pillow image."""

    return PIL.Image.fromarray(np.ascontiguousarray(canvas, dtype=np.uint8))


def write_image(canvas: np.ndarray, output_path: str | Path, image_format: str = "png") -> Path:
    """Write ``canvas`` to ``output_path`` in ``image_format`` and return the resolved path."""

    path = Path(output_path).expanduser()
    pil_format = pil_format_name(image_format)
    image = canvas_to_image(canvas)
    if pil_format in _OPAQUE_ONLY:
        image = image.convert("RGB")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(str(path), format=pil_format)
    except (OSError, ValueError, KeyError) as exc:
        raise OutputError(f"Error writing image {path}: {exc}") from exc
    return path.resolve()

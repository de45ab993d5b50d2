import io
import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image

from asciiramp.errors import RasterizationFailure

logger = logging.getLogger(__name__)

RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}

_DECODE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)


def load_image(source: str | Path | bytes | BinaryIO) -> Image.Image:
    """Decode an image from a path, raw bytes (e.g. a clipboard paste) or a binary file object."""
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        image = Image.open(source)
        # Image.open is lazy; force the decode so truncated files fail here
        image.load()
    except _DECODE_ERRORS as e:
        raise RasterizationFailure(f"Cannot decode image: {e}") from e
    logger.debug("Decoded %s image %dx%d", image.mode, image.width, image.height)
    return image


def rasterize(
    image: Image.Image,
    size: tuple[int, int],
    resample: Image.Resampling = Image.Resampling.BOX,
) -> np.ndarray:
    """Resample ``image`` onto a fresh RGBA buffer of exactly ``size`` (width, height).

    Returns a uint8 array of shape (height, width, 4).
    """
    width, height = size
    if width < 1 or height < 1:
        raise RasterizationFailure(f"Invalid target size {width}x{height}")
    if image.width < 1 or image.height < 1:
        raise RasterizationFailure(f"Source image has no pixels ({image.width}x{image.height})")
    try:
        rgba = image.convert("RGBA")
        if rgba.size != (width, height):
            rgba = rgba.resize((width, height), resample)
    except _DECODE_ERRORS as e:
        raise RasterizationFailure(f"Cannot rasterize image: {e}") from e
    return np.asarray(rgba, dtype=np.uint8).reshape(height, width, 4)

import math

import numpy as np

# Channel weights for (r, g, b). Not BT.601/709; kept as-is because output depends on them.
LUMA_WEIGHTS = (0.21, 0.72, 0.07)


def luminance(r, g, b):
    """Weighted gray value. Works on plain numbers and on numpy channel arrays alike."""
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def luminance_grid(pixels: np.ndarray) -> np.ndarray:
    """Gray value per pixel for an (h, w, 3) or (h, w, 4) buffer. Alpha is ignored."""
    rgb = np.asarray(pixels, dtype=np.float64)
    return luminance(rgb[..., 0], rgb[..., 1], rgb[..., 2])


def ramp_index(gray: float, length: int) -> int:
    """Per-pixel form of ``ramp_indices``.

    Index into a ramp of ``length`` characters; out-of-range results fall back to the last one.
    """
    t = math.floor((gray / 255) * (length - 1))
    if t < 0 or t >= length:
        return length - 1
    return t


def ramp_indices(gray: np.ndarray, length: int) -> np.ndarray:
    t = np.floor((gray / 255) * (length - 1)).astype(np.int64)
    return np.where((t < 0) | (t >= length), length - 1, t)


def map_grid(gray: np.ndarray, ramp: str) -> list[str]:
    """Map a 2D gray array to one string of ramp characters per row."""
    indices = ramp_indices(gray, len(ramp))
    return ["".join(ramp[i] for i in row) for row in indices]

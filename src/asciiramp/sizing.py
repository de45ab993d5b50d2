import math

# Glyphs are taller than wide; squeeze columns so the output keeps the source proportions
CHAR_ASPECT_RATIO = 0.55
MIN_RATIO = 0.01


def coerce_percent(value) -> float:
    """Read a percentage from user input. Non-numeric, NaN and infinite values become 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def scale_ratio(scale_percent) -> float:
    """Convert a percentage to a resize ratio, never below MIN_RATIO."""
    return max(MIN_RATIO, coerce_percent(scale_percent) / 100)


def target_size(
    source_width: int,
    source_height: int,
    scale_percent,
    char_aspect_ratio: float = CHAR_ASPECT_RATIO,
) -> tuple[int, int]:
    """Return the (width, height) of the downscaled sampling buffer. Both are at least 1."""
    ratio = scale_ratio(scale_percent)
    height = max(1, math.floor(source_height * ratio))
    width = max(1, math.floor(source_width * ratio * char_aspect_ratio))
    return width, height

DEFAULT_RAMP = " .:-=+*#%@"

CUSTOM = "custom"

# Built-in ramps, in the order they are offered for selection
RAMPS = {
    "classic": "@%#*+=-:. ",
    "high-detail": "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,^`'. ",
    "blocks": "█▓▒░",
    "binary": "01",
    "light-to-dark": DEFAULT_RAMP,
    "half-block": "█▄▀",
    "symbol-mix": "█▓▒░@%#*+=-:. ",
    "emoji": "⬛🌑🌘🌗🌖🌕⬜",
    CUSTOM: "",
}


def sanitize_ramp(ramp: str | None) -> str:
    """Return ``ramp``, or the default ramp when it is empty or missing."""
    if not ramp:
        return DEFAULT_RAMP
    return ramp


def resolve_ramp(selection: str | None, custom: str | None = None) -> str:
    """Resolve the active ramp from a catalog selection and the custom ramp text.

    Custom text wins whenever it is non-empty or ``custom`` is selected. Any
    selection that is not a catalog name is used as a literal ramp.
    """
    if selection == CUSTOM or custom:
        return sanitize_ramp(custom)
    return sanitize_ramp(RAMPS.get(selection, selection))

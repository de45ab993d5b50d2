class AsciiRampError(Exception):
    """Base class for asciiramp errors."""


class RasterizationFailure(AsciiRampError):
    """The source image could not be decoded or resampled into a pixel buffer."""


class ClipboardUnavailable(AsciiRampError):
    """The system clipboard could not be written."""

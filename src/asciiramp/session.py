import logging
from pathlib import Path
from typing import BinaryIO, Callable

from PIL import Image

from asciiramp.charsets import CUSTOM, resolve_ramp
from asciiramp.config import RenderConfig
from asciiramp.engine import AsciiGrid, RenderRequest
from asciiramp.errors import ClipboardUnavailable, RasterizationFailure
from asciiramp.raster import load_image
from asciiramp.renderer import AsciiRenderer
from asciiramp.sizing import coerce_percent

logger = logging.getLogger(__name__)

COPIED = "Copied!"
COPY_FAILED = "Copy failed"


class Session:
    """Interactive state around the renderer: the loaded image and the user's current settings.

    Every settings change re-renders while an image is loaded. A failed render
    leaves the displayed text as it was.
    """

    def __init__(self, config: RenderConfig | None = None, renderer: AsciiRenderer | None = None):
        self.config = config if config is not None else RenderConfig()
        if renderer is None:
            renderer = AsciiRenderer(self.config.char_aspect_ratio, self.config.resample_filter)
        self.renderer = renderer
        self.image: Image.Image | None = None
        self.scale_percent = self._clamp_scale(self.config.default_scale)
        self.model = self.config.default_model
        self.custom = ""
        self.font_size = self.config.font_size
        self.displayed = ""
        self.last_generated = ""
        self.last_grid: AsciiGrid | None = None

    @property
    def ramp(self) -> str:
        return resolve_ramp(self.model, self.custom)

    def _clamp_scale(self, value) -> float:
        return min(self.config.max_scale, max(self.config.min_scale, coerce_percent(value)))

    def load(self, source: Image.Image | str | Path | bytes | BinaryIO) -> AsciiGrid | None:
        """Replace the current image and render it.

        Raises RasterizationFailure if ``source`` cannot be decoded; the previous
        image stays loaded in that case.
        """
        image = source if isinstance(source, Image.Image) else load_image(source)
        self.image = image
        return self.render()

    def set_scale(self, value) -> AsciiGrid | None:
        self.scale_percent = self._clamp_scale(value)
        return self.render()

    def select_model(self, name: str) -> AsciiGrid | None:
        self.model = name
        return self.render()

    def set_custom(self, text: str) -> AsciiGrid | None:
        """Typing a custom ramp always switches the selection to it."""
        self.custom = text
        self.model = CUSTOM
        return self.render()

    def set_font_size(self, value) -> int:
        try:
            size = int(value)
        except (TypeError, ValueError):
            size = 0
        self.font_size = size or self.config.font_size
        return self.font_size

    def render(self) -> AsciiGrid | None:
        if self.image is None:
            return None
        request = RenderRequest(image=self.image, scale_percent=self.scale_percent, ramp=self.ramp)
        try:
            grid = self.renderer.render(request)
        except RasterizationFailure:
            logger.exception("Render failed, keeping previous output")
            return None
        self.displayed = grid.text
        self.last_generated = grid.text
        self.last_grid = grid
        return grid

    def copy(self, writer: Callable[[str], None]) -> str:
        """Hand the latest ASCII text to a clipboard writer and return a status message."""
        text = self.last_generated or self.displayed
        try:
            writer(text)
        except (ClipboardUnavailable, OSError) as e:
            logger.warning("Copy to clipboard failed: %s", e)
            return COPY_FAILED
        return COPIED

import logging

from PIL import Image

from asciiramp.charsets import sanitize_ramp
from asciiramp.engine import AsciiGrid, RenderRequest
from asciiramp.raster import rasterize
from asciiramp.sampling import luminance_grid, map_grid
from asciiramp.sizing import CHAR_ASPECT_RATIO, target_size

logger = logging.getLogger(__name__)


class AsciiRenderer:
    """Maps each pixel of a downscaled image to a ramp character by luminance.

    Holds no per-render state: every call rasterizes into its own buffer.
    """

    def __init__(
        self,
        char_aspect_ratio: float = CHAR_ASPECT_RATIO,
        resample: Image.Resampling = Image.Resampling.BOX,
    ):
        self.char_aspect_ratio = char_aspect_ratio
        self.resample = resample

    def render(self, request: RenderRequest) -> AsciiGrid:
        """Render a request to text. Raises RasterizationFailure if the image cannot be sampled."""
        ramp = sanitize_ramp(request.ramp)
        size = target_size(
            request.image.width,
            request.image.height,
            request.scale_percent,
            self.char_aspect_ratio,
        )
        logger.debug(
            "Rendering %dx%d image at %s%% to %dx%d with %d-char ramp",
            request.image.width,
            request.image.height,
            request.scale_percent,
            size[0],
            size[1],
            len(ramp),
        )
        pixels = rasterize(request.image, size, self.resample)
        lines = map_grid(luminance_grid(pixels), ramp)
        text = "".join(line + "\n" for line in lines)
        return AsciiGrid(text=text, width=size[0], height=size[1], ramp=ramp)

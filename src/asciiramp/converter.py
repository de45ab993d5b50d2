from pathlib import Path

from PIL import Image

from asciiramp.engine import RenderRequest
from asciiramp.raster import load_image
from asciiramp.renderer import AsciiRenderer


def image_to_ascii(
    image: Image.Image | str | Path,
    scale_percent: float = 100,
    ramp: str | None = None,
    renderer: AsciiRenderer | None = None,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    if renderer is None:
        renderer = AsciiRenderer()
    return renderer.render(RenderRequest(image=image, scale_percent=scale_percent, ramp=ramp)).text

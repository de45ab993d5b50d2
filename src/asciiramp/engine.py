from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

PREVIEW_SCALE = 2
PREVIEW_MAX_WIDTH = 600
PREVIEW_MAX_HEIGHT = 450


@dataclass(frozen=True)
class RenderRequest:
    image: Image.Image
    scale_percent: float = 100
    ramp: str | None = None


@dataclass(frozen=True)
class AsciiGrid:
    text: str  # rows joined by "\n", with a trailing "\n"
    width: int
    height: int
    ramp: str

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")[:-1]

    @property
    def info(self) -> str:
        return f"W: {self.width}px  H: {self.height}px  | model len: {len(self.ramp)}"

    @property
    def preview_size(self) -> tuple[int, int]:
        """Display size of the sampled-pixel preview, capped at 600x450."""
        return (
            min(PREVIEW_MAX_WIDTH, self.width * PREVIEW_SCALE),
            min(PREVIEW_MAX_HEIGHT, self.height * PREVIEW_SCALE),
        )

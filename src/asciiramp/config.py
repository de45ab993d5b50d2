import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from PIL import Image

from asciiramp.charsets import RAMPS
from asciiramp.raster import RESAMPLE_FILTERS
from asciiramp.sizing import CHAR_ASPECT_RATIO

logger = logging.getLogger(__name__)

FALLBACK_MODEL = "light-to-dark"


@dataclass
class RenderConfig:
    char_aspect_ratio: float = CHAR_ASPECT_RATIO
    resample: str = "box"
    default_scale: float = 50
    min_scale: float = 1
    max_scale: float = 100
    font_size: int = 6
    default_model: str = FALLBACK_MODEL
    log_level: str = "INFO"

    def __post_init__(self):
        if self.resample not in RESAMPLE_FILTERS:
            raise ValueError(f"Unknown resample filter: {self.resample!r}")
        if self.min_scale > self.max_scale:
            raise ValueError(f"min_scale {self.min_scale} exceeds max_scale {self.max_scale}")
        if self.default_model not in RAMPS:
            logger.warning("Unknown default model %r, using %r", self.default_model, FALLBACK_MODEL)
            self.default_model = FALLBACK_MODEL

    @property
    def resample_filter(self) -> Image.Resampling:
        return RESAMPLE_FILTERS[self.resample]

    @classmethod
    def load(cls, path: str | Path) -> "RenderConfig":
        """Read a JSON object of overrides on top of the defaults."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a JSON object: {path}")
        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning("Ignoring unknown config key %r in %s", key, path)
        return cls(**{k: v for k, v in data.items() if k in known})

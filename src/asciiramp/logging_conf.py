import logging

from asciiramp.config import RenderConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(cfg: RenderConfig | str | int | None = None) -> None:
    """Configure root logging from a RenderConfig, or from a bare level name or number."""
    if cfg is None:
        cfg = RenderConfig()
    level = cfg.log_level if isinstance(cfg, RenderConfig) else cfg
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

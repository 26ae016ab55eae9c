import logging

from .config import get_settings

settings = get_settings()
_level = getattr(logging, settings.log_level.upper(), logging.INFO)
logging.basicConfig(level=_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
logger = logging.getLogger(settings.app_name)


def get_logger(name: str) -> logging.Logger:
    """Child logger under the application logger, e.g. ``graphai-visualizer.agents``."""
    return logger.getChild(name)

# Standard library imports
import logging

# Local application imports
from .config import get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> None:
    """
    Configure the root logger from LOG_LEVEL.
    
    Every module logs through ``logging.getLogger(__name__)``; this only sets
    the level and format once at application startup.
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

import logging
from typing import Optional

from reservation_engine.core.config import Settings, settings as default_settings

PACKAGE_LOGGER = "reservation_engine"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level from
    LOG_LEVEL. Calling it again only updates the level.
    """
    settings = settings or default_settings
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.LOG_LEVEL.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger

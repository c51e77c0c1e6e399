"""Application logging: one stdout handler on the doctor_portal logger."""

import logging
import sys
from typing import Optional

from doctor_portal.config import settings


LOGGER_NAME = "doctor_portal"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# passlib warns on every start that it cannot read the bcrypt 4.x version
# attribute; pymongo topology chatter drowns request logs at DEBUG.
QUIET_LOGGERS = {
    "passlib": logging.ERROR,
    "pymongo": logging.WARNING,
}


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure and return the application logger.

    Safe to call more than once; the stdout handler is attached only once.
    """
    name = (level or settings.LOG_LEVEL).upper()
    numeric_level = getattr(logging, name, logging.INFO)

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(numeric_level)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        app_logger.addHandler(handler)

    for noisy, noisy_level in QUIET_LOGGERS.items():
        logging.getLogger(noisy).setLevel(noisy_level)

    return app_logger


logger = setup_logging()

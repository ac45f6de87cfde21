# logger.py
import logging
import sys
from typing import Optional

from pathtracer.config import LOG_FORMAT, LOG_LEVEL

HANDLER_NAME = "pathtracer-stderr"


def setup_logging(level: Optional[str] = None, name: str = "pathtracer") -> logging.Logger:
    """
    Configure the package logger to write to stderr. Modules log through
    logging.getLogger(__name__) and inherit this handler. Image data may go
    to stdout, so diagnostics must stay on stderr.

    Calling this again updates the level and replaces the handler it added
    earlier, so it always writes to the current sys.stderr.
    """
    logger = logging.getLogger(name)
    for old in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(HANDLER_NAME)
    logger.addHandler(handler)
    level = level or LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


__all__ = ["setup_logging"]

"""Logging setup for the ``typed_jsonapi`` logger."""

import logging
import sys
from typing import Optional, Union

from typed_jsonapi.config import get_settings


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    logger = logging.getLogger("typed_jsonapi")
    if logger.handlers:
        return logger  # already configured
    logger.setLevel(level if level is not None else get_settings().log_level.upper())
    handler = logging.StreamHandler(sys.stdout)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    return logger

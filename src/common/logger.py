"""
Provide logging configuration.
"""

import logging
import os
import sys

from .constants import DESCRIBER_STR
from .singleton import Singleton

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(filename)s:%(lineno)d -> %(message)s"


class Logger(metaclass=Singleton):
    """Project-wide logger; every module logs through the one instance."""

    def __init__(self, name: str = DESCRIBER_STR):
        self.log_level_str = os.environ.get("LOG_LEVEL", "DEBUG").upper()
        self.logger = logging.getLogger(name)
        self.logger.propagate = False
        level = logging.getLevelName(self.log_level_str)
        self.logger.setLevel(level if isinstance(level, int) else logging.DEBUG)

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def debug(self, msg, *args, **kwargs):
        self.logger.debug(msg, *args, stacklevel=2, **kwargs)

    def info(self, msg, *args, **kwargs):
        self.logger.info(msg, *args, stacklevel=2, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self.logger.warning(msg, *args, stacklevel=2, **kwargs)

    def error(self, msg, *args, **kwargs):
        self.logger.error(msg, *args, stacklevel=2, **kwargs)

    def critical(self, msg, *args, **kwargs):
        self.logger.critical(msg, *args, stacklevel=2, **kwargs)

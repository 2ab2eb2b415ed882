"""
Logging Helpers

Hands out named loggers with a single stream handler each. The level
comes from the LOG_LEVEL environment variable (see config.log_level_name).
"""

import logging
import threading

import config as app_config

_LOCK = threading.Lock()
_CONFIGURED = set()


def get_logger(name='theme'):
    """Return a configured logger, setting it up on first use."""
    if name in _CONFIGURED:
        return logging.getLogger(name)
    with _LOCK:
        logger = logging.getLogger(name)
        if name in _CONFIGURED:
            return logger
        level = getattr(logging, app_config.log_level_name(), logging.INFO)
        logger.setLevel(level)
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter('[theme] %(asctime)s %(levelname)s %(name)s %(message)s'))
            logger.addHandler(handler)
        logger.propagate = False
        _CONFIGURED.add(name)
        return logger

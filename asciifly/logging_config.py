"""Console logging for the ``asciifly`` logger."""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach one console handler to the package logger.

    The terminal host passes ``sys.stderr`` because frames own stdout.
    Calling it again replaces the handler rather than stacking another.
    """
    logger = logging.getLogger("asciifly")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger

"""Log setup for the ``printparts`` logger namespace.

Module loggers (``logging.getLogger(__name__)``) propagate here; the CLI
calls setup_logging() once with the level picked by ``-v``.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """Send ``printparts`` logs to stdout and, if given, to ``log_file``."""
    logger = logging.getLogger("printparts")
    logger.setLevel(level)
    # main() may run more than once per process (tests)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger

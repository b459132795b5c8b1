"""
Methods for setting up logging for tools.
-----------------------------------------
"""

import logging
import socket
from threading import RLock
from typing import Optional


# The handler added to the pyfgjitter logger, set once logging initialization has run.
__PYFGJITTER_HANDLER: Optional[logging.Handler] = None

# A lock used to make sure the handler is added only once
__LOCK = RLock()


def setup_logging(level: str = "INFO") -> None:
    """Globally configure logging for all modules under pyfgjitter.

    The first call adds a handler that outputs messages to stderr with useful information
    preceding the actual log message.  Subsequent calls only change the level.

    Args:
        level: the logging level (ex. `DEBUG`, `INFO`, `WARNING`)
    """
    global __PYFGJITTER_HANDLER

    with __LOCK:
        logger = logging.getLogger("pyfgjitter")
        if __PYFGJITTER_HANDLER is None:
            format = (
                f"%(asctime)s {socket.gethostname()} %(name)s:%(funcName)s:%(lineno)s "
                + "[%(levelname)s]: %(message)s"
            )
            __PYFGJITTER_HANDLER = logging.StreamHandler()
            __PYFGJITTER_HANDLER.setFormatter(logging.Formatter(format))
            logger.addHandler(__PYFGJITTER_HANDLER)

        __PYFGJITTER_HANDLER.setLevel(level)
        logger.setLevel(level)

"""Main entry point for all pyfgjitter tools."""

import logging
import sys
from datetime import timedelta
from typing import Any
from typing import Callable
from typing import Dict
from typing import List

import defopt

from pyfgjitter.core.logging import setup_logging
from pyfgjitter.jitter.tools import sample_jitter
from pyfgjitter.jitter.tools import sleep_with_jitter
from pyfgjitter.util import parse_duration


# The list of tools to expose on the command line
TOOLS: List[Callable] = sorted([sample_jitter, sleep_with_jitter], key=lambda f: f.__name__)


def _parsers() -> Dict[type, Callable[[str], Any]]:
    """Returns the custom parsers for defopt"""
    return {timedelta: parse_duration}


def main(argv: List[str] = sys.argv[1:], log_level: str = "INFO") -> None:
    setup_logging(level=log_level)
    logger = logging.getLogger(__name__)
    if len(argv) != 0 and all(arg not in argv for arg in ["-h", "--help"]):
        logger.info("Running command: fgjitter-tools " + " ".join(argv))
    try:
        defopt.run(funcs=TOOLS, argv=argv, parsers=_parsers())
        logger.info("Completed successfully.")
    except Exception as e:
        logger.info("Failed on command: " + " ".join(argv))
        raise e


if __name__ == "__main__":
    main()

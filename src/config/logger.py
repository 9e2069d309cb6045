"""Application logging setup.

Everything goes to stdout through the root logger, so modules simply call
``logging.info(...)`` once :func:`setup_logging` has run at startup.
"""

import logging
import os
import sys
from typing import Optional

# module & line number identify the origin of each message since every
# file logs through the root logger.
DEFAULT_FORMAT = "%(asctime)s - %(module)s:%(lineno)d - %(levelname)s - %(message)s"

# Chatty third-party loggers that would otherwise echo request URLs.
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: int = logging.INFO,
    stream: Optional[object] = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure the root logger exactly once; safe to call repeatedly.

    * ``LOG_LEVEL`` in the environment overrides *level*.
    * Uvicorn's loggers share the root handlers so access logs and
      application logs interleave in one stream.
    """
    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        level = getattr(logging, env_level.upper(), level)

    if stream is None:
        stream = sys.stdout

    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    # Always (re)set the level so later calls can raise/lower it
    root.setLevel(level)

    for pkg in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(pkg).handlers = root.handlers
        logging.getLogger(pkg).setLevel(level)

    # access tokens travel in URLs of some HubSpot endpoints
    for pkg in QUIET_LOGGERS:
        logging.getLogger(pkg).setLevel(max(level, logging.WARNING))

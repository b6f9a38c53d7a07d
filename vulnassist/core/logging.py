"""
Logging setup for the suggestion service.

``setup_logging`` is called once from ``vulnassist.main``; everything else
asks for a module logger:

    from vulnassist.core.logging import get_logger

    logger = get_logger(__name__)

Flow loggers never receive the vulnerability description itself, only its
length, so log output stays safe to ship.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP transport and LangChain internals log every request and chain step
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "openai",
    "langchain",
    "langchain_core",
    "langchain_openai",
    "uvicorn.access",
)


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the service.

    Args:
        level: Log level name, normally ``settings.LOG_LEVEL``. Unknown
            names fall back to INFO.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``)."""
    return logging.getLogger(name)

"""Logging helpers for querybrick.

The library only ever logs under the ``querybrick`` namespace and installs a
``NullHandler`` so nothing is printed unless the application configures
logging.  :func:`configure_logging` is a convenience for scripts and tests.
"""

from __future__ import annotations

import logging

_ROOT = "querybrick"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(_ROOT)
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.setLevel(level)
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT}.{name}")

"""
Utility helpers shared across querybrick packages.
"""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]

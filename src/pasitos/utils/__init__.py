"""Utility modules for Pasitos.

Provides:
- logger: get_logger for logging
"""

from pasitos.utils.logger import get_logger

__all__ = [
    "get_logger",
]

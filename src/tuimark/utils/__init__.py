"""Utility modules for tuimark.

Provides:
- logger: get_logger for logging
"""

from tuimark.utils.logger import get_logger

__all__ = ["get_logger"]

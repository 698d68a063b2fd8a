"""Utility modules for wrapdoc.

Provides:
- logger: get_logger for logging
"""

from wrapdoc.utils.logger import get_logger

__all__ = ["get_logger"]

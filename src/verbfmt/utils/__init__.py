"""Utility modules for verbfmt.

Provides:
- logger: get_logger for logging
"""

from verbfmt.utils.logger import get_logger

__all__ = ["get_logger"]

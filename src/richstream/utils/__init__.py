"""Utility modules for richstream.

Provides:
- logger: get_logger for namespaced logging
"""

from richstream.utils.logger import get_logger

__all__ = ["get_logger"]

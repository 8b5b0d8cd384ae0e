"""Utility modules for luaflow.

Provides:
- logger: get_logger for logging
"""

from luaflow.utils.logger import get_logger

__all__ = ["get_logger"]

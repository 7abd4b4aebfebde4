"""Utility modules for Parenscan.

Provides:
- logger: get_logger for logging
"""

from parenscan.utils.logger import get_logger

__all__ = ["get_logger"]

"""Logging module for uipoll."""

from .logger import get_logger, reset_logging, setup_logging

__all__ = ["setup_logging", "get_logger", "reset_logging"]

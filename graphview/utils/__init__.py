"""Logging helpers."""
from .logger import get_package_logger, reset_logging, setup_logging

__all__ = ["get_package_logger", "reset_logging", "setup_logging"]

"""Logging package with Rich-based output."""

from .rich_logger import setup_logging, PACKAGE_LOGGER

__all__ = ["setup_logging", "PACKAGE_LOGGER"]

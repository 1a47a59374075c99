"""Logging setup for Clockwall."""

from clockwall.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]

"""Logging subpackage."""

from dust_burner.logging.config import configure_logging

__all__ = ["configure_logging"]

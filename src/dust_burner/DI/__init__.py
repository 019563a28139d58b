"""Dependency injection."""

from dust_burner.DI.container import Container

__all__ = ["Container"]

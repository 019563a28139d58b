"""Watched account resolution."""

from dust_burner.services.identity.address_resolver import AddressResolver

__all__ = ["AddressResolver"]

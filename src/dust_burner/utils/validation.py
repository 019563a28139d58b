"""Validation helpers for addresses."""

from __future__ import annotations

from typing import Any

import base58


def is_address(addr: Any, network_version: int | None = None) -> bool:
    """Return True if addr is a Base58Check address (1 version byte + 20-byte hash)."""
    if not isinstance(addr, str) or not addr.strip():
        return False
    try:
        decoded = base58.b58decode_check(addr.strip())
    except ValueError:
        return False
    if len(decoded) != 21:
        return False
    return network_version is None or decoded[0] == network_version


def mask_address(addr: str | None) -> str:
    """Return a masked address for logging (e.g. SXhcB...4bQd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:5]}...{addr[-4:]}"

"""Abstract interface for reading account state (node state, HTTP API, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dust_burner.models.chain import WalletState


class IWalletRepository(ABC):
    """Read-only access to account balance and nonce."""

    @abstractmethod
    async def find_by_address(self, address: str) -> WalletState:
        """Return the current state of the account at address."""
        ...

"""NonceSequencer: hands out the watched account's burn nonces within a block."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dust_burner.interfaces.wallet_repository import IWalletRepository


class NonceSequencer:
    """First call of a block reads the on-chain nonce and returns it + 1; later calls increment.

    reset() is called on every applied block so the next block starts from the
    fresh on-chain nonce.
    """

    def __init__(self, wallet_repository: IWalletRepository) -> None:
        self._wallets = wallet_repository
        self._nonce: int | None = None

    @property
    def current(self) -> int | None:
        """Last nonce handed out in this block, None if none yet."""
        return self._nonce

    async def next(self, address: str) -> int:
        if self._nonce is None:
            wallet = await self._wallets.find_by_address(address)
            self._nonce = wallet.nonce + 1
        else:
            self._nonce += 1
        return self._nonce

    def reset(self) -> None:
        self._nonce = None

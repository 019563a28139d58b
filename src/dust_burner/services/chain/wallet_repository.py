"""Wallet repository backed by the node public API."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from dust_burner.exceptions import NodeAPIError
from dust_burner.interfaces.wallet_repository import IWalletRepository
from dust_burner.models.chain import WalletState
from dust_burner.utils.amounts import parse_amount
from dust_burner.utils.validation import is_address, mask_address

if TYPE_CHECKING:
    from dust_burner.clients.node_api import NodeApiClient


class NodeWalletRepository(IWalletRepository):
    """Reads balance and nonce through GET /wallets/{address}."""

    def __init__(
        self,
        node_api: NodeApiClient,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._node_api = node_api
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def find_by_address(self, address: str) -> WalletState:
        """Return the account state; an account the node has never seen is empty (balance 0, nonce 0)."""
        if not is_address(address):
            raise ValueError(f"not a valid address: {address!r}")
        try:
            wallet = await self._node_api.get_wallet(address)
        except NodeAPIError as e:
            if e.status_code != 404:
                raise
            self._logger.debug("wallet_not_found", wallet_masked=mask_address(address))
            return WalletState(address=address)
        return WalletState(
            address=address,
            balance=parse_amount(wallet.get("balance")),
            nonce=parse_amount(wallet.get("nonce")),
        )

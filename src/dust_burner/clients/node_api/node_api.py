# -*- coding: utf-8 -*-
"""Node public API client (wallets, configuration, blocks, transaction pool)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, cast
from structlog.contextvars import bound_contextvars

from dust_burner.clients.node_api.schema import (
    BlockSchema,
    BroadcastSchema,
    TransactionSchema,
    WalletSchema,
)
from dust_burner.config import Settings
from dust_burner.exceptions import NodeAPIError
from dust_burner.utils.validation import mask_address

if TYPE_CHECKING:
    from dust_burner.clients.http import AsyncHttpClient


def _data(response: Any, url: str) -> Any:
    """Unwrap the {"data": ...} envelope every node endpoint uses."""
    if not isinstance(response, dict) or "data" not in response:
        raise NodeAPIError(f"Unexpected response shape from {url}", url=url)
    return response["data"]


class NodeApiClient:
    """Client for the node public API."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.node.api_host and page_size).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.node.api_host.rstrip("/")

    async def get_wallet(self, address: str) -> WalletSchema:
        """GET /wallets/{address}."""
        with bound_contextvars(node_api_wallet_masked=mask_address(address)):
            url = f"{self._base_url()}/wallets/{address}"
            data = _data(await self._http.get(url), url)
            if not isinstance(data, dict):
                raise NodeAPIError(f"Wallet payload is not an object: {url}", url=url)
            return cast(WalletSchema, data)

    async def get_configuration(self) -> Dict[str, Any]:
        """GET /node/configuration. `constants` holds the active milestone."""
        url = f"{self._base_url()}/node/configuration"
        data = _data(await self._http.get(url), url)
        if not isinstance(data, dict):
            raise NodeAPIError(f"Configuration payload is not an object: {url}", url=url)
        return cast(Dict[str, Any], data)

    async def get_last_block(self) -> BlockSchema:
        """GET /blocks/last."""
        url = f"{self._base_url()}/blocks/last"
        data = _data(await self._http.get(url), url)
        if not isinstance(data, dict) or "height" not in data:
            raise NodeAPIError(f"Block payload has no height: {url}", url=url)
        return cast(BlockSchema, data)

    async def get_block(self, height: int) -> BlockSchema:
        """GET /blocks/{height}."""
        url = f"{self._base_url()}/blocks/{height}"
        data = _data(await self._http.get(url), url)
        if not isinstance(data, dict):
            raise NodeAPIError(f"Block payload is not an object: {url}", url=url)
        return cast(BlockSchema, data)

    async def get_block_transactions(self, height: int) -> List[TransactionSchema]:
        """GET /blocks/{height}/transactions, all pages, in block order."""
        page_size = self._settings.node.page_size
        url = f"{self._base_url()}/blocks/{height}/transactions"
        result: List[TransactionSchema] = []
        page = 1
        with bound_contextvars(node_api_block_height=height):
            while True:
                params: Dict[str, Any] = {"page": page, "limit": page_size}
                data = _data(await self._http.get(url, params=params), url)
                if not isinstance(data, list):
                    self._logger.warning(
                        "node_api_block_transactions_non_list",
                        node_api_response_type=type(data).__name__,
                    )
                    return result
                for x in cast(list[Any], data):
                    if isinstance(x, dict):
                        result.append(cast(TransactionSchema, x))
                if len(data) < page_size:
                    return result
                page += 1

    async def post_transactions(self, transactions: List[Dict[str, Any]]) -> tuple[BroadcastSchema, Dict[str, Any]]:
        """POST /transactions. Returns (data, errors) where errors is keyed by transaction id."""
        url = f"{self._base_url()}/transactions"
        response = await self._http.post(url, json={"transactions": transactions})
        data = _data(response, url)
        errors = response.get("errors") or {}
        return cast(BroadcastSchema, data), cast(Dict[str, Any], errors)

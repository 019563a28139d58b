"""Broadcaster that posts signed transactions to the node's transaction pool."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from dust_burner.exceptions import BroadcastRejectedError
from dust_burner.interfaces.broadcaster import BroadcastResult, ITransactionBroadcaster
from dust_burner.models.burn_transaction import BurnTransaction

if TYPE_CHECKING:
    from dust_burner.clients.node_api import NodeApiClient


def _error_message(error: Any) -> str:
    if isinstance(error, list):
        return "; ".join(_error_message(e) for e in error)
    if isinstance(error, dict):
        return str(error.get("message") or error.get("type") or error)
    return str(error)


class NodeTransactionBroadcaster(ITransactionBroadcaster):
    """POST /transactions; the node relays accepted transactions to its peers."""

    def __init__(
        self,
        node_api: NodeApiClient,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._node_api = node_api
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def broadcast_transactions(
        self, transactions: list[BurnTransaction]
    ) -> BroadcastResult:
        unsigned = [t for t in transactions if not t.is_signed]
        if unsigned:
            raise ValueError("only signed transactions can be broadcast")

        data, errors = await self._node_api.post_transactions([t.to_dict() for t in transactions])
        result = BroadcastResult(
            accepted=list(data.get("accept") or []),
            broadcast=list(data.get("broadcast") or []),
            excess=list(data.get("excess") or []),
        )
        invalid = list(data.get("invalid") or [])
        if invalid:
            messages = {tx_id: _error_message(errors.get(tx_id)) for tx_id in invalid}
            self._logger.warning(
                "broadcast_rejected",
                invalid=invalid,
                errors=messages,
            )
            raise BroadcastRejectedError(
                f"node rejected {len(invalid)} transaction(s): {messages}",
                transaction_ids=invalid,
            )
        self._logger.debug(
            "broadcast_submitted",
            accepted=result.accepted,
            broadcast=result.broadcast,
            excess=result.excess,
        )
        return result

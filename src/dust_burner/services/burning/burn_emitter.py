# -*- coding: utf-8 -*-
"""BurnEmitter: builds, signs and broadcasts one burn transaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from dust_burner.events.burns import BurnBroadcastedEvent
from dust_burner.exceptions import BroadcastRejectedError, NodeAPIError
from dust_burner.services.burning.dust_accumulator import BurnKind
from dust_burner.utils.amounts import format_satoshi

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from dust_burner.crypto.transaction_builder import TransactionBuilderFactory
    from dust_burner.interfaces.broadcaster import BroadcastResult, ITransactionBroadcaster
    from dust_burner.models.burn_transaction import BurnTransaction
    from dust_burner.models.chain import WatchedAccount


@dataclass
class BurnEmissionResult:
    """Result of a burn emission."""

    success: bool = False
    transaction: Optional["BurnTransaction"] = None
    broadcast: Optional["BroadcastResult"] = None
    error: str | None = None


class BurnEmitter:
    """Emits exactly one signed burn per call, as a singleton broadcast batch.

    Failures are logged and reported in the result; nothing is raised and
    nothing is retried. The caller has already committed its local state.
    """

    _event_bus: Optional["EventBus"]

    def __init__(
        self,
        builder_factory: "TransactionBuilderFactory",
        broadcaster: "ITransactionBroadcaster",
        event_bus: Optional[Any] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the emitter.

        Args:
            builder_factory: Source of burn transaction builders.
            broadcaster: Hands signed transactions to the network.
            event_bus: Optional; if set, BurnBroadcastedEvent is dispatched after every attempt.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name.
        """
        self._builders = builder_factory
        self._broadcaster = broadcaster
        self._event_bus = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def emit(
        self,
        amount: int,
        memo: str,
        nonce: int,
        account: "WatchedAccount",
        *,
        kind: BurnKind = BurnKind.DIRECT,
    ) -> BurnEmissionResult:
        """Build, sign and broadcast one burn of amount with memo and nonce."""
        result = BurnEmissionResult()
        try:
            transaction = (
                self._builders.burn()
                .amount(amount)
                .memo(memo)
                .nonce(nonce)
                .sign(account.passphrase)
                .build()
            )
            result.transaction = transaction
        except ValueError as e:
            result.error = str(e)
            self._logger.error(
                "burn_build_failed",
                amount=amount,
                memo=memo,
                nonce=nonce,
                error_message=str(e),
            )
            self._dispatch_broadcasted(amount, memo, nonce, kind, result)
            return result

        if kind is BurnKind.DUST:
            self._logger.info(
                "burn_broadcasting_dust",
                amount=amount,
                amount_formatted=format_satoshi(amount),
                nonce=nonce,
                transaction_id=transaction.id,
            )
        else:
            self._logger.info(
                "burn_broadcasting",
                amount=amount,
                amount_formatted=format_satoshi(amount),
                source_transaction_id=memo,
                nonce=nonce,
                transaction_id=transaction.id,
            )

        try:
            broadcast = await self._broadcaster.broadcast_transactions([transaction])
            result.broadcast = broadcast
            result.success = broadcast.success
            if not broadcast.success:
                result.error = "transaction was not accepted into the pool"
                self._logger.warning(
                    "burn_broadcast_not_accepted",
                    transaction_id=transaction.id,
                    nonce=nonce,
                    excess=broadcast.excess,
                )
            else:
                self._logger.info(
                    "burn_broadcast_done",
                    transaction_id=transaction.id,
                    nonce=nonce,
                )
        except (BroadcastRejectedError, NodeAPIError) as e:
            result.error = str(e)
            self._logger.warning(
                "burn_broadcast_failed",
                transaction_id=transaction.id,
                amount=amount,
                nonce=nonce,
                error_type=type(e).__name__,
                error_message=str(e),
            )
        except Exception as e:
            result.error = str(e)
            self._logger.exception(
                "burn_broadcast_exception",
                transaction_id=transaction.id,
                amount=amount,
                nonce=nonce,
                error_type=type(e).__name__,
                error_message=str(e),
            )
        self._dispatch_broadcasted(amount, memo, nonce, kind, result)
        return result

    def _dispatch_broadcasted(
        self,
        amount: int,
        memo: str,
        nonce: int,
        kind: BurnKind,
        result: BurnEmissionResult,
    ) -> None:
        """Emit BurnBroadcastedEvent for listeners (reconciliation, notifications)."""
        if self._event_bus is None:
            return
        event = BurnBroadcastedEvent(
            amount=amount,
            memo=memo,
            nonce=nonce,
            kind="dust" if kind is BurnKind.DUST else "direct",
            success=result.success,
            transaction_id=result.transaction.id if result.transaction else None,
            error_message=result.error,
        )
        self._event_bus.dispatch(event)

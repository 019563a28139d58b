# -*- coding: utf-8 -*-
"""BurnEngine: turns applied-transaction notifications into burn transactions.

Owns the process-wide burn state (watched account, dust balance, nonce counter)
and wires the extractor, accumulator, sequencer and emitter to the two chain
events. Decisions are serialised with a lock; the broadcast runs outside it so
that nonces and dust are committed at decision time, in event order.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from dust_burner.events.chain import BlockAppliedEvent, TransactionAppliedEvent
from dust_burner.models.transaction import TransactionData
from dust_burner.services.burning.dust_accumulator import (
    DUST_MEMO,
    BurnDecision,
    BurnKind,
    DustAccumulator,
    decide_without_dust,
)
from dust_burner.services.burning.nonce_sequencer import NonceSequencer
from dust_burner.services.burning.transfer_extractor import TransferExtractor
from dust_burner.utils.amounts import format_satoshi
from dust_burner.utils.validation import mask_address

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from dust_burner.interfaces.wallet_repository import IWalletRepository
    from dust_burner.models.chain import WatchedAccount
    from dust_burner.services.burning.burn_emitter import BurnEmissionResult, BurnEmitter
    from dust_burner.services.identity import AddressResolver
    from dust_burner.services.threshold import ThresholdSource


class EngineState(str, Enum):
    """Engine lifecycle state."""

    UNINITIALIZED = "UNINITIALIZED"
    ACTIVE = "ACTIVE"


@dataclass(frozen=True)
class PendingBurn:
    """A committed burn decision waiting to be emitted."""

    amount: int
    memo: str
    nonce: int
    kind: BurnKind


class BurnEngine:
    """Reacts to BlockAppliedEvent and TransactionAppliedEvent for one watched account."""

    def __init__(
        self,
        address_resolver: "AddressResolver",
        wallet_repository: "IWalletRepository",
        threshold_source: "ThresholdSource",
        burn_emitter: "BurnEmitter",
        event_bus: Any,
        *,
        passphrase: Optional[str],
        accumulate_dust: bool = True,
        initialize_dust_from_balance: bool = True,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the engine. Nothing is resolved or subscribed until boot().

        Args:
            address_resolver: Derives the watched account from the passphrase.
            wallet_repository: Source of the watched wallet's balance and nonce.
            threshold_source: Minimum burn amount of the active milestone.
            burn_emitter: Builds, signs and broadcasts burns.
            event_bus: Bus delivering the chain events.
            passphrase: Secret of the watched account.
            accumulate_dust: Carry sub-threshold amounts forward and burn direct transfers too.
            initialize_dust_from_balance: Seed the dust balance with the wallet balance at boot.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name.
        """
        self._resolver = address_resolver
        self._wallets = wallet_repository
        self._threshold = threshold_source
        self._emitter = burn_emitter
        self._event_bus: "EventBus" = event_bus
        self._passphrase = passphrase
        self._accumulate_dust = accumulate_dust
        self._initialize_dust_from_balance = initialize_dust_from_balance
        self._logger = get_logger(logger_name or self.__class__.__name__)

        self._extractor = TransferExtractor(accept_direct_recipient=accumulate_dust)
        self._dust: DustAccumulator | None = DustAccumulator() if accumulate_dust else None
        self._nonces = NonceSequencer(wallet_repository)
        self._lock = asyncio.Lock()
        self._account: WatchedAccount | None = None
        self._state = EngineState.UNINITIALIZED
        self._stopped = False

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def account(self) -> Optional["WatchedAccount"]:
        return self._account

    @property
    def dust_balance(self) -> int | None:
        """Current dust balance, None when dust accumulation is disabled."""
        return self._dust.balance if self._dust is not None else None

    @property
    def nonce(self) -> int | None:
        return self._nonces.current

    async def boot(self) -> None:
        """Resolve the watched account, seed dust, subscribe to chain events.

        Raises:
            InvalidPassphraseError: If the passphrase cannot be resolved. The engine stays UNINITIALIZED.
        """
        if self._state is EngineState.ACTIVE:
            self._logger.debug("burn_engine_already_active")
            return

        account = self._resolver.resolve(self._passphrase)

        if self._dust is not None and self._initialize_dust_from_balance:
            wallet = await self._wallets.find_by_address(account.address)
            self._dust.seed(wallet.balance)

        self._account = account
        self._event_bus.on(BlockAppliedEvent, self.on_block_applied)
        self._event_bus.on(TransactionAppliedEvent, self.on_transaction_applied)
        self._state = EngineState.ACTIVE
        self._logger.info(
            "burn_engine_started",
            wallet_masked=mask_address(account.address),
            accumulate_dust=self._accumulate_dust,
            dust_balance=self.dust_balance,
        )

    def stop(self) -> None:
        """Unsubscribe from chain events. State is kept; boot() is not repeatable after stop.

        Handlers ignore events from here on even if the bus still delivers them.
        """
        self._stopped = True
        # bubus (1.5.x) has no off(); its registry is `handlers[event_type_name] -> list`.
        handlers = getattr(self._event_bus, "handlers", {})
        for event_type, handler in (
            (BlockAppliedEvent, self.on_block_applied),
            (TransactionAppliedEvent, self.on_transaction_applied),
        ):
            key = event_type.__name__
            if key in handlers:
                handlers[key] = [h for h in handlers[key] if h != handler]
        self._logger.debug("burn_engine_stopped")

    def on_block_applied(self, event: BlockAppliedEvent) -> None:
        """New block: the next burn recomputes its nonce from the chain."""
        if self._stopped:
            return
        self._nonces.reset()
        self._logger.debug("burn_nonce_reset", block_height=event.height)

    async def on_transaction_applied(self, event: TransactionAppliedEvent) -> None:
        """Evaluate one applied transaction. Errors are logged, never raised to the dispatcher."""
        if self._stopped:
            return
        try:
            transaction = TransactionData.from_response(event.transaction)
            await self.process_transaction(transaction)
        except Exception as e:
            self._logger.exception(
                "burn_evaluation_failed",
                transaction_id=event.transaction.get("id"),
                error_type=type(e).__name__,
                error_message=str(e),
            )

    async def process_transaction(
        self, transaction: TransactionData
    ) -> Optional["BurnEmissionResult"]:
        """Decide and, if a burn is due, emit it. Returns None when nothing was emitted."""
        if self._state is not EngineState.ACTIVE or self._account is None:
            raise RuntimeError("burn engine is not active; call boot() first")

        pending = await self._decide(transaction, self._account)
        if pending is None:
            return None
        return await self._emitter.emit(
            pending.amount,
            pending.memo,
            pending.nonce,
            self._account,
            kind=pending.kind,
        )

    async def _decide(
        self, transaction: TransactionData, account: "WatchedAccount"
    ) -> PendingBurn | None:
        async with self._lock:
            transfers = self._extractor.extract(transaction, account.address)
            if not transfers:
                return None
            amount = self._extractor.total(transfers)
            if amount <= 0:
                self._logger.debug("burn_zero_amount_ignored", transaction_id=transaction.id)
                return None

            threshold = await self._threshold.current_minimum_burn()
            if amount < threshold:
                self._logger.info(
                    "burn_amount_below_threshold",
                    transaction_id=transaction.id,
                    amount=format_satoshi(amount),
                    minimum=format_satoshi(threshold),
                )

            decision: BurnDecision
            if self._dust is not None:
                decision = self._dust.fold(amount, threshold)
            else:
                decision = decide_without_dust(amount, threshold)

            if not decision.burn_now:
                if self._dust is not None:
                    self._logger.info(
                        "dust_accumulated",
                        dust_balance=format_satoshi(self._dust.balance),
                        minimum=format_satoshi(threshold),
                    )
                return None

            nonce = await self._nonces.next(account.address)
            if decision.kind is BurnKind.DUST and self._dust is not None:
                self._dust.reset()
                memo = DUST_MEMO
            else:
                memo = transaction.id
            return PendingBurn(amount=decision.amount, memo=memo, nonce=nonce, kind=decision.kind)

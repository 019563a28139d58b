"""Block feed (polling): turns new blocks on the node into chain events."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog

from dust_burner.events.chain import BlockAppliedEvent, TransactionAppliedEvent
from dust_burner.exceptions import NodeAPIError

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from dust_burner.clients.node_api import NodeApiClient
    from dust_burner.config import Settings


class BlockFeed:
    """Polls the node for new blocks and dispatches events in application order.

    For each new block: one TransactionAppliedEvent per transaction (block order),
    then one BlockAppliedEvent. The first poll only records the current height.
    Catching up several blocks in one poll delivers their block events before
    earlier burns are forged, so poll_seconds should stay below the block time.
    """

    def __init__(
        self,
        settings: Settings,
        node_api: NodeApiClient,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the feed.

        Args:
            settings: Application settings (uses settings.node.poll_seconds).
            node_api: Node API client (injected).
            event_bus: Bus the chain events are dispatched on.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._node_api = node_api
        self._event_bus: "EventBus" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._height: int | None = None

    @property
    def height(self) -> int | None:
        """Height of the last block whose events were dispatched."""
        return self._height

    async def poll_once(self) -> int:
        """Dispatch events for blocks above the last seen height. Returns the number of blocks processed."""
        last = await self._node_api.get_last_block()
        last_height = int(last["height"])
        if self._height is None:
            self._height = last_height
            self._logger.debug("block_feed_baseline", block_height=last_height)
            return 0
        if last_height < self._height:
            self._logger.warning(
                "block_feed_height_went_back",
                block_height=last_height,
                previous_height=self._height,
            )
            self._height = last_height
            return 0

        processed = 0
        for height in range(self._height + 1, last_height + 1):
            await self._dispatch_block(height, last if height == last_height else None)
            self._height = height
            processed += 1
        return processed

    async def _dispatch_block(self, height: int, block: Any | None) -> None:
        if block is None:
            block = await self._node_api.get_block(height)
        transactions = await self._node_api.get_block_transactions(height)
        for tx in transactions:
            self._event_bus.dispatch(
                TransactionAppliedEvent(
                    transaction=cast(dict[str, Any], tx),
                    block_height=height,
                )
            )
        # Awaiting the block event waits for everything queued before it.
        await self._event_bus.dispatch(
            BlockAppliedEvent(height=height, block_id=block.get("id"))
        )
        self._logger.debug(
            "block_feed_block_dispatched",
            block_height=height,
            block_transactions=len(transactions),
        )

    async def run(self, *, poll_seconds: float | None = None) -> None:
        """Poll until cancelled. Node API errors are logged and the poll is retried."""
        poll_seconds = poll_seconds if poll_seconds is not None else self._settings.node.poll_seconds
        if poll_seconds <= 0:
            poll_seconds = 1.0

        self._logger.info("block_feed_started", poll_seconds=poll_seconds)
        try:
            while True:
                try:
                    await self.poll_once()
                except NodeAPIError as e:
                    self._logger.warning(
                        "block_feed_poll_failed",
                        error_type=type(e).__name__,
                        error_message=str(e),
                        block_height=self._height,
                    )
                await asyncio.sleep(poll_seconds)
        except asyncio.CancelledError:
            self._logger.debug("block_feed_stopped", block_height=self._height)
            raise
        except Exception as e:
            self._logger.exception(
                "block_feed_exception",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

# -*- coding: utf-8 -*-
"""Chain events (bubus BaseEvent) delivered by the host node or the block feed."""

from __future__ import annotations

from typing import Any, Optional

from bubus import BaseEvent  # type: ignore[import-untyped]


class TransactionAppliedEvent(BaseEvent[None]):
    """Emitted for every transaction applied to the chain state.

    Delivered before the BlockAppliedEvent of the block that contains it.
    """

    transaction: dict[str, Any]
    """Raw transaction as returned by the node API (camelCase keys)."""

    block_height: Optional[int] = None


class BlockAppliedEvent(BaseEvent[None]):
    """Emitted once a block and all of its transactions have been applied."""

    height: int
    block_id: Optional[str] = None

"""Burn events (emitted by BurnEmitter)."""

from __future__ import annotations

from typing import Literal, Optional

from bubus import BaseEvent  # type: ignore[import-untyped]


class BurnBroadcastedEvent(BaseEvent[None]):
    """Emitted after a burn transaction has been handed to the broadcaster (or failed to be)."""

    amount: int
    memo: str
    nonce: int
    kind: Literal["direct", "dust"]
    success: bool
    transaction_id: Optional[str] = None
    error_message: Optional[str] = None

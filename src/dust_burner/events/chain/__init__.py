# -*- coding: utf-8 -*-
"""Chain events."""

from dust_burner.events.chain.chain_events import (
    BlockAppliedEvent,
    TransactionAppliedEvent,
)

__all__ = ["BlockAppliedEvent", "TransactionAppliedEvent"]

# -*- coding: utf-8 -*-
"""Event bus and event types."""

from dust_burner.events.bus import get_event_bus, set_event_bus
from dust_burner.events.burns import BurnBroadcastedEvent
from dust_burner.events.chain import BlockAppliedEvent, TransactionAppliedEvent

__all__ = [
    "get_event_bus",
    "set_event_bus",
    "BlockAppliedEvent",
    "BurnBroadcastedEvent",
    "TransactionAppliedEvent",
]

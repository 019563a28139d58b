"""Burn events."""

from dust_burner.events.burns.burn_events import BurnBroadcastedEvent

__all__ = ["BurnBroadcastedEvent"]

"""Dust burner: burns value sent to a watched address, accumulating sub-threshold dust."""

from dust_burner.config import get_settings
from dust_burner.DI import Container
from dust_burner.services import BlockFeed, BurnEngine

__version__ = "0.1.0"
__all__ = [
    "BlockFeed",
    "BurnEngine",
    "Container",
    "get_settings",
]

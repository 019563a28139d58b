"""Services: burning, identity, threshold and chain access."""

from dust_burner.services.burning import BurnEmitter, BurnEngine
from dust_burner.services.chain import BlockFeed
from dust_burner.services.identity import AddressResolver
from dust_burner.services.threshold import ThresholdSource

__all__ = [
    "AddressResolver",
    "BlockFeed",
    "BurnEmitter",
    "BurnEngine",
    "ThresholdSource",
]

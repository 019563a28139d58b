"""Node-backed implementations of the chain interfaces, and the block feed."""

from dust_burner.services.chain.block_feed import BlockFeed
from dust_burner.services.chain.broadcaster import NodeTransactionBroadcaster
from dust_burner.services.chain.rule_set import NodeRuleSet
from dust_burner.services.chain.wallet_repository import NodeWalletRepository

__all__ = [
    "BlockFeed",
    "NodeRuleSet",
    "NodeTransactionBroadcaster",
    "NodeWalletRepository",
]

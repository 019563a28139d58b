"""Active milestone read from the node configuration endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dust_burner.exceptions import NodeAPIError
from dust_burner.interfaces.rule_set import IRuleSet
from dust_burner.models.chain import Milestone
from dust_burner.utils.amounts import parse_amount

if TYPE_CHECKING:
    from dust_burner.clients.node_api import NodeApiClient


def milestone_from_constants(constants: Any) -> Milestone:
    """Build a Milestone from the node's `constants` object (the active milestone)."""
    burn = constants.get("burn") if isinstance(constants, dict) else None
    if not isinstance(burn, dict) or burn.get("txAmount") is None:
        raise NodeAPIError("Active milestone has no burn.txAmount")
    height = constants.get("height")
    return Milestone(
        burn_tx_amount=parse_amount(burn["txAmount"]),
        height=int(height) if isinstance(height, int) else None,
    )


class NodeRuleSet(IRuleSet):
    """Queries GET /node/configuration on every call; the milestone can change at any height."""

    def __init__(self, node_api: NodeApiClient) -> None:
        self._node_api = node_api

    async def get_active_milestone(self) -> Milestone:
        configuration = await self._node_api.get_configuration()
        return milestone_from_constants(configuration.get("constants"))

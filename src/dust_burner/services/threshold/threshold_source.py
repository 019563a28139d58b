"""Threshold source: minimum burn amount of the active milestone."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dust_burner.interfaces.rule_set import IRuleSet


class ThresholdSource:
    """Reads the minimum burn amount from the rule-set on every call (never cached)."""

    def __init__(self, rule_set: IRuleSet) -> None:
        self._rule_set = rule_set

    async def current_minimum_burn(self) -> int:
        milestone = await self._rule_set.get_active_milestone()
        return milestone.burn_tx_amount

"""Abstract interface for the network's active consensus rule-set."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dust_burner.models.chain import Milestone


class IRuleSet(ABC):
    """Access to the currently active milestone. May change between blocks."""

    @abstractmethod
    async def get_active_milestone(self) -> Milestone:
        """Return the milestone in effect right now."""
        ...

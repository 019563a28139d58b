"""Abstract interface for handing signed transactions to the network."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from dust_burner.models.burn_transaction import BurnTransaction


@dataclass
class BroadcastResult:
    """Outcome of a broadcast as reported by the node."""

    accepted: list[str] = field(default_factory=list)
    broadcast: list[str] = field(default_factory=list)
    excess: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return bool(self.accepted)


class ITransactionBroadcaster(ABC):
    """Interface for submitting transactions to peers."""

    @abstractmethod
    async def broadcast_transactions(
        self, transactions: list[BurnTransaction]
    ) -> BroadcastResult:
        """Submit the given signed transactions.

        Raises:
            BroadcastRejectedError: If the network refuses any of them as invalid.
        """
        ...

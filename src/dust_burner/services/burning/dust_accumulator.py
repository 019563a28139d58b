# -*- coding: utf-8 -*-
"""DustAccumulator: carries sub-threshold amounts until they can be burned together.

No I/O. The caller supplies the threshold read for the current evaluation and
must call reset() once the dust burn has been committed (nonce reserved).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BurnKind(str, Enum):
    """Which emission path a decision takes."""

    NONE = "none"
    DIRECT = "direct"
    DUST = "dust"


DUST_MEMO = "dust"


@dataclass(frozen=True)
class BurnDecision:
    """Result of a burn evaluation (decision + amount for logging/emission)."""

    kind: BurnKind
    amount: int
    """Amount to burn for DIRECT/DUST; the evaluated amount for NONE."""

    @property
    def burn_now(self) -> bool:
        return self.kind is not BurnKind.NONE


def decide_without_dust(amount: int, threshold: int) -> BurnDecision:
    """Decision when dust accumulation is disabled: burn whole amounts at or above threshold."""
    if amount >= threshold:
        return BurnDecision(kind=BurnKind.DIRECT, amount=amount)
    return BurnDecision(kind=BurnKind.NONE, amount=amount)


class DustAccumulator:
    """Owns the running dust balance. Never negative."""

    def __init__(self, initial_balance: int = 0) -> None:
        if initial_balance < 0:
            raise ValueError("initial_balance must be >= 0")
        self._balance = initial_balance

    @property
    def balance(self) -> int:
        return self._balance

    def fold(self, amount: int, threshold: int) -> BurnDecision:
        """Fold a transaction's qualifying amount into the decision.

        - amount >= threshold: DIRECT burn of amount, dust untouched.
        - otherwise amount is added to dust; DUST burn of the whole balance once
          it reaches threshold, else NONE.
        """
        if amount < 0:
            raise ValueError("amount must be >= 0")
        if amount >= threshold:
            return BurnDecision(kind=BurnKind.DIRECT, amount=amount)
        self._balance += amount
        if self._balance >= threshold:
            return BurnDecision(kind=BurnKind.DUST, amount=self._balance)
        return BurnDecision(kind=BurnKind.NONE, amount=amount)

    def seed(self, amount: int) -> None:
        """Replace the balance (boot-time initialisation from the wallet balance)."""
        if amount < 0:
            raise ValueError("amount must be >= 0")
        self._balance = amount

    def reset(self) -> None:
        self._balance = 0

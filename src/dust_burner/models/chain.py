"""Chain state read models: wallet state, active milestone, watched account."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WalletState:
    """Balance and nonce of an account as currently known by the node."""

    address: str
    balance: int = 0
    nonce: int = 0


@dataclass(frozen=True, slots=True)
class Milestone:
    """Active network rule-set; only the burn parameters are kept."""

    burn_tx_amount: int
    """Minimum amount a burn transaction must carry."""
    height: int | None = None


@dataclass(frozen=True, slots=True)
class WatchedAccount:
    """The account this process watches and burns on behalf of.

    Derived once at boot and immutable afterwards.
    """

    address: str
    public_key: str
    passphrase: str

    def __repr__(self) -> str:
        return f"WatchedAccount(address={self.address!r}, public_key={self.public_key!r})"

"""Interfaces of the external capabilities the burn engine depends on."""

from dust_burner.interfaces.broadcaster import BroadcastResult, ITransactionBroadcaster
from dust_burner.interfaces.rule_set import IRuleSet
from dust_burner.interfaces.wallet_repository import IWalletRepository

__all__ = [
    "BroadcastResult",
    "IRuleSet",
    "ITransactionBroadcaster",
    "IWalletRepository",
]

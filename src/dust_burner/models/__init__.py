"""Domain models."""

from dust_burner.models.burn_transaction import BurnTransaction
from dust_burner.models.chain import Milestone, WalletState, WatchedAccount
from dust_burner.models.transaction import TransactionData, TransferRecord

__all__ = [
    "BurnTransaction",
    "Milestone",
    "TransactionData",
    "TransferRecord",
    "WalletState",
    "WatchedAccount",
]

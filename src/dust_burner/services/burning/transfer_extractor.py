"""TransferExtractor: finds the value a transaction sends to the watched address."""

from __future__ import annotations

from collections.abc import Iterable

from dust_burner.models.transaction import TransactionData, TransferRecord


class TransferExtractor:
    """Pure logic, no I/O.

    Rules, first match wins:
    1. direct recipient is the watched address (only with accept_direct_recipient)
    2. every multi-transfer entry addressed to the watched address, in payload order
    3. nothing
    """

    def __init__(self, *, accept_direct_recipient: bool = True) -> None:
        self._accept_direct_recipient = accept_direct_recipient

    def extract(self, transaction: TransactionData, address: str) -> list[TransferRecord]:
        if self._accept_direct_recipient and transaction.recipient_id == address:
            return [TransferRecord(amount=transaction.amount, recipient_id=address)]
        return [t for t in transaction.transfers if t.recipient_id == address]

    @staticmethod
    def total(transfers: Iterable[TransferRecord]) -> int:
        return sum(t.amount for t in transfers)

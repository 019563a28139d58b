"""BurnTransaction: signed burn produced on demand and handed to the broadcaster."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

BURN_TYPE = 0
BURN_TYPE_GROUP = 2
TRANSACTION_VERSION = 3


@dataclass(frozen=True, slots=True)
class BurnTransaction:
    """Burn transaction body plus signature and id once signed. Never persisted."""

    amount: int
    memo: str
    nonce: int
    sender_public_key: str
    network: int
    signature: str | None = None
    id: str | None = None

    @property
    def is_signed(self) -> bool:
        return self.signature is not None and self.id is not None

    def with_signature(self, signature: str, transaction_id: str) -> BurnTransaction:
        return replace(self, signature=signature, id=transaction_id)

    def body(self) -> dict[str, Any]:
        """Fields covered by the signature (camelCase, amounts as strings)."""
        return {
            "version": TRANSACTION_VERSION,
            "network": self.network,
            "typeGroup": BURN_TYPE_GROUP,
            "type": BURN_TYPE,
            "nonce": str(self.nonce),
            "senderPublicKey": self.sender_public_key,
            "amount": str(self.amount),
            "memo": self.memo,
        }

    def to_dict(self) -> dict[str, Any]:
        """JSON payload accepted by the node's POST /transactions."""
        data = self.body()
        if self.signature is not None:
            data["signature"] = self.signature
        if self.id is not None:
            data["id"] = self.id
        return data

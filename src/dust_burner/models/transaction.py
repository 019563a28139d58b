"""TransactionData: applied transaction as seen by the burn engine.

Parsed leniently from the node's transaction JSON. Missing or malformed fields
become empty values so that a malformed payload simply has no qualifying transfer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from dust_burner.utils.amounts import parse_amount


@dataclass(frozen=True, slots=True)
class TransferRecord:
    """One value transfer addressed to a recipient."""

    amount: int
    recipient_id: str

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> TransferRecord:
        """Build from a raw `asset.transfers` item."""
        recipient = response.get("recipientId", response.get("recipient"))
        return cls(
            amount=parse_amount(response.get("amount")),
            recipient_id=str(recipient) if recipient is not None else "",
        )


@dataclass(frozen=True, slots=True)
class TransactionData:
    """Applied transaction fields relevant to burn decisions."""

    id: str = ""
    type: int | None = None
    type_group: int | None = None
    sender_id: str | None = None
    recipient_id: str | None = None
    amount: int = 0
    transfers: tuple[TransferRecord, ...] = field(default_factory=tuple)
    memo: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> TransactionData:
        """Build from a raw node transaction (camelCase)."""
        asset = response.get("asset")
        raw_transfers = asset.get("transfers") if isinstance(asset, dict) else None
        transfers: tuple[TransferRecord, ...] = ()
        if isinstance(raw_transfers, list):
            transfers = tuple(
                TransferRecord.from_response(t) for t in raw_transfers if isinstance(t, dict)
            )
        recipient = response.get("recipientId", response.get("recipient"))
        tx_type = response.get("type")
        type_group = response.get("typeGroup")
        return cls(
            id=str(response.get("id") or ""),
            type=int(tx_type) if isinstance(tx_type, int) else None,
            type_group=int(type_group) if isinstance(type_group, int) else None,
            sender_id=response.get("senderId") or response.get("sender"),
            recipient_id=str(recipient) if recipient is not None else None,
            amount=parse_amount(response.get("amount")),
            transfers=transfers,
            memo=response.get("memo") or response.get("vendorField"),
        )

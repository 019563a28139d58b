"""Node public API response types. Keys match API responses (camelCase)."""

from __future__ import annotations

from typing import Any, TypedDict


class TransactionSchema(TypedDict, total=False):
    """GET /blocks/{height}/transactions item."""

    id: str
    blockId: str
    version: int
    type: int
    typeGroup: int
    amount: str
    fee: str
    sender: str
    senderId: str
    senderPublicKey: str
    recipient: str
    recipientId: str
    signature: str
    memo: str
    asset: dict[str, Any]
    nonce: str
    timestamp: dict[str, Any]


class WalletSchema(TypedDict, total=False):
    """GET /wallets/{id} data."""

    address: str
    publicKey: str
    balance: str
    nonce: str
    attributes: dict[str, Any]


class BlockSchema(TypedDict, total=False):
    """GET /blocks/last data."""

    id: str
    version: int
    height: int
    previous: str
    transactions: int


class BroadcastSchema(TypedDict, total=False):
    """POST /transactions data."""

    accept: list[str]
    broadcast: list[str]
    excess: list[str]
    invalid: list[str]

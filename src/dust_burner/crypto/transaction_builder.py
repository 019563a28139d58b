# -*- coding: utf-8 -*-
"""Fluent burn transaction builder.

Usage mirrors the node SDK builders:

    tx = factory.burn().amount(150).memo("...").nonce(7).sign(passphrase).build()

The byte encoding that gets signed is supplied by a serializer callable. The
default encodes the signed body as canonical JSON; hosts that own the
network's binary codec pass their own serializer.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Callable
from typing import Any

from dust_burner.crypto.keys import keys_from_passphrase
from dust_burner.models.burn_transaction import BurnTransaction

Serializer = Callable[[dict[str, Any]], bytes]


def canonical_json_serializer(body: dict[str, Any]) -> bytes:
    """Deterministic JSON encoding (sorted keys, no whitespace)."""
    return json.dumps(body, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class TransactionBuildError(ValueError):
    pass


class BurnTransactionBuilder:
    """Collects burn fields, signs with a passphrase and builds a BurnTransaction."""

    def __init__(
        self,
        network_version: int,
        *,
        memo_max_length: int = 255,
        serializer: Serializer = canonical_json_serializer,
    ) -> None:
        self._network = network_version
        self._memo_max_length = memo_max_length
        self._serializer = serializer
        self._amount: int | None = None
        self._memo = ""
        self._nonce: int | None = None
        self._signed: BurnTransaction | None = None

    def amount(self, value: int | str) -> BurnTransactionBuilder:
        amount = int(value)
        if amount <= 0:
            raise TransactionBuildError(f"burn amount must be > 0, got {amount}")
        self._amount = amount
        self._signed = None
        return self

    def memo(self, value: str) -> BurnTransactionBuilder:
        if len(value.encode("utf-8")) > self._memo_max_length:
            raise TransactionBuildError(
                f"memo exceeds {self._memo_max_length} bytes: {value[:32]!r}..."
            )
        self._memo = value
        self._signed = None
        return self

    def nonce(self, value: int | str) -> BurnTransactionBuilder:
        nonce = int(value)
        if nonce < 1:
            raise TransactionBuildError(f"nonce must be >= 1, got {nonce}")
        self._nonce = nonce
        self._signed = None
        return self

    def sign(self, passphrase: str) -> BurnTransactionBuilder:
        if self._amount is None or self._nonce is None:
            raise TransactionBuildError("amount and nonce must be set before signing")
        keys = keys_from_passphrase(passphrase)
        unsigned = BurnTransaction(
            amount=self._amount,
            memo=self._memo,
            nonce=self._nonce,
            sender_public_key=keys.public_key_hex,
            network=self._network,
        )
        payload = self._serializer(unsigned.body())
        signature = keys.private_key.sign_schnorr(hashlib.sha256(payload).digest())
        transaction_id = hashlib.sha256(payload + signature).hexdigest()
        self._signed = unsigned.with_signature(signature.hex(), transaction_id)
        return self

    def build(self) -> BurnTransaction:
        if self._signed is None:
            raise TransactionBuildError("transaction must be signed before build()")
        return self._signed


class TransactionBuilderFactory:
    """Entry point for builders bound to one network."""

    def __init__(
        self,
        network_version: int,
        *,
        memo_max_length: int = 255,
        serializer: Serializer = canonical_json_serializer,
    ) -> None:
        self._network_version = network_version
        self._memo_max_length = memo_max_length
        self._serializer = serializer

    def burn(self) -> BurnTransactionBuilder:
        return BurnTransactionBuilder(
            self._network_version,
            memo_max_length=self._memo_max_length,
            serializer=self._serializer,
        )

# -*- coding: utf-8 -*-
"""Unit tests for the burn transaction builder."""

from __future__ import annotations

import hashlib

import pytest
from coincurve import PublicKeyXOnly

from dust_burner.crypto.transaction_builder import (
    TransactionBuildError,
    TransactionBuilderFactory,
    canonical_json_serializer,
)
from dust_burner.models.burn_transaction import BURN_TYPE, BURN_TYPE_GROUP
from dust_burner.models.chain import WatchedAccount


def test_signed_burn_carries_body_signature_and_id(
    network_version: int,
    account: WatchedAccount,
) -> None:
    tx = (
        TransactionBuilderFactory(network_version)
        .burn()
        .amount(150)
        .memo("dust")
        .nonce(4)
        .sign(account.passphrase)
        .build()
    )

    payload = tx.to_dict()
    assert payload["type"] == BURN_TYPE
    assert payload["typeGroup"] == BURN_TYPE_GROUP
    assert payload["amount"] == "150"
    assert payload["nonce"] == "4"
    assert payload["memo"] == "dust"
    assert payload["network"] == network_version
    assert payload["senderPublicKey"] == account.public_key
    assert payload["id"] == tx.id

    message = canonical_json_serializer(tx.body())
    signature = bytes.fromhex(tx.signature or "")
    assert tx.id == hashlib.sha256(message + signature).hexdigest()
    xonly = PublicKeyXOnly(bytes.fromhex(account.public_key)[1:])
    assert xonly.verify(signature, hashlib.sha256(message).digest())


def test_custom_serializer_is_used_for_signing(account: WatchedAccount) -> None:
    seen: list[dict] = []

    def _serializer(body: dict) -> bytes:
        seen.append(body)
        return b"fixed"

    tx = (
        TransactionBuilderFactory(30, serializer=_serializer)
        .burn()
        .amount(1)
        .nonce(1)
        .sign(account.passphrase)
        .build()
    )

    assert seen == [tx.body()]
    assert tx.id == hashlib.sha256(b"fixed" + bytes.fromhex(tx.signature or "")).hexdigest()


def test_memo_limit_is_in_bytes() -> None:
    builder = TransactionBuilderFactory(30, memo_max_length=4).burn()

    builder.memo("abcd")
    with pytest.raises(TransactionBuildError):
        builder.memo("abcde")
    with pytest.raises(TransactionBuildError):
        builder.memo("ééé")


@pytest.mark.parametrize("amount", [0, -5])
def test_amount_must_be_positive(amount: int) -> None:
    with pytest.raises(TransactionBuildError):
        TransactionBuilderFactory(30).burn().amount(amount)


def test_nonce_must_be_at_least_one() -> None:
    with pytest.raises(TransactionBuildError):
        TransactionBuilderFactory(30).burn().nonce(0)


def test_sign_requires_amount_and_nonce(account: WatchedAccount) -> None:
    with pytest.raises(TransactionBuildError):
        TransactionBuilderFactory(30).burn().amount(5).sign(account.passphrase)


def test_build_requires_signature_and_changes_invalidate_it(account: WatchedAccount) -> None:
    builder = TransactionBuilderFactory(30).burn().amount(5).nonce(1)
    with pytest.raises(TransactionBuildError):
        builder.build()

    builder.sign(account.passphrase)
    builder.amount(6)

    with pytest.raises(TransactionBuildError):
        builder.build()


def test_build_errors_are_value_errors() -> None:
    assert issubclass(TransactionBuildError, ValueError)

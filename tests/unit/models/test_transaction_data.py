# -*- coding: utf-8 -*-
"""Unit tests for TransactionData parsing."""

from __future__ import annotations

from dust_burner.models.transaction import TransactionData, TransferRecord


def test_from_response_parses_direct_transfer() -> None:
    tx = TransactionData.from_response(
        {
            "id": "abc",
            "type": 0,
            "typeGroup": 1,
            "senderId": "Dsender",
            "recipientId": "Drecipient",
            "amount": "150",
            "memo": "hello",
        }
    )

    assert tx.id == "abc"
    assert tx.type == 0
    assert tx.type_group == 1
    assert tx.sender_id == "Dsender"
    assert tx.recipient_id == "Drecipient"
    assert tx.amount == 150
    assert tx.transfers == ()
    assert tx.memo == "hello"


def test_from_response_parses_multi_transfers_in_order() -> None:
    tx = TransactionData.from_response(
        {
            "id": "abc",
            "asset": {
                "transfers": [
                    {"amount": "10", "recipientId": "D1"},
                    "junk",
                    {"amount": 20, "recipient": "D2"},
                ]
            },
        }
    )

    assert tx.transfers == (
        TransferRecord(amount=10, recipient_id="D1"),
        TransferRecord(amount=20, recipient_id="D2"),
    )
    assert tx.recipient_id is None
    assert tx.amount == 0


def test_from_response_is_lenient_with_malformed_values() -> None:
    tx = TransactionData.from_response(
        {"amount": "-3", "type": "x", "asset": {"transfers": [{"amount": "1.5"}]}}
    )

    assert tx.id == ""
    assert tx.amount == 0
    assert tx.type is None
    assert tx.transfers == (TransferRecord(amount=0, recipient_id=""),)


def test_to_dict_round_trips_fields() -> None:
    tx = TransactionData(id="abc", amount=5, transfers=(TransferRecord(1, "D1"),))

    data = tx.to_dict()

    assert data["id"] == "abc"
    assert data["transfers"] == ({"amount": 1, "recipient_id": "D1"},)

# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit and integration tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from bubus import EventBus  # type: ignore[import-untyped]

from dust_burner.models.chain import WatchedAccount
from dust_burner.services.identity import AddressResolver

TESTNET_VERSION = 30


@pytest.fixture
def network_version() -> int:
    """Testnet address version byte ('D' addresses)."""
    return TESTNET_VERSION


@pytest.fixture
def passphrase() -> str:
    """Passphrase of the watched account used by tests."""
    return "burn burn burn little dust burn burn burn little dust burn"


@pytest.fixture
def account(passphrase: str, network_version: int) -> WatchedAccount:
    """Watched account derived from the test passphrase."""
    return AddressResolver(network_version).resolve(passphrase)


@pytest.fixture
def other_address(network_version: int) -> str:
    """Some address that is not watched."""
    return AddressResolver(network_version).resolve("somebody else entirely").address


@pytest.fixture
def tx_factory(other_address: str) -> Callable[..., dict[str, Any]]:
    """Build raw node transaction dicts (camelCase) with easy overrides."""
    counter = {"n": 0}

    def _build(**overrides: Any) -> dict[str, Any]:
        counter["n"] += 1
        tx: dict[str, Any] = {
            "id": overrides.pop("id", f"{counter['n']:064x}"),
            "type": overrides.pop("type", 6),
            "typeGroup": overrides.pop("typeGroup", 1),
            "senderId": overrides.pop("senderId", other_address),
            "amount": overrides.pop("amount", "0"),
        }
        recipient = overrides.pop("recipientId", None)
        if recipient is not None:
            tx["recipientId"] = recipient
        transfers = overrides.pop("transfers", None)
        if transfers is not None:
            tx["asset"] = {
                "transfers": [
                    {"amount": str(amount), "recipientId": rid} for amount, rid in transfers
                ]
            }
        tx.update(overrides)
        return tx

    return _build


@pytest.fixture
def event_bus() -> EventBus:
    """Isolated event bus instance for tests."""
    return EventBus(
        name="DustBurnerTests",
        max_history_size=200,
        wal_path=None,
    )

# -*- coding: utf-8 -*-
"""Unit tests for container wiring."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from dependency_injector import providers

from dust_burner.config import Settings
from dust_burner.config.config import BurnerSettings, NetworkSettings
from dust_burner.DI import Container
from dust_burner.events.bus import set_event_bus
from dust_burner.services.burning import BurnEngine, EngineState
from dust_burner.services.chain import BlockFeed


@pytest.fixture
def container(event_bus: Any) -> Iterator[Container]:
    settings = Settings(
        burner=BurnerSettings(enabled=True, passphrase="container passphrase", accumulate_dust=False),
        network=NetworkSettings(name="testnet", version=30),
    )
    set_event_bus(event_bus)
    c = Container()
    c.config.override(providers.Object(settings))
    try:
        yield c
    finally:
        c.config.reset_override()
        set_event_bus(None)


async def test_container_builds_engine_and_feed_on_shared_bus(
    container: Container,
    event_bus: Any,
) -> None:
    engine = container.burn_engine()
    feed = container.block_feed()

    assert isinstance(engine, BurnEngine)
    assert isinstance(feed, BlockFeed)
    assert engine is container.burn_engine()
    assert engine.state is EngineState.UNINITIALIZED
    assert engine.dust_balance is None
    assert container.event_bus() is event_bus
    assert container.burn_emitter()._event_bus is event_bus


async def test_container_resolver_uses_network_version(container: Container) -> None:
    account = container.address_resolver().resolve("container passphrase")

    assert account.address.startswith("D")

# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from dust_burner.clients.http import AsyncHttpClient
from dust_burner.clients.node_api import NodeApiClient
from dust_burner.config import Settings, get_settings
from dust_burner.crypto.transaction_builder import TransactionBuilderFactory
from dust_burner.events.bus import get_event_bus
from dust_burner.services.burning import BurnEmitter, BurnEngine
from dust_burner.services.chain import (
    BlockFeed,
    NodeRuleSet,
    NodeTransactionBroadcaster,
    NodeWalletRepository,
)
from dust_burner.services.identity import AddressResolver
from dust_burner.services.threshold import ThresholdSource


def _build_builder_factory(settings: Settings) -> TransactionBuilderFactory:
    return TransactionBuilderFactory(
        settings.network.version,
        memo_max_length=settings.burner.memo_max_length,
    )


def _build_address_resolver(settings: Settings) -> AddressResolver:
    return AddressResolver(settings.network.version)


def _build_burn_engine(
    settings: Settings,
    address_resolver: AddressResolver,
    wallet_repository: NodeWalletRepository,
    threshold_source: ThresholdSource,
    burn_emitter: BurnEmitter,
    event_bus: object,
) -> BurnEngine:
    burner = settings.burner
    return BurnEngine(
        address_resolver=address_resolver,
        wallet_repository=wallet_repository,
        threshold_source=threshold_source,
        burn_emitter=burn_emitter,
        event_bus=event_bus,
        passphrase=burner.passphrase,
        accumulate_dust=burner.accumulate_dust,
        initialize_dust_from_balance=burner.initialize_dust_from_balance,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, node API client, chain adapters, burn engine and block feed."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    node_api_client = providers.Singleton(
        NodeApiClient,
        http_client=http_client,
        settings=config,
    )

    event_bus = providers.Callable(get_event_bus)

    wallet_repository = providers.Singleton(
        NodeWalletRepository,
        node_api=node_api_client,
    )

    rule_set = providers.Singleton(
        NodeRuleSet,
        node_api=node_api_client,
    )

    broadcaster = providers.Singleton(
        NodeTransactionBroadcaster,
        node_api=node_api_client,
    )

    threshold_source = providers.Singleton(
        ThresholdSource,
        rule_set=rule_set,
    )

    address_resolver = providers.Singleton(_build_address_resolver, config)

    transaction_builder_factory = providers.Singleton(_build_builder_factory, config)

    burn_emitter = providers.Singleton(
        BurnEmitter,
        builder_factory=transaction_builder_factory,
        broadcaster=broadcaster,
        event_bus=event_bus,
    )

    burn_engine = providers.Singleton(
        _build_burn_engine,
        settings=config,
        address_resolver=address_resolver,
        wallet_repository=wallet_repository,
        threshold_source=threshold_source,
        burn_emitter=burn_emitter,
        event_bus=event_bus,
    )

    block_feed = providers.Singleton(
        BlockFeed,
        settings=config,
        node_api=node_api_client,
        event_bus=event_bus,
    )

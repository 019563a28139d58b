# -*- coding: utf-8 -*-
"""
Entry point for the dust burner.

Orchestrates: logging, settings, container, burn engine boot, block feed, shutdown (SIGINT or CancelledError).
Events flow: block feed -> event bus -> BurnEngine -> BurnEmitter -> node transaction pool.

Run with: python -m dust_burner.main (or the `dust-burner` console script).
"""
from __future__ import annotations

import asyncio
import signal
import structlog
from typing import Any

from dust_burner.DI import Container
from dust_burner.config import Settings, get_settings
from dust_burner.exceptions import MissingRequiredConfigError
from dust_burner.logging.config import configure_logging


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


def validate_settings(settings: Settings) -> bool:
    """Return True if the burner should run.

    Raises:
        MissingRequiredConfigError: If the burner is enabled without a passphrase.
    """
    burner = settings.burner
    if not burner.enabled:
        return False
    if not burner.passphrase or not burner.passphrase.strip():
        raise MissingRequiredConfigError("BURNER__PASSPHRASE")
    return True


async def _do_shutdown(logger: Any) -> None:
    """Clean shutdown. Safe to call on normal shutdown or CancelledError."""
    logger.info("main_shutdown_complete")


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    try:
        if not validate_settings(settings):
            logger.info("main_burner_disabled", message="BURNER__ENABLED is false")
            return
    except MissingRequiredConfigError:
        logger.error(
            "main_missing_passphrase",
            message="BURNER__PASSPHRASE is required when the burner is enabled",
        )
        raise

    container = Container()
    engine = container.burn_engine()
    feed = container.block_feed()
    http_client = container.http_client()
    event_bus = container.event_bus()
    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)

    try:
        await engine.boot()
        feed_task = asyncio.create_task(feed.run())
        feed_task.add_done_callback(lambda _: shutdown_event.set())
        try:
            try:
                await shutdown_event.wait()
            except asyncio.CancelledError:
                await _do_shutdown(logger)
                raise
            await _do_shutdown(logger)
        finally:
            feed_task.cancel()
            try:
                await feed_task
            except asyncio.CancelledError:
                pass
            engine.stop()
    finally:
        await event_bus.stop()
        await http_client.aclose()


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main", "validate_settings"]

if __name__ == "__main__":
    main()

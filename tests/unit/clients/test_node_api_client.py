# -*- coding: utf-8 -*-
"""Unit tests for NodeApiClient and AsyncHttpClient (transport doubled)."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, Mock

import aiohttp
import pytest

from dust_burner.clients.http import AsyncHttpClient
from dust_burner.clients.node_api import NodeApiClient
from dust_burner.exceptions import NodeAPIError


def _client(http: Any, *, page_size: int = 100) -> NodeApiClient:
    settings = SimpleNamespace(node=SimpleNamespace(api_host="http://node/api/", page_size=page_size))
    return NodeApiClient(http, settings, get_logger=lambda _name: Mock())  # type: ignore[arg-type]


async def test_get_wallet_unwraps_data_envelope() -> None:
    http = SimpleNamespace(get=AsyncMock(return_value={"data": {"balance": "5", "nonce": "1"}}))

    wallet = await _client(http).get_wallet("Dabc")

    assert wallet == {"balance": "5", "nonce": "1"}
    http.get.assert_awaited_once_with("http://node/api/wallets/Dabc")


async def test_unexpected_shape_raises() -> None:
    http = SimpleNamespace(get=AsyncMock(return_value={"error": "nope"}))

    with pytest.raises(NodeAPIError):
        await _client(http).get_configuration()


async def test_last_block_requires_height() -> None:
    http = SimpleNamespace(get=AsyncMock(return_value={"data": {"id": "b"}}))

    with pytest.raises(NodeAPIError):
        await _client(http).get_last_block()


async def test_block_transactions_follow_pages_until_short_page() -> None:
    pages = [
        {"data": [{"id": "a"}, {"id": "b"}]},
        {"data": [{"id": "c"}, "junk"]},
        {"data": []},
    ]
    http = SimpleNamespace(get=AsyncMock(side_effect=pages))

    txs = await _client(http, page_size=2).get_block_transactions(7)

    assert [t["id"] for t in txs] == ["a", "b", "c"]
    assert [c.kwargs["params"] for c in http.get.await_args_list] == [
        {"page": 1, "limit": 2},
        {"page": 2, "limit": 2},
        {"page": 3, "limit": 2},
    ]
    assert http.get.await_args.args[0] == "http://node/api/blocks/7/transactions"


async def test_post_transactions_returns_data_and_errors() -> None:
    http = SimpleNamespace(
        post=AsyncMock(
            return_value={
                "data": {"accept": [], "broadcast": [], "excess": [], "invalid": ["x"]},
                "errors": {"x": {"type": "ERR_BAD_DATA", "message": "bad"}},
            }
        )
    )

    data, errors = await _client(http).post_transactions([{"id": "x"}])

    assert data["invalid"] == ["x"]
    assert errors["x"]["message"] == "bad"
    http.post.assert_awaited_once_with(
        "http://node/api/transactions", json={"transactions": [{"id": "x"}]}
    )


# --- AsyncHttpClient ---


class _FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status: int, payload: Any = None) -> None:
        self.status = status
        self.headers: dict[str, str] = {}
        self._payload = payload

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=Mock(), history=(), status=self.status, message="error"
            )

    async def json(self) -> Any:
        return self._payload


def _http(session: Any, *, max_retries: int = 3) -> AsyncHttpClient:
    settings = SimpleNamespace(node=SimpleNamespace(max_retries=max_retries, timeout_seconds=5.0))
    client = AsyncHttpClient(settings, session=session, get_logger=lambda _name: Mock())  # type: ignore[arg-type]
    client._backoff_delay = lambda attempt: 0.0  # type: ignore[method-assign]
    return client


async def test_post_server_error_is_sent_once() -> None:
    session = SimpleNamespace(closed=False, post=AsyncMock(return_value=_FakeResponse(503)))

    with pytest.raises(NodeAPIError) as exc_info:
        await _http(session).post("http://node/api/transactions", json={"transactions": []})

    assert exc_info.value.status_code == 503
    session.post.assert_awaited_once()


async def test_post_timeout_is_sent_once() -> None:
    session = SimpleNamespace(closed=False, post=AsyncMock(side_effect=asyncio.TimeoutError()))

    with pytest.raises(NodeAPIError):
        await _http(session).post("http://node/api/transactions", json={"transactions": []})

    session.post.assert_awaited_once()


async def test_post_passes_unprocessable_body_through() -> None:
    body = {"data": {"invalid": ["x"]}, "errors": {"x": {"message": "bad"}}}
    session = SimpleNamespace(closed=False, post=AsyncMock(return_value=_FakeResponse(422, body)))

    assert await _http(session).post("http://node/api/transactions", json={}) == body


async def test_get_retries_server_errors() -> None:
    session = SimpleNamespace(
        closed=False,
        get=AsyncMock(side_effect=[_FakeResponse(503), _FakeResponse(200, {"data": {}})]),
    )

    assert await _http(session).get("http://node/api/blocks/last") == {"data": {}}
    assert session.get.await_count == 2


async def test_get_client_error_is_not_retried() -> None:
    session = SimpleNamespace(closed=False, get=AsyncMock(return_value=_FakeResponse(404)))

    with pytest.raises(NodeAPIError) as exc_info:
        await _http(session).get("http://node/api/wallets/Dunknown")

    assert exc_info.value.status_code == 404
    session.get.assert_awaited_once()

# -*- coding: utf-8 -*-
"""Async HTTP client with retries and rate-limit handling."""

from __future__ import annotations

import asyncio
import random
import uuid
import aiohttp
import structlog
from typing import Any, Awaitable, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from dust_burner.config import Settings
from dust_burner.exceptions import NodeAPIError, RateLimitError


class AsyncHttpClient:
    """Async HTTP client for the node API with retries and 429 handling.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (settings.node timeout and max_retries).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.node.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter, capped at 4 seconds."""
        base = min(4.0, 0.25 * (2**attempt))
        return base + random.uniform(0.0, 0.15)

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return JSON. Retries on server errors and on 429.

        Raises:
            RateLimitError: If 429 is returned on every attempt.
            NodeAPIError: If the request fails after all retries.
        """
        async def _send(session: aiohttp.ClientSession) -> aiohttp.ClientResponse:
            return await session.get(url, params=params or {})

        return await self._request("GET", url, _send)

    async def post(
        self,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a POST request with JSON body and return JSON. Sent exactly once.

        Never retried: a submit that timed out may already be in the pool.

        The node answers 422 when every transaction in the body is invalid; that
        body still carries the per-transaction errors, so it is returned as-is.

        Raises:
            NodeAPIError: If the request fails.
        """
        async def _send(session: aiohttp.ClientSession) -> aiohttp.ClientResponse:
            return await session.post(url, json=json or {})

        return await self._request("POST", url, _send, passthrough_statuses=(422,), max_attempts=1)

    async def _request(
        self,
        method: str,
        url: str,
        send: Callable[[aiohttp.ClientSession], Awaitable[aiohttp.ClientResponse]],
        *,
        passthrough_statuses: tuple[int, ...] = (),
        max_attempts: Optional[int] = None,
    ) -> Any:
        request_id = uuid.uuid4().hex[:12]
        max_retries = max_attempts or self._settings.node.max_retries
        event_prefix = f"http_{method.lower()}"
        last_error: Optional[Exception] = None
        retry_after: Optional[float] = None

        with bound_contextvars(
            http_method=method,
            http_url=url,
            http_request_id=request_id,
            http_max_retries=max_retries,
        ):
            for attempt in range(max_retries):
                with bound_contextvars(http_attempt=attempt + 1):
                    try:
                        session = await self._get_session()
                        response = await send(session)
                        async with response:
                            if response.status == 429:
                                retry_after = None
                                header = response.headers.get("Retry-After")
                                if header:
                                    try:
                                        retry_after = float(header)
                                    except ValueError:
                                        pass
                                last_error = RateLimitError(url=url, retry_after=retry_after)
                                self._logger.warning(
                                    f"{event_prefix}_rate_limited",
                                    http_status_code=429,
                                    http_retry_after_seconds=retry_after,
                                )
                                if attempt + 1 >= max_retries:
                                    continue
                                if retry_after is not None and retry_after > 0:
                                    await asyncio.sleep(retry_after)
                                else:
                                    await asyncio.sleep(self._backoff_delay(attempt))
                                continue

                            if response.status in passthrough_statuses:
                                return await response.json()
                            response.raise_for_status()
                            return await response.json()
                    except aiohttp.ClientResponseError as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                            http_status_code=getattr(e, "status", None),
                        )
                        # Client errors (unknown wallet, bad request) will not change on retry.
                        if 400 <= e.status < 500:
                            break
                        if attempt + 1 < max_retries:
                            await asyncio.sleep(self._backoff_delay(attempt))
                    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                        )
                        if attempt + 1 < max_retries:
                            await asyncio.sleep(self._backoff_delay(attempt))

            if isinstance(last_error, RateLimitError):
                self._logger.error(f"{event_prefix}_rate_limit_exhausted", http_attempts=max_retries)
                raise last_error

            status_code = (
                getattr(last_error, "status", None)
                if isinstance(last_error, aiohttp.ClientResponseError)
                else None
            )
            self._logger.error(
                f"{event_prefix}_failed",
                http_status_code=status_code,
                http_attempts=max_retries,
                error_type=type(last_error).__name__ if last_error else None,
                error_message=str(last_error) if last_error else None,
            )
            raise NodeAPIError(
                f"{method} failed after {max_retries} attempt(s): {url}",
                url=url,
                status_code=status_code,
                cause=last_error,
            ) from last_error

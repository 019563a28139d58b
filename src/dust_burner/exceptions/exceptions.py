"""Custom exceptions for the burn engine and node API access."""

from __future__ import annotations


class BurnerError(Exception):
    """Base exception for burn engine errors."""

    pass


class MissingRequiredConfigError(BurnerError):
    """Raised when a required configuration value is missing."""

    pass


class InvalidPassphraseError(BurnerError):
    """Raised when the watched account cannot be derived from the configured passphrase."""

    pass


class NodeAPIError(BurnerError):
    """Raised when a node API request fails after retries."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class RateLimitError(NodeAPIError):
    """Raised when the node API returns HTTP 429 (Too Many Requests)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded (429)",
        *,
        url: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, url=url, status_code=429)
        self.retry_after = retry_after


class BroadcastRejectedError(BurnerError):
    """Raised when the node refuses a broadcast transaction."""

    def __init__(self, message: str, *, transaction_ids: list[str] | None = None) -> None:
        super().__init__(message)
        self.transaction_ids = transaction_ids or []

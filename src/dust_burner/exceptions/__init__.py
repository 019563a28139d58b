"""Exceptions subpackage."""

from dust_burner.exceptions.exceptions import (
    BroadcastRejectedError,
    BurnerError,
    InvalidPassphraseError,
    MissingRequiredConfigError,
    NodeAPIError,
    RateLimitError,
)

__all__ = [
    "BroadcastRejectedError",
    "BurnerError",
    "InvalidPassphraseError",
    "MissingRequiredConfigError",
    "NodeAPIError",
    "RateLimitError",
]

"""HTTP and API clients."""

from dust_burner.clients.http import AsyncHttpClient
from dust_burner.clients.node_api import NodeApiClient

__all__ = [
    "AsyncHttpClient",
    "NodeApiClient",
]

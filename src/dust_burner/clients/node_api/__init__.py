"""Node public API client."""

from dust_burner.clients.node_api.node_api import NodeApiClient

__all__ = ["NodeApiClient"]

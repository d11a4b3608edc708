from .client_manager import ClientManager
from .endpoint_registry import EndpointRegistry
from .managed_client import ManagedClient

__all__ = [
    "ClientManager",
    "EndpointRegistry",
    "ManagedClient"
]

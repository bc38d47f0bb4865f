"""
Game-client side of the purchase flow: calls the relay and reacts to the
platform's authorization callback.
"""

from steam_relay.client.api import RelayClient, RelayClientError
from steam_relay.client.coordinator import PurchaseCoordinator
from steam_relay.client.models import AuthorizationEvent, Purchase, PurchaseItem, PurchaseState

__all__ = [
    "AuthorizationEvent",
    "Purchase",
    "PurchaseCoordinator",
    "PurchaseItem",
    "PurchaseState",
    "RelayClient",
    "RelayClientError",
]

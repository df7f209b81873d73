"""huelib - typed async bindings for the Philips Hue bridge local REST API."""

from .bridge import Bridge
from .codec import ErrorItem, ErrorType, RequestEnvelope, SuccessItem
from .config import HueConfig
from .discovery import (
    Description,
    DiscoveredBridge,
    Registration,
    discover_nupnp,
    get_description,
    register_user,
)
from .exceptions import (
    BridgeError,
    DecodeError,
    HueConnectionError,
    HueError,
    HueStatusError,
    HueTimeoutError,
    HueValidationError,
    TransportError,
)
from .hue_client import AsyncHueClient
from .reconciler import ReconciledResult, ResourceResult, reconcile

__version__ = "0.13.3"
__description__ = "Typed async bindings for the Philips Hue bridge local REST API"

__all__ = [
    "AsyncHueClient",
    "Bridge",
    "BridgeError",
    "DecodeError",
    "Description",
    "DiscoveredBridge",
    "ErrorItem",
    "ErrorType",
    "HueConfig",
    "HueConnectionError",
    "HueError",
    "HueStatusError",
    "HueTimeoutError",
    "HueValidationError",
    "ReconciledResult",
    "Registration",
    "RequestEnvelope",
    "ResourceResult",
    "SuccessItem",
    "TransportError",
    "discover_nupnp",
    "get_description",
    "reconcile",
    "register_user",
]

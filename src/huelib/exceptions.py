"""Exceptions raised by the Hue bindings."""

from typing import Optional


class HueError(Exception):
    """Base exception for all Hue-related errors."""

    pass


class HueValidationError(HueError):
    """Parameter validation errors raised before any request is sent."""

    pass


class TransportError(HueError):
    """The request could not be completed at the HTTP level."""

    pass


class HueConnectionError(TransportError):
    """Network/connection related errors."""

    pass


class HueTimeoutError(TransportError):
    """Request timeout errors."""

    pass


class HueStatusError(TransportError):
    """The bridge answered with an HTTP error status and no bridge payload."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")


class DecodeError(HueError):
    """Malformed or incomplete JSON/XML received from the bridge."""

    pass


class BridgeError(HueError):
    """Error reported by the bridge itself.

    The vendor's numeric code and description are kept verbatim.
    """

    def __init__(self, code: int, description: str, address: Optional[str] = None):
        self.code = code
        self.description = description
        self.address = address
        location = f" at {address}" if address else ""
        super().__init__(f"Hue API error {code}{location}: {description}")

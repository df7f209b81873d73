"""Configuration management for the Hue bridge connection."""

import ipaddress
import os
import re

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_HOSTNAME_RE = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)*$")


class HueConfig(BaseModel):
    """Immutable configuration for one Hue bridge connection."""

    model_config = ConfigDict(frozen=True)

    bridge_ip: str = Field(description="IP address or host name of the Hue bridge")
    username: str = Field(description="Application key registered on the bridge")
    log_level: str = Field(default="INFO", description="Logging level")
    timeout_connect: float = Field(
        default=5.0, ge=1.0, le=30.0, description="Connection timeout in seconds"
    )
    timeout_read: float = Field(
        default=10.0, ge=1.0, le=60.0, description="Read timeout in seconds"
    )
    max_connections: int = Field(
        default=10, ge=1, le=50, description="Maximum HTTP connections"
    )
    max_keepalive_connections: int = Field(
        default=5, ge=1, le=20, description="Maximum keepalive connections"
    )

    @field_validator("bridge_ip")
    @classmethod
    def validate_host(cls, v):
        """Validate the bridge address is an IP address or a host name."""
        try:
            ipaddress.ip_address(v)
            return v
        except ValueError:
            pass
        if not v or len(v) > 253 or not _HOSTNAME_RE.match(v):
            raise ValueError(f"Invalid bridge address: {v!r}")
        return v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        if not v or len(v) < 10:
            raise ValueError("Username must be at least 10 characters long")
        if "/" in v:
            raise ValueError("Username must not contain '/'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @classmethod
    def from_env(cls) -> "HueConfig":
        """Create configuration from environment variables (and a .env file)."""
        load_dotenv()
        return cls(
            bridge_ip=os.getenv("HUE_BRIDGE_IP", ""),
            username=os.getenv("HUE_USERNAME", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            timeout_connect=float(os.getenv("HUE_TIMEOUT_CONNECT", "5.0")),
            timeout_read=float(os.getenv("HUE_TIMEOUT_READ", "10.0")),
            max_connections=int(os.getenv("HUE_MAX_CONNECTIONS", "10")),
            max_keepalive_connections=int(os.getenv("HUE_MAX_KEEPALIVE", "5")),
        )

    @property
    def host_url(self) -> str:
        """Get the unauthenticated root URL of the bridge."""
        host = self.bridge_ip
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}"

    @property
    def base_url(self) -> str:
        """Get the base URL for the Hue API."""
        return f"{self.host_url}/api/{self.username}"

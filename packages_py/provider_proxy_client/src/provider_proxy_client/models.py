"""
Data models for provider client construction.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_IDLE_CONNECTION_TIMEOUT,
    DEFAULT_MAX_IDLE_CONNECTIONS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TLS_HANDSHAKE_TIMEOUT,
    SOCKS5_SCHEME,
)


class TransportSettings(BaseModel):
    """Connection pool and timeout settings applied to every client.

    The defaults are the fixed values used when no settings are passed to the
    factory.
    """
    max_idle_connections: int = Field(
        default=DEFAULT_MAX_IDLE_CONNECTIONS,
        description="Maximum number of idle keep-alive connections in the pool",
    )
    idle_connection_timeout: float = Field(
        default=DEFAULT_IDLE_CONNECTION_TIMEOUT,
        description="Seconds an idle connection is kept before being closed",
    )
    tls_handshake_timeout: float = Field(
        default=DEFAULT_TLS_HANDSHAKE_TIMEOUT,
        description="Seconds allowed for connection establishment including the TLS handshake",
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        description="Overall per-request timeout in seconds",
    )

    model_config = {"frozen": True}

    @field_validator(
        "max_idle_connections",
        "idle_connection_timeout",
        "tls_handshake_timeout",
        "request_timeout",
    )
    @classmethod
    def ensure_positive(cls, value):
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value


class MetadataFlag(str, Enum):
    """Reading of the reject-direct flag in a metadata document."""
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TransportPolicy:
    """Resolved strict mode and proxy address for a single construction call."""
    identity: str
    strict_mode: bool
    proxy_address: str
    metadata_flag: MetadataFlag = MetadataFlag.UNKNOWN

    @property
    def proxied(self) -> bool:
        return self.proxy_address != ""


@dataclass(frozen=True)
class ProxyEndpoint:
    """A parsed SOCKS5 relay address."""
    host: str
    port: int

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{SOCKS5_SCHEME}://{host}:{self.port}"


@dataclass
class TransportConfig:
    """Everything an adapter needs to build a client."""
    proxy_url: Optional[str] = None
    settings: TransportSettings = field(default_factory=TransportSettings)
    proxy_endpoint: Optional[ProxyEndpoint] = None


@dataclass
class ClientBuildResult:
    """Result wrapper with client, resolved policy, and transport kwargs."""
    client: Any  # Union[httpx.Client, httpx.AsyncClient]
    policy: TransportPolicy
    transport_kwargs: Dict[str, Any]

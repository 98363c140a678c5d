"""
Provider proxy client package.
"""
from .constants import KEY_SOCKS_PROXY, KEY_REJECT_DIRECT
from .exceptions import ClientFactoryError, PolicyViolationError, ProxySetupError
from .models import (
    TransportSettings,
    TransportPolicy,
    TransportConfig,
    MetadataFlag,
    ProxyEndpoint,
    ClientBuildResult,
)
from .metadata import resolve_reject_direct, is_strict
from .policy import resolve_policy, resolve_proxy_address, parse_proxy_address
from .events import (
    EventRecorder,
    LoggingEventRecorder,
    MemoryEventRecorder,
    set_log_level,
    get_log_level,
)
from .factory import ProviderClientFactory
from .dispatcher import (
    build_client,
    get_sync_client,
    get_async_client,
    create_provider_client_factory,
)
from .adapters import register_adapter, get_adapter, BaseAdapter

__all__ = [
    "KEY_SOCKS_PROXY",
    "KEY_REJECT_DIRECT",
    "ClientFactoryError",
    "PolicyViolationError",
    "ProxySetupError",
    "TransportSettings",
    "TransportPolicy",
    "TransportConfig",
    "MetadataFlag",
    "ProxyEndpoint",
    "ClientBuildResult",
    "resolve_reject_direct",
    "is_strict",
    "resolve_policy",
    "resolve_proxy_address",
    "parse_proxy_address",
    "EventRecorder",
    "LoggingEventRecorder",
    "MemoryEventRecorder",
    "set_log_level",
    "get_log_level",
    "ProviderClientFactory",
    "build_client",
    "get_sync_client",
    "get_async_client",
    "create_provider_client_factory",
    "register_adapter",
    "get_adapter",
    "BaseAdapter",
]

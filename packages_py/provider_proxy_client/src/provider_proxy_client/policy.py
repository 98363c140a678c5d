"""
Proxy policy resolution.

Merges the credential proxy address with the metadata strict flag and
enforces that strict providers never get a direct connection.
"""
import ipaddress
import logging
import re
from typing import Mapping, Optional

from .constants import KEY_REJECT_DIRECT, KEY_SOCKS_PROXY
from .exceptions import PolicyViolationError, ProxySetupError
from .metadata import MetadataInput, resolve_reject_direct
from .models import MetadataFlag, ProxyEndpoint, TransportPolicy

logger = logging.getLogger(__name__)

_HOSTNAME_RE = re.compile(r"[A-Za-z0-9._-]+")


def resolve_proxy_address(credentials: Optional[Mapping[str, str]]) -> str:
    """Proxy address from credentials. Missing and empty both yield ""."""
    if not credentials:
        return ""
    return credentials.get(KEY_SOCKS_PROXY) or ""


def resolve_policy(
    identity: str,
    credentials: Optional[Mapping[str, str]],
    metadata: MetadataInput,
) -> TransportPolicy:
    """Resolve the transport policy, raising PolicyViolationError if strict without a proxy."""
    proxy_address = resolve_proxy_address(credentials)
    flag = resolve_reject_direct(metadata)
    strict_mode = flag is MetadataFlag.TRUE
    logger.debug(
        f"[{identity}] strict_mode={strict_mode} (flag={flag.value}), "
        f"proxy configured={bool(proxy_address)}"
    )

    if strict_mode and not proxy_address:
        raise PolicyViolationError(identity, KEY_REJECT_DIRECT, KEY_SOCKS_PROXY)

    return TransportPolicy(
        identity=identity,
        strict_mode=strict_mode,
        proxy_address=proxy_address,
        metadata_flag=flag,
    )


def parse_proxy_address(address: str) -> ProxyEndpoint:
    """Parse a host:port relay address. IPv6 hosts must be bracketed.

    Hostnames are lowercased and IPv6 hosts compressed, so the endpoint
    matches what httpx will dial. Raises ValueError for anything else.
    """
    raw = address.strip()
    if not raw:
        raise ValueError("empty proxy address")

    if raw.startswith("["):
        host, sep, rest = raw[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ValueError("missing port in address")
        port_text = rest[1:]
        # zone ids ("%eth0") cannot be expressed in a proxy URL
        if "%" in host:
            raise ValueError(f"invalid IPv6 host {host!r}")
        try:
            host = str(ipaddress.IPv6Address(host))
        except ValueError as e:
            raise ValueError(f"invalid IPv6 host {host!r}") from e
    else:
        host, sep, port_text = raw.rpartition(":")
        if not sep:
            raise ValueError("missing port in address")
        if ":" in host:
            raise ValueError("too many colons in address")
        if not host:
            raise ValueError("missing host in address")
        if not _HOSTNAME_RE.fullmatch(host):
            raise ValueError(f"invalid host {host!r}")
        host = host.lower()

    if not (port_text.isascii() and port_text.isdigit()):
        raise ValueError(f"invalid port {port_text!r}")
    port = int(port_text)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")

    return ProxyEndpoint(host=host, port=port)


def build_proxy_endpoint(identity: str, address: str) -> ProxyEndpoint:
    """Parse the proxy address, wrapping failures in ProxySetupError."""
    try:
        return parse_proxy_address(address)
    except ValueError as e:
        raise ProxySetupError(identity, address, str(e)) from e

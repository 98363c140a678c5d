"""
Recognised configuration keys and fixed transport defaults.
"""

# Credential key holding the SOCKS5 relay address (host:port)
KEY_SOCKS_PROXY = "socks5_proxy"

# Metadata field forbidding unproxied connections
KEY_REJECT_DIRECT = "reject_direct_connection"

# Metadata values that switch strict mode on. Matched exactly.
STRICT_VALUES = frozenset({"true", "1"})

SOCKS5_SCHEME = "socks5"

DEFAULT_MAX_IDLE_CONNECTIONS = 100
DEFAULT_IDLE_CONNECTION_TIMEOUT = 90.0
DEFAULT_TLS_HANDSHAKE_TIMEOUT = 10.0
DEFAULT_REQUEST_TIMEOUT = 120.0

"""
Errors raised while building provider clients.
"""
from typing import Optional

from .constants import KEY_REJECT_DIRECT, KEY_SOCKS_PROXY


class ClientFactoryError(Exception):
    """Base class for client construction failures."""

    def __init__(self, identity: str, message: str):
        super().__init__(message)
        self.identity = identity


class PolicyViolationError(ClientFactoryError):
    """Metadata forbids direct connections but no proxy address is configured.

    Terminal: the configuration has to change before a client can be built.
    """

    def __init__(
        self,
        identity: str,
        flag_name: str = KEY_REJECT_DIRECT,
        key_name: str = KEY_SOCKS_PROXY,
    ):
        self.flag_name = flag_name
        self.key_name = key_name
        message = (
            f"SECURITY ERROR [{identity}]: provider metadata sets '{flag_name}: true' "
            f"but credentials do not define '{key_name}'. Direct connection blocked."
        )
        super().__init__(identity, message)


class ProxySetupError(ClientFactoryError):
    """The configured proxy address cannot be used to build a SOCKS5 transport."""

    def __init__(self, identity: str, address: str, reason: Optional[str] = None):
        self.address = address
        self.reason = reason
        message = f"failed to create SOCKS5 proxy for {identity}: {address!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(identity, message)

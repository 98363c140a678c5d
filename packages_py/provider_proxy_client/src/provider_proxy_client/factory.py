"""
Factory for creating provider HTTP clients with proxy policy enforcement.
"""
import logging
from typing import Mapping, Optional

from .adapters import BaseAdapter, get_adapter
from .events import EVENT_DIRECT, EVENT_PROXY, EventRecorder, LoggingEventRecorder
from .exceptions import ProxySetupError
from .metadata import MetadataInput
from .models import ClientBuildResult, TransportConfig, TransportPolicy, TransportSettings
from .policy import build_proxy_endpoint, resolve_policy

logger = logging.getLogger(__name__)


class ProviderClientFactory:
    """Builds HTTP clients for providers from credentials and metadata.

    A provider whose metadata sets ``reject_direct_connection`` must have a
    ``socks5_proxy`` credential; otherwise construction fails with
    PolicyViolationError instead of falling back to a direct connection.
    The factory keeps no record of the clients it returns.
    """

    def __init__(
        self,
        settings: Optional[TransportSettings] = None,
        adapter: str = "httpx",
        recorder: Optional[EventRecorder] = None,
    ):
        self.settings = settings or TransportSettings()
        self.adapter: BaseAdapter = get_adapter(adapter)
        self.recorder: EventRecorder = recorder or LoggingEventRecorder()

        logger.debug(f"ProviderClientFactory initialized with adapter '{adapter}'")

    def resolve_policy(
        self,
        identity: str,
        credentials: Optional[Mapping[str, str]],
        metadata: MetadataInput,
    ) -> TransportPolicy:
        return resolve_policy(identity, credentials, metadata)

    def build_client(
        self,
        identity: str,
        credentials: Optional[Mapping[str, str]],
        metadata: MetadataInput = None,
        async_client: bool = False,
    ) -> ClientBuildResult:
        """Build a client for ``identity``.

        Raises PolicyViolationError when strict mode is requested without a
        proxy, and ProxySetupError when the proxy address is unusable.
        """
        # 1. Merge credentials and metadata, enforce strict mode
        policy = self.resolve_policy(identity, credentials, metadata)

        # 2. Resolve the SOCKS5 endpoint
        endpoint = None
        if policy.proxied:
            endpoint = build_proxy_endpoint(identity, policy.proxy_address)

        config = TransportConfig(
            proxy_url=endpoint.url if endpoint else None,
            settings=self.settings,
            proxy_endpoint=endpoint,
        )

        # 3. Create client via adapter
        if async_client and not self.adapter.supports_async():
            raise NotImplementedError(f"Adapter '{self.adapter.name}' does not support async")
        if not async_client and not self.adapter.supports_sync():
            raise NotImplementedError(f"Adapter '{self.adapter.name}' does not support sync")

        try:
            transport_kwargs = self.adapter.get_transport_kwargs(config)
            if async_client:
                client = self.adapter.create_async_client(config, transport_kwargs)
            else:
                client = self.adapter.create_sync_client(config, transport_kwargs)
        except ValueError as e:
            raise ProxySetupError(identity, policy.proxy_address, str(e)) from e

        # 4. Report proxied vs direct
        if policy.proxied:
            self._record(EVENT_PROXY, identity=identity, address=policy.proxy_address)
        else:
            self._record(EVENT_DIRECT, identity=identity)

        return ClientBuildResult(client=client, policy=policy, transport_kwargs=transport_kwargs)

    def make_http_client(
        self,
        identity: str,
        credentials: Optional[Mapping[str, str]],
        metadata: MetadataInput = None,
        async_client: bool = False,
    ):
        """Like build_client, returning only the client."""
        return self.build_client(identity, credentials, metadata, async_client=async_client).client

    def _record(self, event: str, **fields) -> None:
        try:
            self.recorder.record(event, **fields)
        except Exception as e:
            logger.error(f"Event recorder failed on '{event}': {e}")

"""
Convenience functions over a default ProviderClientFactory.
"""
from typing import Mapping, Optional
import httpx
from .events import EventRecorder
from .factory import ProviderClientFactory
from .metadata import MetadataInput
from .models import ClientBuildResult, TransportSettings

# Global default factory
_default_factory = ProviderClientFactory()


def build_client(
    identity: str,
    credentials: Optional[Mapping[str, str]],
    metadata: MetadataInput = None,
    async_client: bool = False,
) -> ClientBuildResult:
    """Build a provider client using the default factory."""
    return _default_factory.build_client(identity, credentials, metadata, async_client=async_client)


def get_sync_client(
    identity: str,
    credentials: Optional[Mapping[str, str]],
    metadata: MetadataInput = None,
) -> httpx.Client:
    """Get a configured sync httpx client."""
    return build_client(identity, credentials, metadata, async_client=False).client


def get_async_client(
    identity: str,
    credentials: Optional[Mapping[str, str]],
    metadata: MetadataInput = None,
) -> httpx.AsyncClient:
    """Get a configured async httpx client."""
    return build_client(identity, credentials, metadata, async_client=True).client


def create_provider_client_factory(
    settings: Optional[TransportSettings] = None,
    adapter: str = "httpx",
    recorder: Optional[EventRecorder] = None,
) -> ProviderClientFactory:
    """Create a new ProviderClientFactory instance."""
    return ProviderClientFactory(settings=settings, adapter=adapter, recorder=recorder)

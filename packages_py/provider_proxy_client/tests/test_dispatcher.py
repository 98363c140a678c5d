"""
Tests for module-level helpers, adapters and settings.
"""
import httpcore
import httpx
import pytest
from pydantic import ValidationError
from provider_proxy_client import (
    BaseAdapter,
    MemoryEventRecorder,
    PolicyViolationError,
    ProviderClientFactory,
    ProxyEndpoint,
    TransportConfig,
    TransportSettings,
    build_client,
    create_provider_client_factory,
    get_adapter,
    get_async_client,
    get_sync_client,
    register_adapter,
)


class TestDispatcherHelpers:

    def test_get_sync_client(self):
        with get_sync_client("sync", {}, b"{}") as client:
            assert isinstance(client, httpx.Client)

    @pytest.mark.asyncio
    async def test_get_async_client(self):
        client = get_async_client("async", {"socks5_proxy": "127.0.0.1:1080"})
        assert isinstance(client, httpx.AsyncClient)
        await client.aclose()

    def test_build_client_enforces_policy(self):
        with pytest.raises(PolicyViolationError):
            build_client("strict", {}, b'{"reject_direct_connection":"1"}')

    def test_create_factory(self):
        recorder = MemoryEventRecorder()
        factory = create_provider_client_factory(recorder=recorder)
        assert isinstance(factory, ProviderClientFactory)
        assert factory.recorder is recorder
        assert factory.settings == TransportSettings()


class SyncOnlyAdapter(BaseAdapter):

    @property
    def name(self) -> str:
        return "sync-only"

    def supports_sync(self) -> bool:
        return True

    def supports_async(self) -> bool:
        return False

    def get_transport_kwargs(self, config):
        return {"proxy_url": config.proxy_url}

    def create_sync_client(self, config, transport_kwargs=None):
        return ("sync-client", config.proxy_url)

    def create_async_client(self, config, transport_kwargs=None):
        raise AssertionError("not supported")


class TestAdapters:

    def test_httpx_adapter_registered(self):
        assert get_adapter("httpx").name == "httpx"

    def test_custom_adapter(self):
        register_adapter(SyncOnlyAdapter)
        factory = ProviderClientFactory(adapter="sync-only", recorder=MemoryEventRecorder())
        result = factory.build_client("custom", {"socks5_proxy": "10.0.0.1:1080"})
        assert result.client == ("sync-client", "socks5://10.0.0.1:1080")
        assert result.transport_kwargs == {"proxy_url": "socks5://10.0.0.1:1080"}

        with pytest.raises(NotImplementedError):
            factory.build_client("custom", {}, async_client=True)

    def test_httpx_adapter_rejects_bad_proxy_url(self):
        adapter = get_adapter("httpx")
        with pytest.raises(ValueError):
            adapter.get_transport_kwargs(TransportConfig(proxy_url="ftp://10.0.0.1:21"))

    def test_httpx_adapter_rejects_endpoint_mismatch(self):
        """The parsed proxy URL must dial the validated host and port."""
        adapter = get_adapter("httpx")
        config = TransportConfig(
            proxy_url="socks5://h#x:1080",
            proxy_endpoint=ProxyEndpoint(host="h#x", port=1080),
        )
        with pytest.raises(ValueError):
            adapter.get_transport_kwargs(config)

    def test_httpx_adapter_uses_given_transport_kwargs(self):
        adapter = get_adapter("httpx")
        config = TransportConfig(
            proxy_url="socks5://10.0.0.1:1080",
            proxy_endpoint=ProxyEndpoint(host="10.0.0.1", port=1080),
        )
        kwargs = adapter.get_transport_kwargs(config)
        with adapter.create_sync_client(config, kwargs) as client:
            assert isinstance(client._transport._pool, httpcore.SOCKSProxy)


class TestTransportSettings:

    def test_defaults(self):
        settings = TransportSettings()
        assert settings.max_idle_connections == 100
        assert settings.idle_connection_timeout == 90.0
        assert settings.tls_handshake_timeout == 10.0
        assert settings.request_timeout == 120.0

    @pytest.mark.parametrize(
        "field", ["max_idle_connections", "idle_connection_timeout", "tls_handshake_timeout", "request_timeout"]
    )
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValidationError):
            TransportSettings(**{field: 0})

    def test_frozen(self):
        settings = TransportSettings()
        with pytest.raises(ValidationError):
            settings.request_timeout = 1.0

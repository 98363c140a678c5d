"""
Adapter for httpx library.
"""
import logging
import httpx
from typing import Any, Dict, Optional
from .base import BaseAdapter
from ..models import TransportConfig

logger = logging.getLogger(__name__)


class HttpxAdapter(BaseAdapter):
    """Adapter for httpx library.

    SOCKS5 proxies need the ``socksio`` extra (``httpx[socks]``).
    """

    @property
    def name(self) -> str:
        return "httpx"

    def supports_sync(self) -> bool:
        return True

    def supports_async(self) -> bool:
        return True

    def get_timeout(self, config: TransportConfig) -> httpx.Timeout:
        settings = config.settings
        # connect covers TCP connect plus the TLS handshake
        return httpx.Timeout(settings.request_timeout, connect=settings.tls_handshake_timeout)

    def get_transport_kwargs(self, config: TransportConfig) -> Dict[str, Any]:
        """Build kwargs for httpx transports."""
        settings = config.settings
        kwargs: Dict[str, Any] = {
            "limits": httpx.Limits(
                max_keepalive_connections=settings.max_idle_connections,
                keepalive_expiry=settings.idle_connection_timeout,
            ),
            # Never pick up HTTP(S)_PROXY or netrc from the environment
            "trust_env": False,
        }

        if config.proxy_url:
            try:
                proxy = httpx.Proxy(url=config.proxy_url)
            except (httpx.InvalidURL, TypeError) as e:
                raise ValueError(str(e)) from e
            self._check_proxy_endpoint(proxy, config)
            kwargs["proxy"] = proxy

        return kwargs

    def _check_proxy_endpoint(self, proxy: httpx.Proxy, config: TransportConfig) -> None:
        """The URL httpx parsed must point at the endpoint that was validated."""
        endpoint = config.proxy_endpoint
        if endpoint is None:
            return
        if proxy.url.host != endpoint.host or proxy.url.port != endpoint.port:
            raise ValueError(
                f"proxy URL resolves to {proxy.url.host}:{proxy.url.port}, "
                f"expected {endpoint.host}:{endpoint.port}"
            )

    def _build_transport(self, transport_cls, kwargs: Dict[str, Any]):
        try:
            return transport_cls(**kwargs)
        except ImportError as e:
            # socksio missing
            raise ValueError(str(e)) from e

    def create_sync_client(
        self, config: TransportConfig, transport_kwargs: Optional[Dict[str, Any]] = None
    ) -> httpx.Client:
        """Create httpx.Client."""
        kwargs = transport_kwargs if transport_kwargs is not None else self.get_transport_kwargs(config)
        logger.debug(f"Creating httpx.Client with transport config: {kwargs}")

        transport = self._build_transport(httpx.HTTPTransport, kwargs)
        return httpx.Client(
            transport=transport,
            timeout=self.get_timeout(config),
            trust_env=False,
        )

    def create_async_client(
        self, config: TransportConfig, transport_kwargs: Optional[Dict[str, Any]] = None
    ) -> httpx.AsyncClient:
        """Create httpx.AsyncClient."""
        kwargs = transport_kwargs if transport_kwargs is not None else self.get_transport_kwargs(config)
        logger.debug(f"Creating httpx.AsyncClient with transport config: {kwargs}")

        transport = self._build_transport(httpx.AsyncHTTPTransport, kwargs)
        return httpx.AsyncClient(
            transport=transport,
            timeout=self.get_timeout(config),
            trust_env=False,
        )

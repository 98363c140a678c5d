"""
Abstract base adapter for HTTP libraries.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..models import TransportConfig


class BaseAdapter(ABC):
    """Abstract interface for HTTP library adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the adapter (e.g., 'httpx')."""
        pass

    @abstractmethod
    def supports_sync(self) -> bool:
        """Whether the adapter supports synchronous clients."""
        pass

    @abstractmethod
    def supports_async(self) -> bool:
        """Whether the adapter supports asynchronous clients."""
        pass

    @abstractmethod
    def get_transport_kwargs(self, config: TransportConfig) -> Dict[str, Any]:
        """Keyword arguments for the pooled transport.

        Raises ValueError when the proxy URL is rejected by the library.
        """
        pass

    @abstractmethod
    def create_sync_client(
        self, config: TransportConfig, transport_kwargs: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Create a configured synchronous client.

        transport_kwargs, when given, must be the result of get_transport_kwargs
        and is used as is.
        """
        pass

    @abstractmethod
    def create_async_client(
        self, config: TransportConfig, transport_kwargs: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Create a configured asynchronous client."""
        pass

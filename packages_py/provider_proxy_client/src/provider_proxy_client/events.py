"""
Diagnostic events emitted by the client factory.

The factory reports through an injected recorder so callers decide where the
events go. The default recorder writes them to the standard logging module.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

EVENT_PROXY = "proxy"
EVENT_DIRECT = "direct"

PACKAGE_LOGGER = "provider_proxy_client"

logger = logging.getLogger(__name__)


class EventRecorder:
    def record(self, event: str, **fields: Any) -> None: ...


class LoggingEventRecorder(EventRecorder):
    """Writes factory events as human-readable log lines."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def record(self, event: str, **fields: Any) -> None:
        identity = fields.get("identity", "")
        if event == EVENT_PROXY:
            self._log.info(f"using proxy {fields.get('address')} for {identity}")
        elif event == EVENT_DIRECT:
            self._log.warning(f"direct connection (no proxy) for {identity}")
        else:
            self._log.info(f"{event} for {identity}: {fields}")


class MemoryEventRecorder(EventRecorder):
    """Keeps events in a list; handy for tests and dry runs."""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def record(self, event: str, **fields: Any) -> None:
        self.events.append((event, dict(fields)))

    def clear(self) -> None:
        self.events.clear()


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every logger in this package."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_log_level() -> int:
    return logging.getLogger(PACKAGE_LOGGER).getEffectiveLevel()

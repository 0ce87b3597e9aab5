import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

READY = "ready"
DATE_CHANGE = "date_change"
SUBMIT = "submit"

Handler = Callable[..., Awaitable[Any]]


class EventSource(ABC):
    """Something the form controller can subscribe to."""

    @abstractmethod
    def on(self, event: str, handler: Handler) -> None:
        """Register ``handler`` to run whenever ``event`` fires."""


class FormEventBus(EventSource):
    """Dispatches form events to async handlers, one at a time, in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def on(self, event: str, handler: Handler) -> None:
        self._handlers[event].append(handler)

    async def emit(self, event: str, *args: Any) -> list[Any]:
        handlers = self._handlers.get(event, [])
        if not handlers:
            logger.debug("No handlers registered for %s", event)
        return [await handler(*args) for handler in handlers]

"""Dispatch table routing integration events to plain handler functions.

Handlers are registered against the cloud event type tag that @cloudevent
attaches to an event class (e.g. "customer.address.updated.v1"), so a new
subscription is a function plus one register() call.
"""

import logging
from typing import Any, Awaitable, Callable

log = logging.getLogger(__name__)

IntegrationEventHandlerFunc = Callable[[Any], Awaitable[None]]


class IntegrationEventDispatcher:
    """Routes integration events to the handler functions registered for their type tag."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[IntegrationEventHandlerFunc]] = {}

    @staticmethod
    def type_tag_of(event_type: type) -> str:
        """Return the cloud event type tag of an integration event class.

        Raises:
            TypeError: If the class is not decorated with @cloudevent
        """
        type_tag = getattr(event_type, "__cloudevent__type__", None)
        if not type_tag:
            raise TypeError(f"{event_type.__name__} is not a cloud event type (missing @cloudevent)")
        return type_tag

    def register(self, event_type: type, handler: IntegrationEventHandlerFunc) -> "IntegrationEventDispatcher":
        """Register a handler function for an integration event type.

        Several handlers may share a type tag; they run in registration order.
        """
        type_tag = self.type_tag_of(event_type)
        self._handlers.setdefault(type_tag, []).append(handler)
        log.debug(f"Registered handler '{getattr(handler, '__name__', handler)}' for '{type_tag}'")
        return self

    def handles(self, event_type: type | str) -> bool:
        type_tag = event_type if isinstance(event_type, str) else self.type_tag_of(event_type)
        return bool(self._handlers.get(type_tag))

    async def dispatch_async(self, event: Any) -> None:
        """Run every handler registered for the event's type tag.

        Events without a registered handler are logged and ignored. Handler
        exceptions propagate to the caller unchanged.
        """
        type_tag = self.type_tag_of(type(event))
        handlers = self._handlers.get(type_tag)
        if not handlers:
            log.warning(f"No handler registered for integration event type '{type_tag}', ignoring")
            return
        for handler in handlers:
            await handler(event)

"""Cart lifecycle events.

Listeners register on a CartEventBus instead of a global document target.
Dispatch is synchronous: every listener runs before the cart call continues.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from .logging import get_logger

logger = get_logger(__name__)

ALL_EVENTS = "*"


class CartEventName(str, Enum):
    """Events emitted by the cart client."""
    READY = "cart:ready"
    REQUEST_STARTED = "cart:requestStarted"
    REQUEST_COMPLETE = "cart:requestComplete"


@dataclass
class CartEvent:
    """A single lifecycle notification."""
    name: str
    cart: Any
    route: Optional[str] = None
    bubbles: bool = True
    cancelable: bool = True
    composed: bool = False
    default_prevented: bool = field(default=False, init=False)

    @property
    def detail(self) -> Dict[str, Any]:
        return {"cart": self.cart, "route": self.route}

    def prevent_default(self) -> None:
        if self.cancelable:
            self.default_prevented = True


CartEventListener = Callable[[CartEvent], Any]
EventNameInput = Union[CartEventName, str]


def _key(name: EventNameInput) -> str:
    return name.value if isinstance(name, CartEventName) else name


class CartEventBus:
    """Listener registry that cart clients broadcast their events to."""

    def __init__(self):
        self._listeners: Dict[str, List[CartEventListener]] = {}

    def subscribe(self, name: EventNameInput, listener: CartEventListener) -> Callable[[], None]:
        """
        Register a listener for an event name, or "*" for every event.

        Returns:
            Callable that removes the listener again
        """
        key = _key(name)
        self._listeners.setdefault(key, []).append(listener)
        return lambda: self.unsubscribe(key, listener)

    def unsubscribe(self, name: EventNameInput, listener: CartEventListener) -> None:
        listeners = self._listeners.get(_key(name), [])
        if listener in listeners:
            listeners.remove(listener)

    def listeners(self, name: EventNameInput) -> List[CartEventListener]:
        key = _key(name)
        return list(self._listeners.get(key, [])) + list(self._listeners.get(ALL_EVENTS, []))

    def dispatch(self, event: CartEvent) -> bool:
        """
        Call every listener for the event in registration order.

        A failing listener is logged and does not stop the rest.

        Returns:
            False if a listener called prevent_default(), True otherwise
        """
        for listener in self.listeners(event.name):
            try:
                listener(event)
            except Exception as e:
                logger.warning(f"Listener for {event.name} failed: {e}", exc_info=True)
        return not event.default_prevented


__all__ = [
    "ALL_EVENTS",
    "CartEventName",
    "CartEvent",
    "CartEventListener",
    "CartEventBus",
]

"""Named events and the interfaces to dispatch and receive them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

EVENT_BATTERY_LEVEL = "battery_level"
EVENT_CONNECTED = "connected"
EVENT_DISCONNECTED = "disconnected"


@dataclass(frozen=True)
class Event:
    """An event identified by its name."""

    event_name: str


class EventListener(ABC):
    """Receives events from a dispatcher."""

    @abstractmethod
    def handle_event(self, event: Event) -> None:
        """Handle one event."""


class EventDispatcher(ABC):
    """Delivers posted events to registered listeners."""

    @abstractmethod
    def post_event(self, event: Event) -> None:
        """Post an event to the listeners."""

    @abstractmethod
    def add_event_listener(self, listener: EventListener) -> None:
        """Register a listener."""
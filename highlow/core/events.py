"""
Event system for the High-Low card game.

This module provides an event bus for decoupling the game engine from
console output and other observers.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class EventType(Enum):
    """Types of events that can be emitted by the game."""

    GAME_STARTED = "game_started"
    CARDS_DRAWN = "cards_drawn"
    ROUND_RESOLVED = "round_resolved"
    GAME_ENDED = "game_ended"


@dataclass
class GameEvent:
    """Represents a game event with associated data.

    Attributes:
        event_type: The type of event
        data: Event-specific data
        timestamp: When the event occurred (optional)
        source: Source of the event (optional)
    """

    event_type: EventType
    data: Dict[str, Any]
    timestamp: Optional[float] = None
    source: Optional[str] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = time.time()


# Type alias for event listeners
EventListener = Callable[[GameEvent], None]


class EventBus:
    """Event bus for managing game events and listeners.

    Components subscribe to specific event types and are called
    synchronously, in subscription order, when such an event is emitted.
    A listener that raises is logged and skipped; the remaining listeners
    still run.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        """Initialize the event bus.

        Args:
            logger: Optional logger for debugging events
            max_history: Number of past events kept for inspection
        """
        self._listeners: Dict[EventType, List[EventListener]] = {}
        self._logger = logger or logging.getLogger(__name__)
        self._event_history: List[GameEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, listener: EventListener) -> None:
        """Subscribe a listener to an event type.

        Args:
            event_type: The type of event to listen for
            listener: The callback function to call when the event occurs
        """
        self._listeners.setdefault(event_type, []).append(listener)
        self._logger.debug("Subscribed listener to %s", event_type.value)

    def unsubscribe(self, event_type: EventType, listener: EventListener) -> bool:
        """Unsubscribe a listener from an event type.

        Returns:
            True if the listener was found and removed, False otherwise
        """
        listeners = self._listeners.get(event_type)
        if not listeners or listener not in listeners:
            return False
        listeners.remove(listener)
        self._logger.debug("Unsubscribed listener from %s", event_type.value)
        return True

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribed listeners.

        Args:
            event: The event to emit
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        listeners = list(self._listeners.get(event.event_type, []))
        self._logger.debug("Emitting %s to %d listeners", event.event_type.value, len(listeners))

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                self._logger.exception("Error in %s listener", event.event_type.value)

    def emit_simple(self, event_type: EventType, source: Optional[str] = None, **data) -> None:
        """Emit an event built from keyword arguments.

        Args:
            event_type: The type of event to emit
            source: Optional event source name
            **data: Event data as keyword arguments
        """
        self.emit(GameEvent(event_type=event_type, data=data, source=source))

    def get_listeners_count(self, event_type: EventType) -> int:
        return len(self._listeners.get(event_type, []))

    def clear_listeners(self, event_type: Optional[EventType] = None) -> None:
        """Clear listeners for a specific event type or all event types."""
        if event_type is None:
            self._listeners.clear()
            self._logger.debug("Cleared all event listeners")
        else:
            self._listeners[event_type] = []
            self._logger.debug("Cleared listeners for %s", event_type.value)

    def get_event_history(self, event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[GameEvent]:
        """Get event history, optionally filtered by type and limited.

        Args:
            event_type: Optional event type to filter by
            limit: Optional limit on number of most recent events to return

        Returns:
            List of events from history, oldest first
        """
        events = self._event_history

        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]

        if limit is not None:
            events = events[-limit:] if limit > 0 else []

        return list(events)

    def clear_history(self) -> None:
        self._event_history.clear()
        self._logger.debug("Cleared event history")

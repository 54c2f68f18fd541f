"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Game flow events
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Card events
    CARD_DEALT = auto()
    DECK_SHUFFLED = auto()

    # Turn events
    TURN_STARTED = auto()
    PLAYER_HIT = auto()
    PLAYER_STAY = auto()
    PLAYER_BUSTS = auto()
    DEALER_HIT = auto()
    DEALER_STAY = auto()
    DEALER_BUSTS = auto()

    # Blackjack events
    PLAYER_BLACKJACK = auto()
    DEALER_BLACKJACK = auto()
    PUSH = auto()

    # Outcome events
    REVEAL = auto()
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    TIE = auto()
    EVERYONE_BUSTED = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    One thing that happened during a round.

    `data` carries the participant's name and, for per-participant
    events, an `is_dealer` flag. Names can collide, so renderers use the
    flag to tell the two seats apart.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def participant(self) -> str | None:
        return self.data.get("participant")

    @property
    def is_dealer(self) -> bool:
        return bool(self.data.get("is_dealer", False))

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Subscriber callback
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter for game events.

    Allows subscribing to specific event types or all events.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Record the event and pass it to type-specific, then catch-all handlers."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()

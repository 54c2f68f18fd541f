"""Round engine and state management."""

from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.state import GameState
from twentyone.game.engine import RoundResult, Session, TwentyOneGame

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "GameState",
    "RoundResult",
    "Session",
    "TwentyOneGame",
]

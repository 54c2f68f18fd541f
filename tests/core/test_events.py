"""Tests for the event emitter."""

from twentyone.game.events import EventEmitter, EventType, GameEvent


def test_typed_and_catch_all_handlers():
    emitter = EventEmitter()
    typed, everything = [], []
    emitter.subscribe(typed.append, EventType.PLAYER_HIT)
    emitter.subscribe(everything.append)

    emitter.emit_new(EventType.PLAYER_HIT, hand_value=15)
    emitter.emit_new(EventType.PLAYER_STAY, hand_value=15)

    assert [e.event_type for e in typed] == [EventType.PLAYER_HIT]
    assert [e.event_type for e in everything] == [EventType.PLAYER_HIT, EventType.PLAYER_STAY]
    assert typed[0].data == {"hand_value": 15}


def test_unsubscribe():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(seen.append, EventType.TIE)
    emitter.unsubscribe(seen.append, EventType.TIE)
    emitter.unsubscribe(seen.append, EventType.PUSH)  # never subscribed

    emitter.emit_new(EventType.TIE)
    assert seen == []


def test_history():
    emitter = EventEmitter()
    event = emitter.emit_new(EventType.ROUND_STARTED, round=1)

    assert isinstance(event, GameEvent)
    assert emitter.history == [event]

    emitter.history.clear()  # a copy
    assert len(emitter.history) == 1

    emitter.clear_history()
    assert emitter.history == []


def test_event_str():
    event = GameEvent(EventType.PUSH)
    assert str(event).startswith("PUSH")


def test_participant_and_role():
    event = GameEvent(EventType.DEALER_HIT, {"participant": "Hal", "is_dealer": True})
    assert event.participant == "Hal"
    assert event.is_dealer

    bare = GameEvent(EventType.TIE)
    assert bare.participant is None
    assert not bare.is_dealer

"""Round engine state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round engine state machine states.

    Flow: DEALING_INITIAL → CHECKING_BLACKJACK → PLAYER_TURN → DEALER_TURN
          → REVEAL → SCORING → AWAITING_REPLAY → (DEALING_INITIAL | ENDED)
    """

    # Two cards each
    DEALING_INITIAL = auto()

    # Naturals end the round before any play
    CHECKING_BLACKJACK = auto()

    # Human decides
    PLAYER_TURN = auto()

    # Dealer plays to its threshold
    DEALER_TURN = auto()

    # All cards face up
    REVEAL = auto()

    # Determining the winner
    SCORING = auto()

    # Round finished, waiting for the replay answer
    AWAITING_REPLAY = auto()

    # Player declined to play again
    ENDED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Triggers fired by the round engine: (trigger, source, dest)
TRIGGERS: list[tuple[str, GameState, GameState]] = [
    ("cards_dealt", GameState.DEALING_INITIAL, GameState.CHECKING_BLACKJACK),
    ("no_blackjack", GameState.CHECKING_BLACKJACK, GameState.PLAYER_TURN),
    ("blackjack_found", GameState.CHECKING_BLACKJACK, GameState.REVEAL),
    ("player_done", GameState.PLAYER_TURN, GameState.DEALER_TURN),
    ("player_busted", GameState.PLAYER_TURN, GameState.REVEAL),
    ("dealer_done", GameState.DEALER_TURN, GameState.REVEAL),
    ("cards_revealed", GameState.REVEAL, GameState.SCORING),
    ("round_scored", GameState.SCORING, GameState.AWAITING_REPLAY),
    ("play_again", GameState.AWAITING_REPLAY, GameState.DEALING_INITIAL),
    ("end_game", GameState.AWAITING_REPLAY, GameState.ENDED),
]

# Valid state transitions, derived from TRIGGERS
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    state: [dest for _, source, dest in TRIGGERS if source == state] for state in GameState
}


def machine_transitions() -> list[dict[str, str]]:
    """TRIGGERS in the form `transitions.Machine` expects."""
    return [
        {"trigger": trigger, "source": source.name.lower(), "dest": dest.name.lower()}
        for trigger, source, dest in TRIGGERS
    ]


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])

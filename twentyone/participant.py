"""Participants: one type, two decision policies."""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

from twentyone.hand import Hand

DEALER_THRESHOLD = 17

DEALER_NAMES: tuple[str, ...] = ("R2D2", "Hal", "Chappie", "Sonny", "Number 5")


class Move(Enum):
    """A participant's move state."""

    HIT = "hit"
    STAY = "stay"

    def __str__(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class Human:
    """Decisions come from a person at the terminal."""


@dataclass(frozen=True)
class RuleBased:
    """Hit while the hand total is below the threshold, otherwise stay."""

    threshold: int = DEALER_THRESHOLD

    def decide(self, hand: Hand) -> Move:
        return Move.HIT if hand.value < self.threshold else Move.STAY


DecisionPolicy = Human | RuleBased

# Callback that asks a human for their move
AskMove = Callable[["Participant"], Move]


@dataclass
class Participant:
    """
    A player or dealer.

    Name and score live for the whole session. Hand and move are
    round-scoped and cleared by reset_round().
    """

    name: str
    policy: DecisionPolicy = field(default_factory=Human)
    hand: Hand = field(default_factory=Hand)
    move: Move = Move.HIT
    score: int = 0

    @classmethod
    def player(cls, name: str) -> "Participant":
        return cls(name=name, policy=Human())

    @classmethod
    def dealer(
        cls,
        name: str | None = None,
        threshold: int = DEALER_THRESHOLD,
        names: Sequence[str] = DEALER_NAMES,
        rng: random.Random | None = None,
    ) -> "Participant":
        """Create a rule-based dealer, picking a random robot name if none is given."""
        if name is None:
            name = (rng or random).choice(list(names))
        return cls(name=name, policy=RuleBased(threshold=threshold))

    @property
    def is_human(self) -> bool:
        return isinstance(self.policy, Human)

    @property
    def has_stayed(self) -> bool:
        return self.move == Move.STAY

    def decide(self, ask: AskMove | None = None) -> Move:
        """
        Choose the next move and record it.

        Args:
            ask: Callback used for human participants

        Raises:
            ValueError: If a human participant has no callback to ask
        """
        if isinstance(self.policy, RuleBased):
            move = self.policy.decide(self.hand)
        else:
            if ask is None:
                raise ValueError(f"No input source to ask {self.name} for a move")
            move = ask(self)
        self.move = move
        return move

    def reset_round(self) -> None:
        """Clear the hand and move state for a new round."""
        self.hand.reset()
        self.move = Move.HIT

    def add_score(self) -> None:
        self.score += 1

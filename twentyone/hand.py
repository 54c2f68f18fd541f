"""Hand evaluation for Twenty-One."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from twentyone.cards import Card

MAX_HAND = 21
STARTING_HAND = 2


class Outcome(Enum):
    """Result of comparing one hand against another, from the first hand's side."""

    WIN = "win"
    LOSS = "loss"
    TIE = "tie"
    BOTH_BUSTED = "both_busted"


@dataclass
class Hand:
    """A Twenty-One hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Add cards in dealt order."""
        self.cards.extend(cards)

    def reset(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def total_value(self) -> int:
        """
        Calculate the hand value.

        Every Ace starts at 11. While the total is over 21, one Ace at a
        time drops to 1, stopping as soon as the total is 21 or less.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.rank.base_value

        while total > MAX_HAND and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def value(self) -> int:
        return self.total_value()

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.total_value() > MAX_HAND

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural (21 on the initial two cards only)."""
        return len(self.cards) == STARTING_HAND and self.total_value() == MAX_HAND

    @property
    def num_cards(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def wins(hand: Hand, other: Hand) -> bool:
    """
    Check whether `hand` beats `other`.

    A busted hand never wins. Otherwise it wins with the higher total,
    or when the other hand has busted.
    """
    if hand.is_busted:
        return False
    return hand.value > other.value or other.is_busted


def classify(hand: Hand, other: Hand) -> Outcome:
    """
    Classify a showdown from `hand`'s point of view.

    Returns:
        Outcome.WIN or Outcome.LOSS when exactly one side wins,
        Outcome.BOTH_BUSTED when neither wins because both busted,
        Outcome.TIE otherwise (equal non-busted totals)
    """
    if wins(hand, other):
        return Outcome.WIN
    if wins(other, hand):
        return Outcome.LOSS
    if hand.is_busted and other.is_busted:
        return Outcome.BOTH_BUSTED
    return Outcome.TIE

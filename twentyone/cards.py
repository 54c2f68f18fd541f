"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator

from twentyone.errors import ExhaustedDeck

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    SPADES = "Spades"
    CLUBS = "Clubs"

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        return {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
        }[self]


class Rank(Enum):
    """Card ranks. The enum value is the display name."""

    ACE = "Ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        if self.value.isdigit():
            return self.value
        return self.value[0]

    @property
    def base_value(self) -> int:
        """Return the point value before Ace adjustment (Ace = 11, faces = 10)."""
        if self == Rank.ACE:
            return 11
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_CODES = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

_SUIT_CODES = {
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Its value depends on the hand it sits in."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @property
    def name(self) -> str:
        """Long form, e.g. 'Queen of Hearts'."""
        return f"{self.rank.value} of {self.suit.value}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10h' or 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


class Deck:
    """A standard 52-card deck, dealt without replacement."""

    SIZE = 52

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new, shuffled deck.

        Args:
            rng: Random number generator used for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Repopulate with all 52 cards and shuffle."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        self.shuffle()

    def shuffle(self) -> None:
        """Randomly permute the remaining cards."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled deck, %d cards remaining", len(self._cards))

    def deal(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise ExhaustedDeck()
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

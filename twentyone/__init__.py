"""Twenty-One engine - 100% UI-agnostic."""

from twentyone.cards import Card, Deck, Rank, Suit
from twentyone.errors import EmptyName, ExhaustedDeck, InvalidInput, TwentyOneError
from twentyone.hand import Hand, Outcome, classify, wins
from twentyone.participant import Human, Move, Participant, RuleBased

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "classify",
    "wins",
    "Human",
    "Move",
    "Participant",
    "RuleBased",
    "EmptyName",
    "ExhaustedDeck",
    "InvalidInput",
    "TwentyOneError",
]

"""Pytest fixtures for Twenty-One tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from twentyone.cards import Card, Deck, Rank, Suit
from twentyone.game import Session, TwentyOneGame
from twentyone.hand import Hand
from twentyone.participant import Move, Participant


def make_hand(*card_strs: str) -> Hand:
    """Build a hand from strings like 'AS', '10H'."""
    hand = Hand()
    hand.add_cards(Card.from_string(s) for s in card_strs)
    return hand


class StackedRandom:
    """
    Stand-in RNG that stacks chosen cards on top of the deck.

    Cards are dealt in the order given; everything else keeps its
    original order underneath.
    """

    def __init__(self, *top: str) -> None:
        self.top = [Card.from_string(s) for s in top]

    def shuffle(self, cards: list) -> None:
        rest = [c for c in cards if c not in self.top]
        cards[:] = rest + self.top[::-1]

    def choice(self, seq):
        return seq[0]


class ScriptedMoves:
    """ask_player callback that replays a fixed list of moves."""

    def __init__(self, *moves: Move) -> None:
        self.moves = list(moves)
        self.asked: list[int] = []

    def __call__(self, participant: Participant) -> Move:
        self.asked.append(participant.hand.value)
        if not self.moves:
            raise AssertionError(f"{participant.name} was asked for a move unexpectedly")
        return self.moves.pop(0)


def make_game(*top: str, moves: tuple[Move, ...] = ()) -> TwentyOneGame:
    """Game whose deck deals `top` first: player x2, dealer x2, then hits."""
    session = Session.create("Alice", dealer_name="Hal", rng=StackedRandom(*top))
    return TwentyOneGame(session, ask_player=ScriptedMoves(*moves))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def player():
    return Participant.player("Alice")


@pytest.fixture
def dealer():
    return Participant.dealer("Hal")


# Hypothesis strategies for property-based testing

@st.composite
def card_strategy(draw, ranks=tuple(Rank)):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(ranks)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=6, ranks=tuple(Rank)):
    """Generate a random hand."""
    cards = draw(
        st.lists(card_strategy(ranks=ranks), min_size=min_cards, max_size=max_cards)
    )
    hand = Hand()
    hand.add_cards(cards)
    return hand

"""ASCII card art."""

from typing import Iterable, Sequence

from twentyone.cards import Card

CARD_WIDTH = 13
HIDDEN_LABEL = "[HIDDEN]"
INDENT = "    "


def card_lines(rank_label: str, suit_label: str) -> list[str]:
    """
    Draw a single card as a list of lines.

    Args:
        rank_label: Shown in the top-left and bottom-right corners
        suit_label: Shown centered in the middle of the card
    """
    inner = CARD_WIDTH - 2
    blank = ":" + " " * inner + ":"
    lines = [
        "." * CARD_WIDTH,
        blank,
        f":  {rank_label:<{inner - 2}}:",
        blank,
        ":" + suit_label.center(inner) + ":",
        blank,
        f":{rank_label:>{inner - 2}}  :",
        blank,
        ":" + "." * inner + ":",
    ]
    return [INDENT + line for line in lines]


def draw_card(card: Card) -> list[str]:
    return card_lines(str(card.rank), card.suit.symbol)


def draw_hidden_card() -> list[str]:
    return card_lines(" ", HIDDEN_LABEL)


def side_by_side(drawings: Sequence[list[str]]) -> str:
    """Join several card drawings horizontally."""
    if not drawings:
        return ""
    return "\n".join("".join(row) for row in zip(*drawings))


def render_cards(cards: Iterable[Card]) -> str:
    """Render every card face up."""
    return side_by_side([draw_card(card) for card in cards])


def render_hidden(cards: Sequence[Card]) -> str:
    """Render the first card face up and mask the rest behind one hidden card."""
    if not cards:
        return ""
    drawings = [draw_card(cards[0])]
    if len(cards) > 1:
        drawings.append(draw_hidden_card())
    return side_by_side(drawings)

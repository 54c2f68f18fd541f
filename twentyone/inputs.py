"""Parsing of the tokens a player can type at each prompt."""

from twentyone.errors import EmptyName, InvalidInput
from twentyone.participant import Move

HIT_STAY_HELP = "'h'/'1' to Hit or 's'/'2' to Stay"
EXIT_TOKENS = frozenset({"e", "3"})


def parse_move(text: str) -> Move:
    """
    Parse a hit/stay answer.

    '1' or anything starting with 'h' means hit; '2' or anything starting
    with 's' means stay. Case-insensitive, surrounding whitespace ignored.

    Raises:
        InvalidInput: For any other text
    """
    response = text.strip().lower()
    if response == "1" or response.startswith("h"):
        return Move.HIT
    if response == "2" or response.startswith("s"):
        return Move.STAY
    raise InvalidInput(text, expected=HIT_STAY_HELP)


def parse_name(text: str) -> str:
    """
    Validate and normalize a player name.

    Raises:
        EmptyName: If the name is blank
    """
    name = text.strip()
    if not name:
        raise EmptyName(text)
    return name.capitalize()


def wants_exit(text: str) -> bool:
    """Return True when a replay answer asks to quit ('e' or '3')."""
    return text.strip().lower() in EXIT_TOKENS


def wants_rules(text: str) -> bool:
    """Return True when the welcome answer asks to review the rules."""
    return text.strip().lower().startswith("r")

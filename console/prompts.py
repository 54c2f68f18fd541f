"""Prompt loops. Unrecognized answers are reported and asked again."""

import logging

from console.display import TableDisplay
from console.rules_text import RULES_TEXT
from console.terminal import Terminal
from twentyone.errors import EmptyName, InvalidInput
from twentyone.inputs import HIT_STAY_HELP, parse_move, parse_name, wants_exit, wants_rules
from twentyone.participant import Move, Participant

logger = logging.getLogger(__name__)


def welcome(terminal: Terminal) -> bool:
    """
    Greet the player and offer the rules.

    Returns:
        True if the rules were shown
    """
    terminal.write("Hello! Welcome to Twenty-One!")
    terminal.write("Would you like to review the rules before you play?")
    terminal.write("Please input 'r' for review")
    terminal.write("OR \n'Enter' to continue to the game!")
    if not wants_rules(terminal.read()):
        return False
    terminal.write(RULES_TEXT)
    terminal.continue_any_key()
    return True


def ask_name(terminal: Terminal) -> str:
    """Ask until a non-blank name is given."""
    while True:
        terminal.write("What is your name?")
        try:
            name = parse_name(terminal.read())
        except EmptyName:
            logger.debug("Rejected blank name")
            terminal.write("That is not a valid name. Please try again.")
            continue
        terminal.write(f"Welcome, {name}!")
        return name


class MovePrompt:
    """Asks the human for hit or stay. Passed to the engine as its `ask_player`."""

    def __init__(self, terminal: Terminal, display: TableDisplay) -> None:
        self.terminal = terminal
        self.display = display

    def __call__(self, participant: Participant) -> Move:
        self.display.show_decision_table(participant)
        self.terminal.write("Would you like to hit or stay?")
        self.terminal.write(f"Enter {HIT_STAY_HELP}")
        while True:
            try:
                return parse_move(self.terminal.read())
            except InvalidInput as exc:
                logger.debug("%s", exc)
                self.terminal.write(
                    "That is not a valid response, please enter 'h'/'1' or 's'/'2'!"
                )


def ask_replay(terminal: Terminal) -> bool:
    """Return True to play another round. Only 'e' or '3' quits."""
    return not wants_exit(terminal.read())

"""End-to-end sessions through the Application with scripted input."""

import logging
from unittest.mock import patch

import pytest

from config import AppConfig, GameConfig, LogConfig
from console.main import Application, configure_logging, main
from twentyone.game import GameState
from tests.conftest import StackedRandom
from tests.console.conftest import QUIET


def run_app(make_terminal, lines, top):
    app = Application(
        terminal=make_terminal(*lines),
        app_config=AppConfig(display=QUIET),
        rng=StackedRandom(*top),
    )
    assert app.run() == 0
    return app


def test_blackjack_then_exit(make_terminal, output):
    app = run_app(make_terminal, ["", "alice", "", "", "e"], ["KS", "AH", "9C", "7D"])

    assert app.game.is_over
    assert app.game.player.name == "Alice"
    assert app.game.player.score == 1
    assert "Your dealer for today: R2D2" in output.lines
    assert any("Thanks for playing!" in line for line in output.lines)


def test_invalid_move_then_stay(make_terminal, output):
    lines = ["", "bob", "", "what", "s", "", "3"]
    app = run_app(make_terminal, lines, ["10H", "8S", "10C", "5D", "2C"])

    assert app.game.player.score == 1
    assert app.game.dealer.hand.value == 17
    assert "That is not a valid response, please enter 'h'/'1' or 's'/'2'!" in output.lines
    assert any("Bob, you WIN!" in line for line in output.lines)


def test_replay_keeps_score(make_terminal, output):
    lines = ["", "amy", "", "", "", "", "e"]
    app = run_app(make_terminal, lines, ["KS", "AH", "9C", "7D"])

    assert app.game.session.rounds_played == 2
    assert app.game.player.score == 2
    assert any("R2D2 [ 0 ] : Amy [ 2 ]" in line for line in output.lines)


def test_eof_mid_round_says_goodbye(make_terminal, output):
    app = run_app(make_terminal, ["", "amy", ""], ["KS", "AH", "9C", "7D"])

    assert app.game.state == GameState.REVEAL
    assert any("Thanks for playing!" in line for line in output.lines)


def test_eof_at_replay_ends_game(make_terminal, output):
    app = run_app(make_terminal, ["", "amy", "", ""], ["KS", "AH", "9C", "7D"])

    assert app.game.is_over
    assert any("Thanks for playing!" in line for line in output.lines)


def test_eof_before_name(make_terminal, output):
    app = run_app(make_terminal, [""], [])
    assert app.game is None


def test_configure_logging():
    with patch("console.main.logging.basicConfig") as basic_config:
        configure_logging(LogConfig(level="DEBUG"))
    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == "DEBUG"


def test_main_exits_with_run_code():
    with patch("console.main.Application.run", return_value=0), \
            patch("console.main.configure_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 0


def test_rounds_are_logged(make_terminal, caplog):
    with caplog.at_level(logging.INFO, logger="console.main"):
        run_app(make_terminal, ["", "amy", "", "", "e"], ["KS", "AH", "9C", "7D"])
    assert "Round over: win (winner Amy)" in caplog.text


def test_dealer_names_come_from_config(make_terminal, output):
    app = Application(
        terminal=make_terminal("", "amy", "", "", "e"),
        app_config=AppConfig(display=QUIET, game=GameConfig(dealer_names=("Robby", "Bender"))),
        rng=StackedRandom("KS", "AH", "9C", "7D"),
    )
    app.run()

    assert app.game.dealer.name == "Robby"
    assert "Your dealer for today: Robby" in output.lines


def test_debug_forces_debug_level():
    with patch("console.main.logging.basicConfig") as basic_config:
        configure_logging(LogConfig(level="WARNING"), debug=True)
    assert basic_config.call_args.kwargs["level"] == "DEBUG"

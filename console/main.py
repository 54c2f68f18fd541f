"""Main entry point for the terminal Twenty-One game."""

import logging
from random import Random

from config import AppConfig, LogConfig, config
from console.display import TableDisplay
from console.prompts import MovePrompt, ask_name, ask_replay, welcome
from console.terminal import Terminal
from twentyone.game import GameState, Session, TwentyOneGame

logger = logging.getLogger(__name__)


def configure_logging(log_config: LogConfig, debug: bool = False) -> None:
    """Send log records to stderr at the configured level. Debug mode forces DEBUG."""
    level = "DEBUG" if debug else log_config.level
    logging.basicConfig(level=level, format=log_config.format)


class Application:
    """Runs one session: welcome, names, then rounds until the player quits."""

    def __init__(
        self,
        terminal: Terminal | None = None,
        app_config: AppConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        self.config = app_config or config
        self.terminal = terminal or Terminal(settings=self.config.display)
        self.rng = rng or Random(self.config.seed)
        self.game: TwentyOneGame | None = None
        self.display: TableDisplay | None = None

    def setup(self) -> TwentyOneGame:
        """Welcome the player, collect names and build the engine."""
        welcome(self.terminal)
        name = ask_name(self.terminal)

        session = Session.create(
            name,
            dealer_threshold=self.config.game.dealer_threshold,
            dealer_names=self.config.game.dealer_names,
            rng=self.rng,
        )
        self.terminal.write(f"Your dealer for today: {session.dealer.name}")
        self.terminal.continue_any_key()
        self.terminal.clear()

        game = TwentyOneGame(session)
        self.display = TableDisplay(self.terminal, game)
        game.ask_player = MovePrompt(self.terminal, self.display)
        self.game = game
        return game

    def play(self, game: TwentyOneGame) -> None:
        """Play rounds until the replay prompt says exit."""
        while not game.is_over:
            result = game.play_round()
            logger.info("Round over: %s (winner %s)", result.outcome.value, result.winner)
            game.finish(ask_replay(self.terminal))

    def run(self) -> int:
        """Run the session. Returns the process exit code."""
        try:
            game = self.setup()
            self.play(game)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, ending session")
            self._abort()
        return 0

    def _abort(self) -> None:
        """End the session early, still showing the final tally if a game exists."""
        self.terminal.write()
        if self.game is None or self.display is None:
            return
        if self.game.state == GameState.AWAITING_REPLAY:
            self.game.finish(replay=False)
        elif not self.game.is_over:
            self.display.show_goodbye()


def main() -> None:
    """Entry point for the terminal UI."""
    configure_logging(config.log, debug=config.debug)
    raise SystemExit(Application().run())


if __name__ == "__main__":
    main()

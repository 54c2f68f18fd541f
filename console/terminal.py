"""Blocking line input and output for the terminal."""

import logging
import time
from typing import Callable

from config import DisplayConfig, config

logger = logging.getLogger(__name__)

# Erase the screen and home the cursor
CLEAR_SCREEN = "\033[2J\033[H"


class Terminal:
    """
    Input and output collaborator.

    All reads block until the user presses Enter. The underlying
    callables can be swapped out, which is how the tests script a session.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        sleep_fn: Callable[[float], None] = time.sleep,
        settings: DisplayConfig | None = None,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self._sleep = sleep_fn
        self.settings = settings or config.display

    def write(self, text: str = "") -> None:
        self._output(text)

    def read(self, prompt: str = "") -> str:
        """Read one line. EOFError and KeyboardInterrupt propagate."""
        line = self._input(prompt)
        logger.debug("Read %r", line)
        return line

    def center(self, text: str, width: int, fill: str = " ") -> None:
        """Write `text` centered in `width` columns, padded with `fill`."""
        self.write(text.center(width, fill))

    def clear(self) -> None:
        if self.settings.clear_screen:
            self._output(CLEAR_SCREEN)
        self.write()

    def pause(self, long: bool = False) -> None:
        self.write("...Loading....")
        seconds = self.settings.long_pause_seconds if long else self.settings.pause_seconds
        if seconds > 0:
            self._sleep(seconds)

    def continue_any_key(self) -> str:
        self.write("Press 'Enter' to continue.")
        return self.read()

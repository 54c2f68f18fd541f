"""Fixtures for the terminal layer: scripted input, captured output."""

import pytest

from config import DisplayConfig
from console.terminal import Terminal


class ScriptedInput:
    """input() replacement that replays lines, then behaves like Ctrl-D."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class Captured:
    """Collects everything written to the terminal."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.extend(str(text).split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


QUIET = DisplayConfig(pause_seconds=0, long_pause_seconds=0, clear_screen=False)


@pytest.fixture
def output():
    return Captured()


@pytest.fixture
def make_terminal(output):
    """Factory: a terminal that reads the given lines and writes to `output`."""

    def factory(*lines: str) -> Terminal:
        return Terminal(
            input_fn=ScriptedInput(*lines),
            output_fn=output,
            sleep_fn=lambda seconds: None,
            settings=QUIET,
        )

    return factory

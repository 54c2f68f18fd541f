"""Error taxonomy for the Twenty-One engine."""


class TwentyOneError(Exception):
    """Base class for all game errors."""


class InvalidInput(TwentyOneError, ValueError):
    """User typed a token that is not recognized at a decision point."""

    def __init__(self, text: str, expected: str = "") -> None:
        self.text = text
        self.expected = expected
        message = f"Unrecognized input: {text!r}"
        if expected:
            message += f" (expected {expected})"
        super().__init__(message)


class EmptyName(InvalidInput):
    """User supplied a blank or whitespace-only name."""

    def __init__(self, text: str = "") -> None:
        super().__init__(text, expected="a non-empty name")


class ExhaustedDeck(TwentyOneError, IndexError):
    """A card was requested from an empty deck."""

    def __init__(self) -> None:
        super().__init__("Cannot deal from an empty deck")

"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from twentyone.participant import DEALER_NAMES, DEALER_THRESHOLD


def _parse_bool(name: str, default: str) -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _parse_seed() -> int | None:
    """Parse TWENTYONE_SEED; unset or blank means an unseeded shuffle."""
    seed = os.getenv("TWENTYONE_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class DisplayConfig:
    """Terminal presentation configuration."""

    pause_seconds: float = field(
        default_factory=lambda: float(os.getenv("TWENTYONE_PAUSE", "1.5"))
    )
    long_pause_seconds: float = field(
        default_factory=lambda: float(os.getenv("TWENTYONE_LONG_PAUSE", "2.5"))
    )
    clear_screen: bool = field(default_factory=lambda: _parse_bool("TWENTYONE_CLEAR", "true"))


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class GameConfig:
    """Fixed table rules."""

    dealer_threshold: int = DEALER_THRESHOLD
    dealer_names: tuple[str, ...] = DEALER_NAMES


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _parse_bool("DEBUG", "false"))
    seed: int | None = field(default_factory=_parse_seed)

    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LogConfig = field(default_factory=LogConfig)
    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()

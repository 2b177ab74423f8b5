"""Runtime settings read from the environment and an optional .env file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .distractors import MONGOLIAN_ALPHABET

ENV_PREFIX = "VOCABDRILL_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration settings."""

    level: str = "WARNING"
    format: str = "%(levelname)s: %(message)s"
    file: Path | None = None


@dataclass(frozen=True)
class Settings:
    """All runtime settings."""

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    alphabet: tuple[str, ...] = MONGOLIAN_ALPHABET
    clear_screen: bool = True
    seed: int | None = None


def _env(name: str) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_level(raw: str) -> str:
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {raw}")
    return level


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def parse_alphabet(raw: str) -> tuple[str, ...]:
    """Parse an alphabet given as comma-separated letters or one plain string."""
    if "," in raw:
        letters = [item.strip() for item in raw.split(",")]
    else:
        letters = list(raw.replace(" ", ""))
    unique = tuple(dict.fromkeys(letter for letter in letters if letter))
    if not unique:
        raise ValueError("Alphabet must contain at least one letter.")
    return unique


def load_settings(env_file: Path | str | None = None) -> Settings:
    """Build settings from ``VOCABDRILL_*`` variables after loading a .env file.

    Variables already present in the environment take precedence over the file.
    """
    load_dotenv(env_file)

    level = _env("LOG_LEVEL")
    log_file = _env("LOG_FILE")
    logging_settings = LoggingSettings(
        level=_parse_level(level) if level else LoggingSettings.level,
        file=Path(log_file) if log_file else None,
    )

    alphabet = _env("ALPHABET")
    clear_screen = _env("CLEAR_SCREEN")
    seed = _env("SEED")
    if seed is not None:
        try:
            seed_value: int | None = int(seed)
        except ValueError as exc:
            raise ValueError(f"{ENV_PREFIX}SEED must be an integer, got {seed!r}") from exc
    else:
        seed_value = None

    return Settings(
        logging=logging_settings,
        alphabet=parse_alphabet(alphabet) if alphabet else MONGOLIAN_ALPHABET,
        clear_screen=_parse_bool("CLEAR_SCREEN", clear_screen) if clear_screen else True,
        seed=seed_value,
    )

"""Core domain models for vocabulary lessons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MIN_LESSON_NUMBER = 0
MAX_LESSON_NUMBER = 255


class LessonType(IntEnum):
    """Lesson mode, numbered as on the command line."""

    RANDOM = 0
    SPELLING = 1
    MULTIPLE_CHOICE = 2
    HANGMAN = 3


@dataclass(frozen=True)
class LessonEntry:
    """One vocabulary item of a lesson file."""

    lesson_number: int
    word: str
    description: str
    origin_word: str


@dataclass(frozen=True)
class ChoiceSet:
    """Shuffled multiple-choice candidates and the 1-based correct position."""

    choices: tuple[str, ...]
    correct_position: int

    @property
    def correct_word(self) -> str:
        return self.choices[self.correct_position - 1]


@dataclass(frozen=True)
class ParseError:
    """Why a lesson number field could not be used."""

    value: str
    reason: str

    def __str__(self) -> str:
        return f"{self.reason}: {self.value!r}"

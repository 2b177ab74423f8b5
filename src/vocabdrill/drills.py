"""Interactive lesson engines: spelling, multiple choice and hangman."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from .distractors import MONGOLIAN_ALPHABET, build_choice_set
from .models import LessonEntry
from .segmenter import split_chars

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]

QUIT_COMMAND = "quit"
HINT_COMMAND = "hint"
HIDDEN = "_"
SPACE = " "


def _read(input_fn: InputFn, prompt: str) -> str:
    """Read one normalized answer line."""
    return input_fn(prompt).strip().lower()


def _print_found(entry: LessonEntry, print_fn: PrintFn) -> None:
    print_fn(entry.word)
    print_fn(entry.description)
    print_fn(entry.origin_word)


def run_spelling(entry: LessonEntry, input_fn: InputFn = input, print_fn: PrintFn = print) -> bool:
    """Ask for the spelling of ``entry.word`` until it is typed or the user quits.

    ``hint`` shows the description without counting as a guess. Wrong answers
    may be retried without limit.
    """
    target = entry.word.strip().lower()
    print_fn(f"How do you spell {entry.origin_word}?")

    while True:
        answer = _read(input_fn, "Your answer: ")
        if not answer:
            continue
        if answer == HINT_COMMAND:
            print_fn(entry.description)
            continue
        if answer == QUIT_COMMAND:
            logger.debug("Spelling lesson quit for %r", entry.word)
            print_fn(f"The correct spelling is: {entry.word}")
            return False
        if answer == target:
            print_fn(f"Correct! The word is: {entry.word}")
            return True
        print_fn("Incorrect. Try again.")


def run_multiple_choice(
    entry: LessonEntry,
    rng: random.Random,
    alphabet: Sequence[str] = MONGOLIAN_ALPHABET,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> bool:
    """Offer four spellings of ``entry.word``; only the first valid pick counts."""
    try:
        choice_set = build_choice_set(entry.word, alphabet, rng)
    except ValueError as exc:
        logger.warning("%s", exc)
        print_fn(f"Cannot build choices for {entry.word!r} with the configured alphabet.")
        print_fn(f"The word was: {entry.word}")
        return False
    for position, choice in enumerate(choice_set.choices, start=1):
        print_fn(f"{position}. {choice}")

    last = len(choice_set.choices)
    while True:
        print_fn(f"\nHow do you spell {entry.origin_word}?")
        answer = _read(input_fn, f"Enter your choice (1-{last}): ")
        if not answer:
            continue
        if answer == QUIT_COMMAND:
            logger.debug("Multiple-choice lesson quit for %r", entry.word)
            print_fn(f"The word was: {entry.word}")
            return False
        if not answer.isdecimal():
            print_fn("Invalid input! Please enter a number.")
            continue
        choice = int(answer)
        if not (1 <= choice <= last):
            print_fn(f"Invalid input! Please enter a number between 1 and {last}.")
            continue

        if choice == choice_set.correct_position:
            print_fn("Correct! You found the word!")
            _print_found(entry, print_fn)
            return True
        print_fn(f"Wrong! The correct choice was {choice_set.correct_position}!")
        print_fn("The word was:")
        _print_found(entry, print_fn)
        return False


class HangmanBoard:
    """Reveal state of one hangman word, one slot per character."""

    def __init__(self, word: str) -> None:
        self.target = word.lower()
        self.answer = self.target.strip()
        self._target_chars = split_chars(self.target)
        self._slots = [SPACE if char == SPACE else HIDDEN for char in self._target_chars]

    def guess_string(self) -> str:
        return "".join(self._slots)

    @property
    def blanks_remaining(self) -> int:
        return self._slots.count(HIDDEN)

    @property
    def solved(self) -> bool:
        return self.blanks_remaining == 0

    def reveal(self, token: str) -> bool:
        """Reveal every slot holding ``token``; return whether any matched."""
        found = False
        for index, char in enumerate(self._target_chars):
            if char == token:
                self._slots[index] = char
                found = True
        return found


def run_hangman(entry: LessonEntry, input_fn: InputFn = input, print_fn: PrintFn = print) -> bool:
    """Guess ``entry.word`` letter by letter, or all at once."""
    board = HangmanBoard(entry.word)

    while not board.solved:
        print_fn(f"\nGuess the word!\n Current: {board.guess_string()}")
        guess = _read(input_fn, "Enter a letter or a full word: ")
        if not guess:
            continue
        if guess == QUIT_COMMAND:
            logger.debug("Hangman lesson quit for %r", entry.word)
            print_fn(f"The word was: {entry.word}")
            return False
        if guess == board.answer:
            break
        if not board.reveal(guess):
            print_fn("Wrong!")

    print_fn("\nYou found the word!")
    _print_found(entry, print_fn)
    return True

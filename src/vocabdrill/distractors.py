"""Build plausible wrong answers for multiple-choice lessons."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from .models import ChoiceSet
from .segmenter import split_chars

logger = logging.getLogger(__name__)

MONGOLIAN_ALPHABET: tuple[str, ...] = (
    "а", "б", "в", "г", "д", "е", "ё", "ж", "з", "и", "й", "к",
    "л", "м", "н", "о", "ө", "п", "р", "с", "т", "у", "ү", "ф",
    "х", "ц", "ч", "ш", "щ", "ъ", "ы", "ь", "э", "ю", "я",
)

DISTRACTOR_COUNT = 3
MIN_CHANGES = 2
MAX_CHANGES = 4
MAX_ATTEMPTS = 50


def _substitutable(char: str, alphabet: Sequence[str]) -> bool:
    """Return whether ``char`` may be replaced by some alphabet letter."""
    return char != " " and any(letter != char for letter in alphabet)


def _pick_letter(original: str, alphabet: Sequence[str], rng: random.Random) -> str:
    """Pick a random alphabet letter different from ``original``."""
    while True:
        letter = rng.choice(alphabet)
        if letter != original:
            return letter


def _mutate(chars: list[str], alphabet: Sequence[str], rng: random.Random) -> str:
    """Apply one round of random substitutions to the segmented word."""
    upper = min(MAX_CHANGES, len(chars))
    changes = rng.randint(min(MIN_CHANGES, upper), upper)
    positions = list(range(len(chars)))
    rng.shuffle(positions)

    incorrect = "".join(chars)
    for position in positions:
        if changes == 0:
            break
        original = chars[position]
        if not _substitutable(original, alphabet):
            continue
        # First occurrence by content in the working copy, not the sampled index.
        index = incorrect.find(original)
        if index == -1:
            continue
        replacement = _pick_letter(original, alphabet, rng)
        incorrect = incorrect[:index] + replacement + incorrect[index + len(original) :]
        changes -= 1
    return incorrect


def count_differences(left: str, right: str) -> int:
    """Count character positions where two words differ."""
    left_chars = split_chars(left)
    right_chars = split_chars(right)
    differing = sum(1 for a, b in zip(left_chars, right_chars) if a != b)
    return differing + abs(len(left_chars) - len(right_chars))


def generate_distractor(correct_word: str, alphabet: Sequence[str], rng: random.Random) -> str:
    """Return a misspelling of ``correct_word`` built from ``alphabet`` letters.

    Between two and four characters (bounded by the word length) are replaced.
    The result always differs from ``correct_word``.
    """
    chars = split_chars(correct_word)
    substitutable = sum(1 for char in chars if _substitutable(char, alphabet))
    if substitutable == 0:
        raise ValueError(f"Cannot build a distractor for {correct_word!r} from the given alphabet.")
    required = min(MIN_CHANGES, substitutable)

    fallback: str | None = None
    for _ in range(MAX_ATTEMPTS):
        candidate = _mutate(chars, alphabet, rng)
        differences = count_differences(correct_word, candidate)
        if differences >= required:
            return candidate
        if differences > 0 and fallback is None:
            fallback = candidate

    if fallback is None:
        raise ValueError(f"Could not build a distractor for {correct_word!r}.")
    logger.debug("Using single-change distractor for %r", correct_word)
    return fallback


def build_choice_set(correct_word: str, alphabet: Sequence[str], rng: random.Random) -> ChoiceSet:
    """Shuffle the correct word with independently generated distractors.

    Distractors are not deduplicated against each other.
    """
    choices = [correct_word]
    choices.extend(generate_distractor(correct_word, alphabet, rng) for _ in range(DISTRACTOR_COUNT))
    rng.shuffle(choices)
    return ChoiceSet(choices=tuple(choices), correct_position=choices.index(correct_word) + 1)

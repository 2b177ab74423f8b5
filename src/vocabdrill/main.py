"""CLI entrypoint for vocabulary lessons."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .config import Settings, load_settings
from .content_loader import load, parse_lesson_number
from .drills import InputFn, PrintFn, run_hangman, run_multiple_choice, run_spelling
from .logging_config import setup_logging
from .models import LessonEntry, LessonType, ParseError

logger = logging.getLogger(__name__)

ClearFn = Callable[[], None]
PLAYABLE_TYPES = (LessonType.SPELLING, LessonType.MULTIPLE_CHOICE, LessonType.HANGMAN)


def clear_screen() -> None:
    """Clear the terminal screen."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def _no_clear() -> None:
    return None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vocabdrill", description="Vocabulary lessons in the terminal")
    parser.add_argument("path", help="lesson file, one 'number;word;description;origin word' entry per line")
    parser.add_argument("lesson_number", nargs="?", help="only use entries of this lesson (0-255)")
    parser.add_argument(
        "lesson_type",
        nargs="?",
        help="0 random, 1 spelling, 2 multiple choice, 3 hangman (default: random)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable session")
    return parser


def _parse_lesson_type(raw: str | None) -> LessonType | None:
    """Parse the lesson type argument; values outside 0-3 mean random."""
    if raw is None:
        return LessonType.RANDOM
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if value not in {item.value for item in LessonType}:
        return LessonType.RANDOM
    return LessonType(value)


def choose_lesson_type(lesson_type: LessonType, rng: random.Random) -> LessonType:
    """Resolve ``RANDOM`` to one of the playable lesson types."""
    if lesson_type is LessonType.RANDOM:
        return rng.choice(PLAYABLE_TYPES)
    return lesson_type


def recap(lessons: Sequence[LessonEntry], print_fn: PrintFn) -> None:
    """Print every entry before the lesson starts."""
    for lesson in lessons:
        print_fn(f"{lesson.word} ({lesson.description}) - {lesson.origin_word}")


def _serve(
    lessons: list[LessonEntry],
    lesson_type: LessonType,
    rng: random.Random,
    alphabet: Sequence[str],
    input_fn: InputFn,
    print_fn: PrintFn,
    clear_fn: ClearFn,
) -> None:
    """Dispatch shuffled lessons to the selected engine."""
    if lesson_type is LessonType.SPELLING:
        for lesson in lessons:
            run_spelling(lesson, input_fn=input_fn, print_fn=print_fn)
            input_fn("\nPress Enter to continue...\n")
            clear_fn()
    elif lesson_type is LessonType.MULTIPLE_CHOICE:
        run_multiple_choice(lessons[0], rng, alphabet, input_fn=input_fn, print_fn=print_fn)
    elif lesson_type is LessonType.HANGMAN:
        run_hangman(lessons[0], input_fn=input_fn, print_fn=print_fn)
    else:
        raise ValueError(f"Unplayable lesson type: {lesson_type!r}")


def run(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    clear_fn: ClearFn | None = None,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> int:
    """Run the CLI application and return its exit status."""
    if settings is None:
        settings = Settings()
    if clear_fn is None:
        clear_fn = clear_screen if settings.clear_screen else _no_clear

    try:
        args = _parser().parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    path = Path(args.path)
    if not path.exists():
        print_fn(f"File does not exist: {path}")
        return 1

    lesson_filter: int | None = None
    if args.lesson_number is not None:
        parsed = parse_lesson_number(args.lesson_number)
        if isinstance(parsed, ParseError):
            print_fn(f"Error: {parsed}")
            return 1
        lesson_filter = parsed
        print_fn(f"Preparing Lesson No {lesson_filter} ...")

    requested_type = _parse_lesson_type(args.lesson_type)
    if requested_type is None:
        print_fn(f"Error: lesson type must be a number, got {args.lesson_type!r}")
        return 1

    if rng is None:
        seed = args.seed if args.seed is not None else settings.seed
        rng = random.Random(seed)
    lesson_type = choose_lesson_type(requested_type, rng)
    logger.debug("Selected lesson type %s", lesson_type.name)

    lessons = load(path, lesson_filter)
    if not lessons:
        print_fn("No lessons found or file is empty.")
        return 1

    try:
        print_fn("\nRecap\n")
        recap(lessons, print_fn)
        input_fn("\nPress Enter to start the lesson...\n")
        clear_fn()

        print_fn("\nStarting lesson...\n")
        rng.shuffle(lessons)
        _serve(lessons, lesson_type, rng, settings.alphabet, input_fn, print_fn, clear_fn)
        input_fn("\nPress Enter to exit...\n")
    except (EOFError, KeyboardInterrupt):
        print_fn("\nGoodbye.")
    return 0


def main_entry() -> None:
    """Console script entrypoint."""
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    setup_logging(settings.logging)
    raise SystemExit(run(settings=settings))


if __name__ == "__main__":  # pragma: no cover
    main_entry()

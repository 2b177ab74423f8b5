"""Load lesson entries from `;`-delimited lesson files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .models import MAX_LESSON_NUMBER, MIN_LESSON_NUMBER, LessonEntry, ParseError

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ";"
MIN_FIELDS = 4

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_lesson_number(text: str) -> int | ParseError:
    """Parse a lesson number in [0, 255], returning a ``ParseError`` on failure."""
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        return ParseError(value=text, reason="Lesson number is not an integer")
    number = int(stripped)
    if not (MIN_LESSON_NUMBER <= number <= MAX_LESSON_NUMBER):
        return ParseError(
            value=text,
            reason=f"Lesson number must be between {MIN_LESSON_NUMBER} and {MAX_LESSON_NUMBER}",
        )
    return number


def split_fields(line: str) -> list[str]:
    """Split one lesson line on the field delimiter, keeping empty fields."""
    return line.split(FIELD_DELIMITER)


def _entry_from_line(line: str, line_number: int, lesson_filter: int | None) -> LessonEntry | None:
    """Build an entry from one line, or None when the line is skipped."""
    fields = split_fields(line)
    if len(fields) < MIN_FIELDS:
        logger.warning("Skipping line %d with invalid format: %s", line_number, line)
        return None

    lesson_number = parse_lesson_number(fields[0])
    if isinstance(lesson_number, ParseError):
        logger.warning("Skipping line %d, %s: %s", line_number, lesson_number, line)
        return None
    if lesson_filter is not None and lesson_number != lesson_filter:
        return None

    word, description, origin_word = fields[1], fields[2], fields[3]
    if not word.strip():
        logger.warning("Skipping line %d with empty word: %s", line_number, line)
        return None

    return LessonEntry(
        lesson_number=lesson_number,
        word=word,
        description=description,
        origin_word=origin_word,
    )


def load(path: Path | str, lesson_filter: int | None = None) -> list[LessonEntry]:
    """Load lesson entries in file order.

    Malformed lines are skipped with a warning. A file that cannot be opened
    yields an empty list, which callers report as "no lessons found".
    """
    if lesson_filter is not None and not (MIN_LESSON_NUMBER <= lesson_filter <= MAX_LESSON_NUMBER):
        raise ValueError(f"Lesson filter out of range: {lesson_filter}")

    file_path = Path(path)
    try:
        handle = file_path.open(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        logger.warning("Could not open lesson file %s: %s", file_path, exc)
        return []

    entries: list[LessonEntry] = []
    with handle:
        for line_number, raw_line in enumerate(handle, start=1):
            entry = _entry_from_line(raw_line.rstrip("\r\n"), line_number, lesson_filter)
            if entry is not None:
                entries.append(entry)
    logger.debug("Loaded %d lesson entries from %s", len(entries), file_path)
    return entries

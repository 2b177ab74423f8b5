import logging
from pathlib import Path

import pytest

from vocabdrill.content_loader import load, parse_lesson_number, split_fields
from vocabdrill.models import LessonEntry, ParseError


def test_load_skips_malformed_line(sample_file: Path) -> None:
    lessons = load(sample_file)
    assert lessons == [
        LessonEntry(lesson_number=1, word="apple", description="fruit", origin_word="alim"),
        LessonEntry(lesson_number=2, word="tree", description="plant", origin_word="mod"),
    ]


def test_load_with_filter(sample_file: Path) -> None:
    lessons = load(sample_file, 1)
    assert [lesson.word for lesson in lessons] == ["apple"]


def test_load_filter_without_matches(sample_file: Path) -> None:
    assert load(sample_file, 7) == []


def test_load_is_repeatable(sample_file: Path) -> None:
    assert load(sample_file, 2) == load(sample_file, 2)
    assert load(sample_file) == load(sample_file)


def test_missing_file_returns_empty(tmp_path: Path) -> None:
    assert load(tmp_path / "missing.txt") == []


def test_directory_returns_empty(tmp_path: Path) -> None:
    assert load(tmp_path) == []


def test_malformed_lines_are_warned(write_lessons, caplog: pytest.LogCaptureFixture) -> None:
    path = write_lessons(["bad;line", "x;word;desc;origin", "300;word;desc;origin", "-1;word;desc;origin"])
    with caplog.at_level(logging.WARNING, logger="vocabdrill.content_loader"):
        assert load(path) == []
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 4
    assert "line 1 with invalid format" in messages[0]
    assert "not an integer" in messages[1]
    assert "between 0 and 255" in messages[2]
    assert "between 0 and 255" in messages[3]


def test_filtered_lines_are_not_warned(sample_file: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="vocabdrill.content_loader"):
        load(sample_file, 2)
    assert len(caplog.records) == 1
    assert "bad;line" in caplog.records[0].getMessage()


def test_fields_are_kept_verbatim(write_lessons) -> None:
    path = write_lessons([" 3 ; сайн байна уу ;; hello;extra"])
    (lesson,) = load(path)
    assert lesson.lesson_number == 3
    assert lesson.word == " сайн байна уу "
    assert lesson.description == ""
    assert lesson.origin_word == " hello"


def test_empty_word_is_skipped(write_lessons, caplog: pytest.LogCaptureFixture) -> None:
    path = write_lessons(["1;;desc;origin", "1;ok;desc;origin"])
    with caplog.at_level(logging.WARNING, logger="vocabdrill.content_loader"):
        lessons = load(path)
    assert [lesson.word for lesson in lessons] == ["ok"]
    assert "empty word" in caplog.records[0].getMessage()


def test_crlf_and_bom_are_handled(tmp_path: Path) -> None:
    path = tmp_path / "windows.txt"
    path.write_bytes("\ufeff0;ном;book;book\r\n1;мод;tree;tree\r\n".encode("utf-8"))
    lessons = load(path)
    assert [(lesson.lesson_number, lesson.word, lesson.origin_word) for lesson in lessons] == [
        (0, "ном", "book"),
        (1, "мод", "tree"),
    ]


def test_load_rejects_out_of_range_filter(sample_file: Path) -> None:
    with pytest.raises(ValueError):
        load(sample_file, 256)


def test_parse_lesson_number() -> None:
    assert parse_lesson_number("0") == 0
    assert parse_lesson_number(" 255 ") == 255
    assert parse_lesson_number("+7") == 7
    assert isinstance(parse_lesson_number("256"), ParseError)
    assert isinstance(parse_lesson_number("-1"), ParseError)
    assert isinstance(parse_lesson_number("abc"), ParseError)
    assert isinstance(parse_lesson_number(""), ParseError)
    assert isinstance(parse_lesson_number("1_0"), ParseError)


def test_parse_error_message() -> None:
    error = parse_lesson_number("x")
    assert isinstance(error, ParseError)
    assert str(error) == "Lesson number is not an integer: 'x'"


def test_split_fields_keeps_empty_fields() -> None:
    assert split_fields("1;;;") == ["1", "", "", ""]
    assert split_fields("") == [""]


def test_whitespace_word_is_skipped(write_lessons, caplog: pytest.LogCaptureFixture) -> None:
    path = write_lessons(["1;   ;blank;blank", "1; ном; book; book"])
    with caplog.at_level(logging.WARNING, logger="vocabdrill.content_loader"):
        lessons = load(path)
    assert [lesson.word for lesson in lessons] == [" ном"]
    assert "empty word" in caplog.records[0].getMessage()

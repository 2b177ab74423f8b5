from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

SAMPLE_LINES = ["1;apple;fruit;alim", "bad;line", "2;tree;plant;mod"]


@pytest.fixture
def write_lessons(tmp_path: Path) -> Callable[..., Path]:
    """Write lesson lines to a UTF-8 file under the test's temporary directory."""

    def _write(lines: list[str], name: str = "lessons.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_file(write_lessons: Callable[..., Path]) -> Path:
    return write_lessons(SAMPLE_LINES)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep VOCABDRILL_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("VOCABDRILL_"):
            monkeypatch.delenv(name)
    yield

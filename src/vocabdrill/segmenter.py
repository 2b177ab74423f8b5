"""Split text into user-perceived characters using UTF-8 leading bytes."""

from __future__ import annotations

from collections.abc import Iterator


def _sequence_length(lead: int) -> int:
    """Return byte length announced by a UTF-8 leading byte, 1 when invalid."""
    if lead & 0x80 == 0x00:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    # Continuation or otherwise malformed byte: consume it on its own.
    return 1


def iter_char_bytes(data: bytes) -> Iterator[bytes]:
    """Yield one chunk of ``data`` per encoded character.

    Malformed input never raises. An invalid leading byte is yielded as a
    single-byte chunk and a sequence truncated by the end of ``data`` is
    yielded as whatever bytes remain.
    """
    index = 0
    size = len(data)
    while index < size:
        length = _sequence_length(data[index])
        yield data[index : index + length]
        index += length


def split_chars(text: str) -> list[str]:
    """Split ``text`` into its characters."""
    encoded = text.encode("utf-8", "surrogateescape")
    return [chunk.decode("utf-8", "surrogateescape") for chunk in iter_char_bytes(encoded)]

"""Conversions between editor positions and byte offsets.

Character offsets are treated as byte offsets into the UTF-8 encoded text.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A zero-based line and character position."""

    line: int = 0
    character: int = 0


@dataclass(frozen=True)
class Range:
    """A span between two positions."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)


def _as_bytes(content: bytes | str) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


def position_to_byte(content: bytes | str, position: Position) -> int:
    """Convert ``position`` to a byte offset into ``content``.

    Lines past the end clamp to the end of the content; characters past the
    end of a line clamp to the end of that line.
    """
    data = _as_bytes(content)
    offset = 0
    for _ in range(position.line):
        newline = data.find(b"\n", offset)
        if newline < 0:
            return len(data)
        offset = newline + 1
    line_end = data.find(b"\n", offset)
    if line_end < 0:
        line_end = len(data)
    return offset + max(0, min(position.character, line_end - offset))


def byte_offset_to_position(content: bytes | str, offset: int) -> Position:
    """Convert a byte offset into ``content`` to a position (inverse of :func:`position_to_byte`)."""
    data = _as_bytes(content)
    end = max(0, min(offset, len(data)))
    prefix = data[:end]
    line = prefix.count(b"\n")
    line_start = prefix.rfind(b"\n") + 1
    return Position(line=line, character=end - line_start)
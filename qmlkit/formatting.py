"""Whitespace-only QML formatting: re-indentation by brace depth."""

from __future__ import annotations

from dataclasses import dataclass

from qmlkit.positions import Position, Range, byte_offset_to_position

_QUOTES = "\"'`"


@dataclass(frozen=True)
class FormattingOptions:
    """Indentation settings supplied by the editor."""

    tab_size: int = 4
    insert_spaces: bool = True


@dataclass(frozen=True)
class TextEdit:
    """Replace the text in ``range`` with ``new_text``."""

    range: Range
    new_text: str


@dataclass
class ScanState:
    """Tracks string and comment state across lines so their braces are ignored."""

    in_line_comment: bool = False
    in_block_comment: bool = False
    in_string: str = ""
    escape: bool = False

    def scan_line(self, line: str, depth: int) -> int:
        """Return ``depth`` adjusted for the brackets that ``line`` opens and closes."""
        self.in_line_comment = False
        i = 0
        length = len(line)
        while i < length:
            c = line[i]
            nxt = line[i + 1] if i + 1 < length else ""
            i += 1
            if self.escape:
                self.escape = False
                continue
            if self.in_block_comment:
                if c == "*" and nxt == "/":
                    self.in_block_comment = False
                    i += 1
                continue
            if self.in_line_comment:
                continue
            if self.in_string:
                if c == "\\":
                    self.escape = True
                elif c == self.in_string:
                    self.in_string = ""
                continue
            if c == "/":
                if nxt == "/":
                    self.in_line_comment = True
                    i += 1
                elif nxt == "*":
                    self.in_block_comment = True
                    i += 1
            elif c in _QUOTES:
                self.in_string = c
            elif c in "{(":
                depth += 1
            elif c in "})":
                depth -= 1
        return depth


def indent_unit(options: FormattingOptions) -> str:
    """The string used for one level of indentation."""
    if not options.insert_spaces:
        return "\t"
    size = options.tab_size if options.tab_size > 0 else 4
    return " " * size


def count_leading_close(s: str) -> int:
    """Count the ``}`` and ``)`` characters that lead ``s``."""
    return len(s) - len(s.lstrip("})"))


def format_qml(text: str, options: FormattingOptions) -> str:
    """Re-indent ``text`` by brace depth, trim trailing space and collapse blank runs."""
    unit = indent_unit(options)
    state = ScanState()
    depth = 0
    infos: list[tuple[str, int]] = []
    for raw in text.split("\n"):
        stripped = raw.strip()
        infos.append((stripped, max(depth - count_leading_close(stripped), 0)))
        depth = max(state.scan_line(raw, depth), 0)

    parts: list[str] = []
    prev_blank = False
    for index, (stripped, indent) in enumerate(infos):
        if not stripped:
            if prev_blank or index == 0:
                continue
            parts.append("\n")
            prev_blank = True
            continue
        parts.append(unit * indent + stripped + "\n")
        prev_blank = False

    out = "".join(parts).rstrip("\n") + "\n"
    if not out.strip():
        return ""
    return out


def format_document(text: str, options: FormattingOptions) -> list[TextEdit]:
    """Edits that format the whole document: empty if it is already formatted."""
    formatted = format_qml(text, options)
    if formatted == text:
        return []
    content = text.encode("utf-8")
    end = byte_offset_to_position(content, len(content))
    return [TextEdit(Range(Position(0, 0), end), formatted)]


def format_range(
    text: str, start_line: int, end_line: int, options: FormattingOptions
) -> list[TextEdit]:
    """Edits that format whole lines ``start_line`` through ``end_line``."""
    lines = text.split("\n")
    if start_line >= len(lines):
        return []
    end_line = min(end_line, len(lines) - 1)
    original = "".join(line + "\n" for line in lines[start_line : end_line + 1])
    formatted = format_qml(original, options)
    if formatted == original:
        return []
    return [TextEdit(Range(Position(start_line, 0), Position(end_line + 1, 0)), formatted)]
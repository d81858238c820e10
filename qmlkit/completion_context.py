"""Text-level heuristics for deciding what kind of completion fits the cursor.

These work on raw text rather than a parse tree, because the tree is often
unusable while the user is in the middle of typing.
"""

from __future__ import annotations

import enum
import string

_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_$")
_SPACE_CHARS = frozenset(" \t\n\r")
_QUOTES = frozenset("\"'`")


class CompletionContext(enum.Enum):
    """Where on a line the cursor sits, as far as completion is concerned."""

    DEFAULT = 0
    IMPORT = 1
    TYPE_NAME = 2
    PROPERTY = 3
    ID = 4
    AFTER_COLON = 5


def _as_byte_text(content: bytes | str) -> str:
    """Map content to a string whose indexes are byte offsets."""
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    return data.decode("latin-1")


def _is_ident_char(ch: str) -> bool:
    return ch in _IDENT_CHARS


def detect_completion_context(text: str, pos: int) -> CompletionContext:
    """Classify the cursor at ``pos`` within the line ``text``."""
    pos = max(0, min(pos, len(text)))
    before = text[:pos]

    last = before.rstrip(" \t")[-1:]
    if last == ".":
        return CompletionContext.PROPERTY
    if last == ":":
        return CompletionContext.AFTER_COLON

    trimmed = before.lstrip(" \t")
    if not trimmed:
        return CompletionContext.DEFAULT
    if has_word_prefix(trimmed, "import"):
        return CompletionContext.IMPORT
    if is_upper_case(trimmed):
        return CompletionContext.TYPE_NAME
    return CompletionContext.DEFAULT


def has_word_prefix(s: str, word: str) -> bool:
    """True if ``s`` starts with ``word`` followed by a space, a tab or nothing."""
    if not s.startswith(word):
        return False
    rest = s[len(word):]
    return not rest or rest[0] in " \t"


def is_upper_case(s: str) -> bool:
    """True if ``s`` is non-empty and holds no ASCII lower-case letter."""
    return bool(s) and not any("a" <= c <= "z" for c in s)


def open_brace_stack_before(content: bytes | str, end: int) -> list[int]:
    """Byte offsets of ``{`` in ``content[:end]`` not yet closed by ``}``.

    Braces inside string literals and comments are ignored.
    """
    data = _as_byte_text(content)
    end = max(0, min(end, len(data)))
    stack: list[int] = []
    in_line_comment = False
    in_block_comment = False
    quote = ""
    i = 0
    while i < end:
        c = data[i]
        nxt = data[i + 1] if i + 1 < end else ""
        if in_line_comment:
            if c == "\n":
                in_line_comment = False
        elif in_block_comment:
            if c == "*" and nxt == "/":
                in_block_comment = False
                i += 1
        elif quote:
            if c == "\\" and nxt:
                i += 2
                continue
            if c == quote:
                quote = ""
        elif c in _QUOTES:
            quote = c
        elif c == "/":
            if nxt == "/":
                in_line_comment = True
                i += 1
            elif nxt == "*":
                in_block_comment = True
                i += 1
        elif c == "{":
            stack.append(i)
        elif c == "}" and stack:
            stack.pop()
        i += 1
    return stack


def enclosing_type_from_text(content: bytes | str, end: int) -> str:
    """Type name before the innermost unclosed ``{`` ahead of ``end``, or ``""``."""
    stack = open_brace_stack_before(content, end)
    if not stack:
        return ""
    return ident_before(content, stack[-1])


def ident_before(content: bytes | str, pos: int) -> str:
    """The identifier-like token right before byte offset ``pos``, skipping whitespace.

    Dotted names yield their last segment, so ``QtQuick.Window`` gives ``Window``.
    """
    data = _as_byte_text(content)
    i = min(pos, len(data)) - 1
    while i >= 0 and data[i] in _SPACE_CHARS:
        i -= 1
    end = i + 1
    while i >= 0 and (_is_ident_char(data[i]) or data[i] == "."):
        i -= 1
    start = i + 1
    if start >= end:
        return ""
    return last_dotted_segment(data[start:end])


def last_dotted_segment(s: str) -> str:
    """The part of ``s`` after its last dot, or ``s`` itself."""
    return s.rpartition(".")[2]


def identifier_before_dot(text: str, pos: int) -> str:
    """The identifier directly before a ``.`` at the cursor, or ``""``.

    Multi-level chains such as ``anchors.fill.`` are rejected.
    """
    i = min(pos, len(text)) - 1
    while i >= 0 and text[i] in _SPACE_CHARS:
        i -= 1
    if i < 0 or text[i] != ".":
        return ""
    i -= 1
    end = i + 1
    while i >= 0 and _is_ident_char(text[i]):
        i -= 1
    start = i + 1
    if start >= end:
        return ""
    if start > 0 and text[start - 1] == ".":
        return ""
    return text[start:end]
"""Hand-written external scanner for the QML/JavaScript grammar.

The scanner recognises the tokens a context-free grammar cannot: automatic
semicolons, template-string chunks, the ternary ``?``, HTML-style comments
and JSX text.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable

EOF = "\0"
"""What :meth:`StringLexer.lookahead` returns once the input is exhausted."""

_LINE_SEPARATORS = ("\u2028", "\u2029")
_NO_SEMICOLON_BEFORE = "`,.;*%><=?^|&/:"


class ExternalToken(enum.IntEnum):
    """Indexes of the external tokens the parser may ask for."""

    AUTO_SEMICOLON = 0
    TEMPLATE_CHARS = 1
    TERNARY_QMARK = 2
    HTML_COMMENT = 3
    LOGICAL_OR = 4
    ESCAPE_SEQUENCE = 5
    REGEX_PATTERN = 6
    JSX_TEXT = 7
    FUNCTION_SIGNATURE_AUTO_SEMICOLON = 8
    ERROR_RECOVERY = 9


class ResultSymbol(enum.IntEnum):
    """Grammar symbols the scanner reports for a recognised token."""

    AUTO_SEMICOLON = 169
    TEMPLATE_CHARS = 170
    TERNARY_QMARK = 171
    HTML_COMMENT = 172
    JSX_TEXT = 173
    FUNCTION_SIGNATURE_AUTO_SEMICOLON = 174


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in "\x1c\x1d\x1e\x1f"


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch.isdecimal()


def is_identifier_char(ch: str) -> bool:
    """True for characters that may appear inside a JavaScript identifier."""
    return _is_letter(ch) or _is_digit(ch) or ch in ("_", "$")


class StringLexer:
    """A character cursor over a string, in the shape the scanner expects."""

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position
        self.token_start = position
        self.token_end: int | None = None
        self.result_symbol: ResultSymbol | None = None
        self._consumed = False

    def lookahead(self) -> str:
        """The current character, or :data:`EOF` at the end of the input."""
        if self.position >= len(self.text):
            return EOF
        return self.text[self.position]

    def advance(self, skip: bool) -> None:
        """Move past the current character; ``skip`` marks it as not part of the token."""
        if self.position >= len(self.text):
            return
        self.position += 1
        if skip and not self._consumed:
            self.token_start = self.position
        elif not skip:
            self._consumed = True

    def mark_end(self) -> None:
        """Record the current position as the end of the token."""
        self.token_end = self.position

    @property
    def token(self) -> str:
        """The text of the token recognised so far."""
        end = self.position if self.token_end is None else self.token_end
        return self.text[self.token_start:max(end, self.token_start)]


class QmljsScanner:
    """Stateless external scanner; :meth:`scan` recognises one token."""

    def scan(self, lexer: StringLexer, valid_symbols: Iterable[int]) -> bool:
        """Try to recognise one of the ``valid_symbols`` at the lexer's position."""
        valid = frozenset(int(token) for token in valid_symbols)
        T = ExternalToken

        if T.TEMPLATE_CHARS in valid:
            if T.AUTO_SEMICOLON in valid:
                return False
            return _scan_template_chars(lexer)

        prefer_semicolon = _prefer_auto_semicolon_over_jsx_text(lexer, valid)

        if T.JSX_TEXT in valid and not prefer_semicolon:
            if _scan_jsx_text(lexer):
                return True

        if T.AUTO_SEMICOLON in valid or T.FUNCTION_SIGNATURE_AUTO_SEMICOLON in valid:
            found, scanned_comment = _scan_auto_semicolon(lexer, valid)
            if not found and not scanned_comment:
                if T.TERNARY_QMARK in valid and lexer.lookahead() == "?":
                    return _scan_ternary_qmark(lexer)
                if prefer_semicolon and T.JSX_TEXT in valid:
                    return _scan_jsx_text(lexer)
            return found

        if T.JSX_TEXT in valid and prefer_semicolon:
            return _scan_jsx_text(lexer)

        if T.TERNARY_QMARK in valid:
            return _scan_ternary_qmark(lexer)

        if (
            T.HTML_COMMENT in valid
            and T.LOGICAL_OR not in valid
            and T.ESCAPE_SEQUENCE not in valid
            and T.REGEX_PATTERN not in valid
        ):
            return _scan_closing_comment(lexer)

        return False


def _scan_template_chars(lexer: StringLexer) -> bool:
    lexer.result_symbol = ResultSymbol.TEMPLATE_CHARS
    has_content = False
    while True:
        lexer.mark_end()
        ch = lexer.lookahead()
        if ch == "`":
            return has_content
        if ch == EOF:
            return False
        if ch == "$":
            lexer.advance(False)
            if lexer.lookahead() == "{":
                return has_content
        elif ch == "\\":
            return has_content
        else:
            lexer.advance(False)
            has_content = True


def _scan_auto_semicolon(lexer: StringLexer, valid: frozenset[int]) -> tuple[bool, bool]:
    """Return whether a semicolon was inserted and whether a line comment was crossed."""
    T = ExternalToken
    lexer.result_symbol = ResultSymbol.AUTO_SEMICOLON
    lexer.mark_end()

    while True:
        ch = lexer.lookahead()
        if ch == EOF:
            return True, False
        if ch == "}":
            lexer.advance(True)
            while _is_space(lexer.lookahead()):
                lexer.advance(True)
            if lexer.lookahead() == ":":
                return T.LOGICAL_OR in valid, False
            if T.JSX_TEXT in valid:
                return False, False
            if _looks_like_jsx_attribute_continuation(lexer):
                return False, False
            following = lexer.lookahead()
            if following == ">":
                return False, False
            if following == "/":
                lexer.advance(True)
                return lexer.lookahead() != ">", False
            if following == "<":
                lexer.advance(True)
                return lexer.lookahead() != "/", False
            return True, False
        if not _is_space(ch):
            return False, False
        if ch == "\n":
            break
        lexer.advance(True)

    lexer.advance(True)

    ok, scanned_comment = _scan_whitespace_and_comments(lexer)
    if not ok:
        return False, scanned_comment

    ch = lexer.lookahead()
    if ch != EOF and ch in _NO_SEMICOLON_BEFORE:
        return False, scanned_comment
    if ch == "{":
        if T.FUNCTION_SIGNATURE_AUTO_SEMICOLON in valid:
            return False, scanned_comment
    elif ch in ("(", "["):
        if T.LOGICAL_OR in valid:
            return False, scanned_comment
    elif ch == "+":
        lexer.advance(True)
        return lexer.lookahead() == "+", scanned_comment
    elif ch == "-":
        lexer.advance(True)
        return lexer.lookahead() == "-", scanned_comment
    elif ch == "!":
        lexer.advance(True)
        return lexer.lookahead() != "=", scanned_comment
    elif ch == "i":
        lexer.advance(True)
        if lexer.lookahead() != "n":
            return True, scanned_comment
        lexer.advance(True)
        if not is_identifier_char(lexer.lookahead()):
            return False, scanned_comment
        for expected in "instanceof":
            if lexer.lookahead() != expected:
                return True, scanned_comment
            lexer.advance(True)
        if not is_identifier_char(lexer.lookahead()):
            return False, scanned_comment

    return True, scanned_comment


def _scan_whitespace_and_comments(lexer: StringLexer) -> tuple[bool, bool]:
    scanned_comment = False
    while True:
        while _is_space(lexer.lookahead()):
            lexer.advance(True)
        if lexer.lookahead() != "/":
            return True, scanned_comment
        lexer.advance(True)
        if lexer.lookahead() == "/":
            lexer.advance(True)
            while lexer.lookahead() not in (EOF, "\n"):
                lexer.advance(True)
            scanned_comment = True
        elif lexer.lookahead() == "*":
            lexer.advance(True)
            while lexer.lookahead() != EOF:
                if lexer.lookahead() == "*":
                    lexer.advance(True)
                    if lexer.lookahead() == "/":
                        lexer.advance(True)
                        break
                else:
                    lexer.advance(True)
        else:
            return False, scanned_comment


def _scan_ternary_qmark(lexer: StringLexer) -> bool:
    while _is_space(lexer.lookahead()):
        lexer.advance(True)

    if lexer.lookahead() != "?":
        return False
    lexer.advance(False)

    if lexer.lookahead() in ("?", "."):
        return False

    lexer.mark_end()
    lexer.result_symbol = ResultSymbol.TERNARY_QMARK

    while _is_space(lexer.lookahead()):
        lexer.advance(False)

    if lexer.lookahead() in (":", ")", ","):
        return False

    if lexer.lookahead() == ".":
        lexer.advance(False)
        return _is_digit(lexer.lookahead())
    return True


def _scan_closing_comment(lexer: StringLexer) -> bool:
    while _is_space(lexer.lookahead()) or lexer.lookahead() in _LINE_SEPARATORS:
        lexer.advance(True)

    if lexer.lookahead() == "<":
        delimiter = "<!--"
    elif lexer.lookahead() == "-":
        delimiter = "-->"
    else:
        return False

    for expected in delimiter:
        if lexer.lookahead() != expected:
            return False
        lexer.advance(False)

    while lexer.lookahead() not in (EOF, "\n") + _LINE_SEPARATORS:
        lexer.advance(False)

    lexer.result_symbol = ResultSymbol.HTML_COMMENT
    lexer.mark_end()
    return True


def _is_name_continuation(ch: str) -> bool:
    return ch in ("_", "-", ":", ".") or _is_letter(ch) or _is_digit(ch)


def _scan_jsx_text(lexer: StringLexer) -> bool:
    saw_text = False
    at_newline = False
    only_whitespace = True

    while lexer.lookahead() not in (EOF, "<", ">", "{", "}", "&"):
        ch = lexer.lookahead()
        if ch == "/" and only_whitespace:
            lexer.advance(False)
            if lexer.lookahead() == ">":
                return False
            saw_text = True
            only_whitespace = False
            continue
        if only_whitespace and (ch == "_" or _is_letter(ch)):
            lexer.advance(False)
            while _is_name_continuation(lexer.lookahead()):
                lexer.advance(False)
            while _is_space(lexer.lookahead()):
                lexer.advance(False)
            if lexer.lookahead() == "=":
                return False
            saw_text = True
            only_whitespace = False
            continue
        is_ws = _is_space(ch)
        if ch == "\n":
            at_newline = True
        else:
            at_newline = at_newline and is_ws
            if not at_newline:
                saw_text = True
        if not is_ws:
            only_whitespace = False
        lexer.advance(False)

    lexer.mark_end()
    lexer.result_symbol = ResultSymbol.JSX_TEXT
    return saw_text


def _looks_like_jsx_attribute_continuation(lexer: StringLexer) -> bool:
    ch = lexer.lookahead()
    if ch != "_" and not _is_letter(ch):
        return False
    lexer.advance(True)
    while _is_name_continuation(lexer.lookahead()):
        lexer.advance(True)
    while _is_space(lexer.lookahead()):
        lexer.advance(True)
    return lexer.lookahead() in ("=", "/", ">")


def _prefer_auto_semicolon_over_jsx_text(lexer: StringLexer, valid: frozenset[int]) -> bool:
    if ExternalToken.AUTO_SEMICOLON not in valid or ExternalToken.JSX_TEXT not in valid:
        return False
    return lexer.lookahead() in (EOF, "\n", "\r") + _LINE_SEPARATORS
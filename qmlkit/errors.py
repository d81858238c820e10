"""Error types raised by the language features, plus small display helpers."""

from __future__ import annotations

from collections.abc import Sized


class HandlerError(Exception):
    """An error carrying a machine-readable code, a message and an optional cause."""

    def __init__(self, code: str, message: str, cause: BaseException | None = None) -> None:
        self.code = code
        self.message = message
        self.cause = cause
        super().__init__(code, message)
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.code}: {self.message} ({self.cause})"
        return f"{self.code}: {self.message}"


class DocumentNotFoundError(LookupError):
    """The requested document is not open."""

    def __init__(self, message: str = "document not found") -> None:
        super().__init__(message)


class ParserNotReadyError(RuntimeError):
    """The parser has not been initialised."""

    def __init__(self, message: str = "parser not initialized") -> None:
        super().__init__(message)


class InvalidPositionError(ValueError):
    """A position does not lie within the document."""

    def __init__(self, message: str = "invalid document position") -> None:
        super().__init__(message)


class TreeNotAvailableError(RuntimeError):
    """No parse tree exists for the document."""

    def __init__(self, message: str = "parse tree not available") -> None:
        super().__init__(message)


def safe_string(s: str) -> str:
    """Return ``s``, or ``"<empty>"`` when it is empty."""
    return s if s else "<empty>"


def safe_len(items: Sized | None) -> int:
    """Return the length of ``items``, treating ``None`` as empty."""
    return 0 if items is None else len(items)
"""Failure values produced by the PGN import pipeline.

Every stage returns one of these variants instead of raising, so callers can
handle the closed set exhaustively::

    match error:
        case EmptyPgn():
            ...
        case MissingHeader(name=name):
            ...
        case InvalidHeader(text=text) | InvalidResult(text=text):
            ...
        case IllegalMove(move_number=number, move_text=text, reason=reason):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

INVALID_NOTATION_REASON = "Invalid move notation"
NOT_LEGAL_REASON = "Move is not legal in this position"
KING_IN_CHECK_REASON = "Move leaves king in check"


@dataclass(frozen=True, slots=True)
class EmptyPgn:
    """The input held no text at all."""

    @property
    def message(self) -> str:
        return "Empty PGN string"


@dataclass(frozen=True, slots=True)
class MissingHeader:
    """A mandatory tag (``White`` or ``Black``) is absent or empty."""

    name: str

    @property
    def message(self) -> str:
        return f"Missing required header: {self.name}"


@dataclass(frozen=True, slots=True)
class InvalidHeader:
    """Malformed tag syntax."""

    text: str

    @property
    def message(self) -> str:
        return f"Invalid header format: {self.text}"


@dataclass(frozen=True, slots=True)
class InvalidResult:
    """The ``Result`` tag is not one of ``1-0``, ``0-1``, ``1/2-1/2`` or ``*``."""

    text: str

    @property
    def message(self) -> str:
        return f"Invalid result format: {self.text}"


@dataclass(frozen=True, slots=True)
class IllegalMove:
    """A move token failed to parse, resolve or apply.

    Attributes:
        move_number: Full-move number of the token (two plies per number).
        move_text: The offending token exactly as it appeared in the movetext.
        reason: Which replay step rejected the token.
    """

    move_number: int
    move_text: str
    reason: str

    @property
    def message(self) -> str:
        return f"Illegal move at move {self.move_number}: '{self.move_text}' - {self.reason}"


PgnError: TypeAlias = EmptyPgn | MissingHeader | InvalidHeader | InvalidResult | IllegalMove
PGN_ERROR_TYPES = (EmptyPgn, MissingHeader, InvalidHeader, InvalidResult, IllegalMove)


def is_pgn_error(value: object) -> bool:
    """Return True when *value* is one of the pipeline failure variants."""
    return isinstance(value, PGN_ERROR_TYPES)


class PgnImportError(ValueError):
    """Raised by the ``*_or_raise`` helpers; carries the failure variant."""

    def __init__(self, error: PgnError) -> None:
        super().__init__(error.message)
        self.error = error


__all__ = [
    "EmptyPgn",
    "IllegalMove",
    "INVALID_NOTATION_REASON",
    "InvalidHeader",
    "InvalidResult",
    "KING_IN_CHECK_REASON",
    "MissingHeader",
    "NOT_LEGAL_REASON",
    "PGN_ERROR_TYPES",
    "PgnError",
    "PgnImportError",
    "is_pgn_error",
]

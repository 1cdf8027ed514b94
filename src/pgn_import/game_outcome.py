from __future__ import annotations

from enum import StrEnum

from pgn_import.errors import InvalidResult


class GameOutcome(StrEnum):
    """
    Enumeration representing the result recorded in a PGN ``Result`` tag.

    The enum values are the canonical PGN literals, so ``str(outcome)`` and
    ``outcome.to_pgn()`` both produce the text that belongs in the tag.

    Attributes:
        WHITE_WINS: ``1-0``.
        BLACK_WINS: ``0-1``.
        DRAW: ``1/2-1/2``.
        ONGOING: ``*``, also the default when no result is recorded.

    Methods:
        from_pgn(result_str: str) -> GameOutcome | InvalidResult:
            Maps a trimmed result literal to its outcome. Any other text is
            returned as an InvalidResult failure rather than raised.
    """

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"
    ONGOING = "*"

    @classmethod
    def from_pgn(cls, result_str: str) -> GameOutcome | InvalidResult:
        literal = result_str.strip()
        try:
            return cls(literal)
        except ValueError:
            return InvalidResult(literal)

    def to_pgn(self) -> str:
        return self.value

    @property
    def is_finished(self) -> bool:
        return self is not GameOutcome.ONGOING

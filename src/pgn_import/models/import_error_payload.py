from __future__ import annotations

from pydantic import BaseModel

from pgn_import.errors import IllegalMove, PgnError
from pgn_import.status_code_for_error import status_code_for_error


class ImportErrorPayload(BaseModel):
    """Error body returned to API clients for a rejected import.

    ``move_number``, ``move_text`` and ``reason`` are only set for illegal
    moves.
    """

    error: str
    code: int
    kind: str
    move_number: int | None = None
    move_text: str | None = None
    reason: str | None = None

    @classmethod
    def from_error(cls, error: PgnError) -> ImportErrorPayload:
        payload = cls(
            error=error.message,
            code=status_code_for_error(error),
            kind=type(error).__name__,
        )
        if isinstance(error, IllegalMove):
            payload.move_number = error.move_number
            payload.move_text = error.move_text
            payload.reason = error.reason
        return payload

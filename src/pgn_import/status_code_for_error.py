"""Map import failures to HTTP status codes."""

from __future__ import annotations

from http import HTTPStatus
from typing import assert_never

from pgn_import.errors import (
    EmptyPgn,
    IllegalMove,
    InvalidHeader,
    InvalidResult,
    MissingHeader,
    PgnError,
)


def status_code_for_error(error: PgnError) -> int:
    """Return the HTTP status the API layer should answer with.

    Malformed records are a bad request; a well-formed record describing
    illegal chess is unprocessable.
    """
    match error:
        case EmptyPgn() | MissingHeader() | InvalidHeader() | InvalidResult():
            return HTTPStatus.BAD_REQUEST.value
        case IllegalMove():
            return HTTPStatus.UNPROCESSABLE_ENTITY.value
        case _:
            assert_never(error)

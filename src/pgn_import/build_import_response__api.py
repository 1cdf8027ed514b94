"""Shape import results for the HTTP layer."""

from __future__ import annotations

from http import HTTPStatus

from pgn_import.errors import PgnError
from pgn_import.models import ImportedGamePayload, ImportErrorPayload
from pgn_import.ValidatedGame import ValidatedGame

IMPORT_SUCCESS_MESSAGE = "Game imported successfully"


def build_import_response(result: ValidatedGame | PgnError) -> tuple[int, dict[str, object]]:
    """Return ``(status_code, body)`` for an import result.

    Args:
        result: Output of ``import_pgn``.

    Returns:
        201 with the game under ``data.game`` on success, otherwise the
        failure's status with an ``ImportErrorPayload`` body.
    """
    if isinstance(result, ValidatedGame):
        game = ImportedGamePayload.from_validated_game(result)
        body: dict[str, object] = {
            "message": IMPORT_SUCCESS_MESSAGE,
            "data": {"game": game.model_dump()},
        }
        return HTTPStatus.CREATED.value, body
    payload = ImportErrorPayload.from_error(result)
    return payload.code, payload.model_dump()

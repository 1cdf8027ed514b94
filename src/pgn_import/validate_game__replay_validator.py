"""Replay a parsed game and confirm every move is legal."""

from __future__ import annotations

from typing import Literal

import chess

from pgn_import._replay_token__replay_validator import _replay_token
from pgn_import.errors import PgnError
from pgn_import.ParsedGame import ParsedGame
from pgn_import.utils.logger import get_logger
from pgn_import.ValidatedGame import ValidatedGame

logger = get_logger(__name__)

EnPassantMode = Literal["legal", "fen", "xfen"]


def validate_game(
    parsed: ParsedGame,
    fen_en_passant: EnPassantMode = "legal",
) -> ValidatedGame | PgnError:
    """Replay *parsed* from the standard starting position.

    Each call builds its own board, so games may be validated concurrently.
    The first token that fails aborts the replay; no partial game is ever
    returned.

    Args:
        parsed: Headers and raw SAN tokens from the parser.
        fen_en_passant: How python-chess renders the en-passant field of the
            final FEN. ``"legal"`` only names the square when a capture is
            actually possible.

    Returns:
        The validated game, or the IllegalMove failure for the first bad token.
    """
    board = chess.Board()
    for index, token in enumerate(parsed.moves):
        failure = _replay_token(board, index, token)
        if failure is not None:
            logger.debug("Replay stopped at ply %s: %s", index + 1, failure.message)
            return failure
    return ValidatedGame(
        headers=parsed.headers,
        moves=parsed.moves,
        final_fen=board.fen(en_passant=fen_en_passant),
        ply_count=len(parsed.moves),
    )

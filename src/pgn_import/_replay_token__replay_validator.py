"""Replay one SAN token against a board."""

from __future__ import annotations

import chess

from pgn_import.errors import (
    INVALID_NOTATION_REASON,
    KING_IN_CHECK_REASON,
    NOT_LEGAL_REASON,
    IllegalMove,
)


def _move_number_for_index(index: int) -> int:
    """Full-move number for a 0-based token index (two plies per number)."""
    return index // 2 + 1


def _replay_token(board: chess.Board, index: int, token: str) -> IllegalMove | None:
    """Parse, resolve and push *token*; return the failure instead of raising."""
    move_number = _move_number_for_index(index)
    try:
        move = board.parse_san(token)
    except chess.InvalidMoveError:
        return IllegalMove(move_number, token, INVALID_NOTATION_REASON)
    except (chess.IllegalMoveError, chess.AmbiguousMoveError):
        return IllegalMove(move_number, token, NOT_LEGAL_REASON)
    # parse_san accepts "--" as a null move, which is never a legal chess move.
    if not move:
        return IllegalMove(move_number, token, NOT_LEGAL_REASON)
    if not board.is_legal(move):
        return IllegalMove(move_number, token, KING_IN_CHECK_REASON)
    board.push(move)
    return None

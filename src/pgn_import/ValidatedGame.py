"""Fully replayed PGN game."""

# pylint: disable=invalid-name

from dataclasses import dataclass

from pgn_import.game_headers import GameHeaders


@dataclass(frozen=True, slots=True)
class ValidatedGame:
    """Game whose every move was replayed legally from the initial position.

    Only the replay validator builds these; a rejected game is represented by
    a failure value instead, so ``is_valid`` is always True.
    """

    headers: GameHeaders
    moves: tuple[str, ...]
    final_fen: str
    ply_count: int
    is_valid: bool = True

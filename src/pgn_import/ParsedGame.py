"""Parsed but not yet replayed PGN game."""

# pylint: disable=invalid-name

from dataclasses import dataclass

from pgn_import.game_headers import GameHeaders


@dataclass(frozen=True, slots=True)
class ParsedGame:
    """Headers plus the raw SAN tokens of the mainline, in order."""

    headers: GameHeaders
    moves: tuple[str, ...]

"""PGN_IMPORT package entrypoints.

Quick start::

    from pgn_import import ValidatedGame, import_pgn

    result = import_pgn('[White "A"][Black "B"] 1. e4 e5 *')
    if isinstance(result, ValidatedGame):
        print(result.final_fen)
    else:
        print(result.message)
"""

from pgn_import.build_import_response__api import build_import_response
from pgn_import.config import Settings, default_settings, get_settings
from pgn_import.errors import (
    EmptyPgn,
    IllegalMove,
    InvalidHeader,
    InvalidResult,
    MissingHeader,
    PgnError,
    PgnImportError,
    is_pgn_error,
)
from pgn_import.game_headers import GameHeaders
from pgn_import.game_outcome import GameOutcome
from pgn_import.import_pgn import import_pgn, import_pgn_or_raise
from pgn_import.import_pgn_batch import import_pgn_batch
from pgn_import.parse_headers__header_parser import parse_headers
from pgn_import.parse_pgn import parse_pgn
from pgn_import.ParsedGame import ParsedGame
from pgn_import.split_pgn_games import split_pgn_games
from pgn_import.status_code_for_error import status_code_for_error
from pgn_import.tokenize_moves__move_tokenizer import tokenize_moves
from pgn_import.validate_game__replay_validator import validate_game
from pgn_import.ValidatedGame import ValidatedGame
from pgn_import.variation_mode import VariationMode

__all__ = [
    "EmptyPgn",
    "GameHeaders",
    "GameOutcome",
    "IllegalMove",
    "InvalidHeader",
    "InvalidResult",
    "MissingHeader",
    "ParsedGame",
    "PgnError",
    "PgnImportError",
    "Settings",
    "ValidatedGame",
    "VariationMode",
    "build_import_response",
    "default_settings",
    "get_settings",
    "import_pgn",
    "import_pgn_batch",
    "import_pgn_or_raise",
    "is_pgn_error",
    "parse_headers",
    "parse_pgn",
    "split_pgn_games",
    "status_code_for_error",
    "tokenize_moves",
    "validate_game",
]

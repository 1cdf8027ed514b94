"""Parse PGN text into headers and raw SAN tokens."""

from __future__ import annotations

from pgn_import.errors import EmptyPgn, PgnError
from pgn_import.parse_headers__header_parser import parse_headers
from pgn_import.ParsedGame import ParsedGame
from pgn_import.tokenize_moves__move_tokenizer import tokenize_moves
from pgn_import.variation_mode import VariationMode


def parse_pgn(
    pgn: str,
    variation_mode: VariationMode = VariationMode.SINGLE,
) -> ParsedGame | PgnError:
    """Run the header parser and the move tokenizer over one game.

    Moves are not checked here; see ``validate_game``.
    """
    text = pgn.strip()
    if not text:
        return EmptyPgn()
    parsed_headers = parse_headers(text)
    if not isinstance(parsed_headers, tuple):
        return parsed_headers
    headers, move_text = parsed_headers
    return ParsedGame(headers=headers, moves=tokenize_moves(move_text, variation_mode))

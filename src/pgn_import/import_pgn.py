"""Import a single PGN game."""

from __future__ import annotations

from pgn_import.config import Settings, default_settings
from pgn_import.errors import PgnError, PgnImportError
from pgn_import.parse_pgn import parse_pgn
from pgn_import.ParsedGame import ParsedGame
from pgn_import.utils.logger import get_logger
from pgn_import.validate_game__replay_validator import validate_game
from pgn_import.ValidatedGame import ValidatedGame

logger = get_logger(__name__)


def import_pgn(pgn: str, settings: Settings | None = None) -> ValidatedGame | PgnError:
    """Parse and replay one PGN game.

    Args:
        pgn: Complete PGN record (tags and movetext).
        settings: Pipeline settings; ``default_settings()`` when omitted.

    Returns:
        The validated game, or the first failure met by any stage.
    """
    active_settings = settings or default_settings()
    parsed = parse_pgn(pgn, active_settings.variation_mode)
    if not isinstance(parsed, ParsedGame):
        logger.warning("Rejected PGN: %s", parsed.message)
        return parsed
    result = validate_game(parsed, active_settings.fen_en_passant)
    if not isinstance(result, ValidatedGame):
        logger.warning(
            "Rejected PGN %s vs %s: %s",
            parsed.headers.white,
            parsed.headers.black,
            result.message,
        )
        return result
    logger.info(
        "Imported %s vs %s (%s plies)",
        result.headers.white,
        result.headers.black,
        result.ply_count,
    )
    return result


def import_pgn_or_raise(pgn: str, settings: Settings | None = None) -> ValidatedGame:
    """Same as ``import_pgn`` but raise ``PgnImportError`` on failure."""
    result = import_pgn(pgn, settings)
    if isinstance(result, ValidatedGame):
        return result
    raise PgnImportError(result)
"""Import every game of a PGN collection."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from pgn_import.config import Settings, default_settings
from pgn_import.errors import PgnError
from pgn_import.import_pgn import import_pgn
from pgn_import.split_pgn_games import split_pgn_games
from pgn_import.utils.logger import get_logger
from pgn_import.ValidatedGame import ValidatedGame

logger = get_logger(__name__)


def import_pgn_batch(
    text: str,
    settings: Settings | None = None,
) -> list[ValidatedGame | PgnError]:
    """Split *text* into games and import each one independently.

    A rejected game does not affect the others. Results keep the order in
    which the games appear in *text*.

    Replay is pure Python, so the worker threads overlap but do not run in
    parallel under the GIL. Results are picklable for callers that want to
    fan ``import_pgn`` out over a process pool instead.
    """
    active_settings = settings or default_settings()
    games = split_pgn_games(text)
    if not games:
        return []
    with ThreadPoolExecutor(max_workers=active_settings.batch_workers) as executor:
        futures = [executor.submit(import_pgn, game, active_settings) for game in games]
        results = [future.result() for future in futures]
    imported = sum(1 for result in results if isinstance(result, ValidatedGame))
    logger.info("Imported %s of %s games from PGN collection", imported, len(results))
    return results

from pgn_import.GAME_SPLIT_RE import GAME_SPLIT_RE


def split_pgn_games(text: str) -> list[str]:
    """Takes a string containing one or more PGN games and splits it into individual games.

    A new game starts at a tag line that follows at least one blank line, or
    that directly follows a line ending in a result token (``1-0``, ``0-1``,
    ``1/2-1/2`` or ``*``). Games run together without either separator stay in
    one chunk, where the header parser keeps the first game's tag section.
    """
    if not text:
        return []
    return [chunk.strip() for chunk in GAME_SPLIT_RE.split(text) if chunk.strip()]

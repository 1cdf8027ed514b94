from __future__ import annotations

from pydantic import BaseModel, Field

from pgn_import.ValidatedGame import ValidatedGame


class ImportedGamePayload(BaseModel):
    """JSON-ready view of a validated game.

    Attributes:
        white: White player name.
        black: Black player name.
        result: Canonical PGN result literal.
        tags: Every tag of the game, dedicated fields included.
        moves: Confirmed-legal SAN moves in play order.
        final_fen: Position after the last move.
        ply_count: Number of half-moves.
        is_valid: Always True for an imported game.

    Example:
        >>> ImportedGamePayload.from_validated_game(game).model_dump()
    """

    white: str
    black: str
    event: str | None = None
    site: str | None = None
    date: str | None = None
    round: str | None = None
    result: str
    tags: dict[str, str] = Field(default_factory=dict)
    moves: list[str] = Field(default_factory=list)
    final_fen: str
    ply_count: int
    is_valid: bool = True

    @classmethod
    def from_validated_game(cls, game: ValidatedGame) -> ImportedGamePayload:
        headers = game.headers
        return cls(
            white=headers.white,
            black=headers.black,
            event=headers.event,
            site=headers.site,
            date=headers.date,
            round=headers.round,
            result=headers.result.to_pgn(),
            tags=headers.as_tags(),
            moves=list(game.moves),
            final_fen=game.final_fen,
            ply_count=game.ply_count,
            is_valid=game.is_valid,
        )

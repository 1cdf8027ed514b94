"""Extract the tag section of a PGN game."""

from __future__ import annotations

from pgn_import.errors import EmptyPgn, InvalidResult, MissingHeader, PgnError
from pgn_import.game_headers import GameHeaders
from pgn_import.game_outcome import GameOutcome
from pgn_import.HEADER_TAG_RE import HEADER_TAG_RE
from pgn_import.TAG_SECTION_GAP_RE import TAG_SECTION_GAP_RE
from pgn_import.utils.logger import get_logger

logger = get_logger(__name__)

_DEDICATED_TAGS = frozenset({"event", "site", "date", "round", "white", "black"})


def parse_headers(pgn: str) -> tuple[GameHeaders, str] | PgnError:
    """Split PGN text into structured headers and the remaining movetext.

    Args:
        pgn: A single PGN game.

    Returns:
        ``(headers, move_text)`` where ``move_text`` is everything after the
        last tag pair, or the failure that stopped the scan. The tag section
        ends at the first text that is not a tag pair, so tag-shaped text in
        movetext comments is left to the tokenizer.
    """
    if not pgn.strip():
        return EmptyPgn()

    fields: dict[str, str] = {}
    other: dict[str, str] = {}
    result = GameOutcome.ONGOING
    last_tag_end = 0
    tag_count = 0

    for match in HEADER_TAG_RE.finditer(pgn):
        if not TAG_SECTION_GAP_RE.fullmatch(pgn, last_tag_end, match.start()):
            break
        last_tag_end = match.end()
        tag_count += 1
        key, value = match.group(1), match.group(2)
        lowered = key.lower()
        if lowered == "result":
            parsed = GameOutcome.from_pgn(value)
            if isinstance(parsed, InvalidResult):
                return parsed
            result = parsed
        elif lowered in _DEDICATED_TAGS:
            fields[lowered] = value
        else:
            other[key] = value

    missing = _first_missing_player(fields)
    if missing is not None:
        return missing

    headers = GameHeaders(
        white=fields["white"],
        black=fields["black"],
        event=fields.get("event"),
        site=fields.get("site"),
        date=fields.get("date"),
        round=fields.get("round"),
        result=result,
        extra_tags=other,
    )
    logger.debug("Parsed %s tag pairs; movetext starts at offset %s", tag_count, last_tag_end)
    return headers, pgn[last_tag_end:]


def _first_missing_player(fields: dict[str, str]) -> MissingHeader | None:
    if not fields.get("white"):
        return MissingHeader("White")
    if not fields.get("black"):
        return MissingHeader("Black")
    return None

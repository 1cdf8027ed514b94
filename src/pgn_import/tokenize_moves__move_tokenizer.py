"""Reduce PGN movetext to its SAN tokens."""

from __future__ import annotations

from pgn_import._strip_variations__move_tokenizer import _strip_variations
from pgn_import.movetext_patterns import (
    BRACE_COMMENT_RE,
    LINE_COMMENT_RE,
    MOVE_NUMBER_RE,
    NAG_RE,
    RESULT_TOKEN_RE,
)
from pgn_import.variation_mode import VariationMode


def tokenize_moves(
    move_text: str,
    variation_mode: VariationMode = VariationMode.SINGLE,
) -> tuple[str, ...]:
    """Strip comments, NAGs, variations, move numbers and results.

    The passes run in a fixed order since each assumes the previous noise is
    gone. Removed spans become a space so neighbouring tokens never merge.
    Tokens are not interpreted here; the replay step rejects bad ones.

    Args:
        move_text: Movetext following the tag section.
        variation_mode: Variation removal strategy.

    Returns:
        The remaining tokens in document order.
    """
    cleaned = BRACE_COMMENT_RE.sub(" ", move_text)
    cleaned = LINE_COMMENT_RE.sub(" ", cleaned)
    cleaned = NAG_RE.sub(" ", cleaned)
    cleaned = _strip_variations(cleaned, variation_mode)
    return tuple(token for token in cleaned.split() if _is_move_token(token))


def _is_move_token(token: str) -> bool:
    if not token:
        return False
    if MOVE_NUMBER_RE.match(token):
        return False
    return not RESULT_TOKEN_RE.match(token)

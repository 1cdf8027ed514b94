"""Remove side-variations from PGN movetext."""

from __future__ import annotations

from pgn_import.movetext_patterns import FLAT_VARIATION_RE
from pgn_import.variation_mode import VariationMode


def _strip_variations(move_text: str, mode: VariationMode = VariationMode.SINGLE) -> str:
    if mode is VariationMode.NESTED:
        return _strip_nested_variations(move_text)
    return FLAT_VARIATION_RE.sub(" ", move_text)


def _strip_nested_variations(move_text: str) -> str:
    """Drop every parenthesized span, however deep.

    An unmatched ``)`` is left in place as text; an unclosed ``(`` swallows
    the rest of the movetext.
    """
    kept: list[str] = []
    depth = 0
    for ch in move_text:
        if ch == "(":
            if depth == 0:
                kept.append(" ")
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        elif depth == 0:
            kept.append(ch)
    return "".join(kept)

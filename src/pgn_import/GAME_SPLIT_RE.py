"""Regex for splitting a PGN collection into games."""

# pylint: disable=invalid-name

import re

# A tag line starts a new game after a blank line, or on the next line after
# a game termination marker.
GAME_SPLIT_RE: re.Pattern[str] = re.compile(
    r"(?:\r?\n){2,}(?=\[)"
    r"|(?:(?<=1-0)|(?<=0-1)|(?<=1/2-1/2)|(?<=\*))[ \t]*\r?\n(?=\[)"
)

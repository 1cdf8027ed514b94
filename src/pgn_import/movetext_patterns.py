"""Compiled patterns for cleaning PGN movetext."""

import re

BRACE_COMMENT_RE = re.compile(r"\{[^}]*\}")
LINE_COMMENT_RE = re.compile(r";[^\n]*")
NAG_RE = re.compile(r"\$\d+")
FLAT_VARIATION_RE = re.compile(r"\([^()]*\)")
MOVE_NUMBER_RE = re.compile(r"^\d+\.+$")
RESULT_TOKEN_RE = re.compile(r"^(1-0|0-1|1/2-1/2|\*)$")

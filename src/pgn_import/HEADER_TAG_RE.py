"""Regex for PGN tag pairs."""

# pylint: disable=invalid-name

import re

# Empty values do not match, so `[White ""]` reads as a missing tag.
HEADER_TAG_RE: re.Pattern[str] = re.compile(r'\[(\w+)\s+"([^"]+)"\]')

"""Regex for the text allowed between two tag pairs."""

# pylint: disable=invalid-name

import re

# Whitespace and malformed bracket lines such as `[White ""]`.
TAG_SECTION_GAP_RE: re.Pattern[str] = re.compile(r"(?:\s|\[[^\]{};\r\n]*\])*")

"""Structured PGN tag section."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pgn_import.game_outcome import GameOutcome


@dataclass(frozen=True)
class GameHeaders:  # pylint: disable=too-many-instance-attributes
    """Dataclass representing the tag pairs of one PGN game.

    ``white`` and ``black`` are mandatory and are never defaulted: the header
    parser refuses to build an instance without them. Tags outside the seven
    dedicated fields are kept verbatim, in PGN order, as ``extra_tags`` pairs
    and read through the ``other`` mapping view. A mapping is accepted for
    ``extra_tags`` at construction.
    """

    white: str
    black: str
    event: str | None = None
    site: str | None = None
    date: str | None = None
    round: str | None = None
    result: GameOutcome = GameOutcome.ONGOING
    extra_tags: tuple[tuple[str, str], ...] = ()

    def __post_init__(self):
        """Normalize ``extra_tags`` to a tuple of pairs, last key wins."""
        object.__setattr__(self, "extra_tags", tuple(dict(self.extra_tags).items()))

    @property
    def other(self) -> Mapping[str, str]:
        """Read-only view of the tags outside the dedicated fields."""
        return MappingProxyType(dict(self.extra_tags))

    def as_tags(self) -> dict[str, str]:
        """Return the headers as a flat PGN tag mapping.

        Dedicated fields use their conventional PGN tag names; unset optional
        fields are omitted.
        """
        tags: dict[str, str] = {}
        for name, value in (
            ("Event", self.event),
            ("Site", self.site),
            ("Date", self.date),
            ("Round", self.round),
            ("White", self.white),
            ("Black", self.black),
        ):
            if value is not None:
                tags[name] = value
        tags["Result"] = self.result.to_pgn()
        tags.update(self.other)
        return tags

from enum import StrEnum


class VariationMode(StrEnum):
    """How parenthesized side-variations are removed from movetext.

    Attributes:
        SINGLE: One pass over parentheticals without nested parentheses.
            ``(a (b) c)`` loses only ``(b)``; the outer residue stays in the
            movetext and will usually fail replay.
        NESTED: Balanced scan that removes variations at any depth.
    """

    SINGLE = "single"
    NESTED = "nested"

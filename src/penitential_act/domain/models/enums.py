"""Enumerations for Penitential Act documents."""

from enum import Enum


class CelebrationKind(str, Enum):
    """How the celebration is identified."""

    DATED = "dated"  # Ordinal Sunday within a season, e.g. "1st" + "Advent"
    NAMED = "named"  # Proper name, e.g. "Ascension of the Lord"


class LiturgicalYear(str, Enum):
    """Sunday lectionary cycle."""

    A = "A"
    B = "B"
    C = "C"


class Speaker(str, Enum):
    """Ministers who speak during the Penitential Act."""

    PRIEST = "Priest"
    DEACON = "Deacon"


class BlockStyle(str, Enum):
    """Semantic style of a paragraph in the order of service."""

    TITLE = "title"
    ROLE_LABEL = "role_label"
    SPOKEN = "spoken"
    RESPONSE = "response"

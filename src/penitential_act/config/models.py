"""Pydantic models for the generator configuration.

These models validate and type the JSON configuration file that supplies
the default priest texts and the typography of the generated document.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from penitential_act.domain.rules.constants import (
    DEFAULT_FONT_NAME,
    DEFAULT_PRIEST_CLOSING,
    DEFAULT_PRIEST_OPENING,
    RUBRIC_RED,
    TEXT_BLACK,
)

_HEX_COLOR = r"^[0-9A-Fa-f]{6}$"


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Metadata about the rite being generated."""

    rite: str = "Penitential Act"
    form: str = "Form C (invocations)"
    description: str = "Priest introduction, three Deacon invocations, Priest absolution"


# ---------------------------------------------------------------------------
# Texts
# ---------------------------------------------------------------------------


class LiturgicalTexts(BaseModel):
    """Default priest texts, used when no override is given."""

    priest_opening: str = Field(DEFAULT_PRIEST_OPENING, min_length=1)
    priest_closing: str = Field(DEFAULT_PRIEST_CLOSING, min_length=1)


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


class Typography(BaseModel):
    """Font family and colors (6-digit hex, no leading ``#``)."""

    font_name: str = Field(DEFAULT_FONT_NAME, min_length=1)
    rubric_color: str = Field(RUBRIC_RED, pattern=_HEX_COLOR)
    text_color: str = Field(TEXT_BLACK, pattern=_HEX_COLOR)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class PenitentialActConfig(BaseModel):
    """Complete generator configuration."""

    metadata: MetaData = Field(default_factory=MetaData)
    texts: LiturgicalTexts = Field(default_factory=LiturgicalTexts)
    typography: Typography = Field(default_factory=Typography)

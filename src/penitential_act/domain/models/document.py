"""Document models for the Penitential Act.

Contains Celebration, DocumentRequest, RenderBlock and
PenitentialActDocument — the aggregate handed to a renderer.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (dataclasses, pathlib)
- Pydantic (pragmatic exception for validation)
- Domain enums and constants
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

from penitential_act.domain.models.enums import (
    BlockStyle,
    CelebrationKind,
    LiturgicalYear,
)
from penitential_act.domain.rules.constants import (
    DEFAULT_FONT_NAME,
    RUBRIC_RED,
    TEXT_BLACK,
    TITLE_PREFIX,
    TITLE_SEPARATOR,
)


# ---------------------------------------------------------------------------
# Celebration
# ---------------------------------------------------------------------------


class Celebration(BaseModel):
    """A dated Sunday ("1st" + "Advent") or a named feast."""

    kind: CelebrationKind
    label: str = Field(..., description="Ordinal for dated Sundays, full name for feasts")
    season: str = Field("", description="Liturgical season (dated Sundays only)")

    @property
    def title(self) -> str:
        """Display title, e.g. ``1st Sunday of Advent``."""
        if self.kind == CelebrationKind.DATED:
            return f"{self.label} Sunday of {self.season}"
        return self.label


# ---------------------------------------------------------------------------
# Normalized request
# ---------------------------------------------------------------------------


class DocumentRequest(BaseModel):
    """Validated inputs for one generated document."""

    output_dir: Path
    celebration: Celebration
    year: LiturgicalYear
    invocations: list[str] = Field(..., min_length=3, max_length=3)
    priest_opening: str
    priest_closing: str
    filename: str = Field(..., description="Sanitized output file name")

    @property
    def document_title(self) -> str:
        """Full heading, e.g. ``Penitential Act – 1st Sunday of Advent, Year A``."""
        return (
            f"{TITLE_PREFIX} {TITLE_SEPARATOR} {self.celebration.title}, "
            f"Year {self.year.value}"
        )

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.filename


# ---------------------------------------------------------------------------
# Render blocks & document (Aggregate Root)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderBlock:
    """One paragraph of the order of service."""

    text: str
    style: BlockStyle


class PenitentialActDocument(BaseModel):
    """Complete document: title, ordered paragraphs, size and typography."""

    title: str
    blocks: list[RenderBlock] = Field(..., min_length=1)
    font_size: int = Field(..., gt=0, description="Run size in half-points")
    font_name: str = DEFAULT_FONT_NAME
    rubric_color: str = Field(RUBRIC_RED, description="Hex color of role labels")
    text_color: str = Field(TEXT_BLACK, description="Hex color of all other text")

    @property
    def font_size_pt(self) -> float:
        return self.font_size / 2

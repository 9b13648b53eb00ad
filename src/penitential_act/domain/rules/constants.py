"""Penitential Act constants — pure domain values.

Fixed liturgical texts, page geometry and the parameters of the one-page
font fit. They have NO dependency on configuration files or external
libraries. Texts the user may override (priest opening and closing) live in
the configuration layer; their canonical wording is kept here as defaults.
"""

from dataclasses import dataclass

from penitential_act.domain.models.enums import BlockStyle


# ---------------------------------------------------------------------------
# Value Objects (frozen dataclasses)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParagraphStyle:
    """Style definition for one semantic paragraph kind.

    Spacing is expressed in twips (1/20 of a point).
    """

    centered: bool
    bold: bool
    rubric: bool  # True = rendered in the rubric color
    space_before_twips: int
    space_after_twips: int


@dataclass(frozen=True)
class FitParameters:
    """Constants of the one-page font-size estimate.

    The estimate is an approximation with fixed character-width and
    line-height multipliers, not a real text-layout measurement.
    """

    candidate_sizes: tuple[int, ...]  # half-points, largest first
    floor_size: int
    available_height_pt: float
    line_width_pt: float
    line_height_factor: float
    char_width_factor: float
    paragraph_spacing_factor: float
    paragraph_count: int


# ---------------------------------------------------------------------------
# Liturgical texts
# ---------------------------------------------------------------------------

DEFAULT_PRIEST_OPENING: str = (
    "Brethren, let us acknowledge our sins and so prepare ourselves "
    "to celebrate the sacred mysteries."
)
DEFAULT_PRIEST_CLOSING: str = (
    "May almighty God have mercy on us, forgive us our sins, "
    "and bring us to everlasting life."
)

KYRIE_RESPONSE: str = "Lord, have mercy."
CHRISTE_RESPONSE: str = "Christ, have mercy."

# Response that follows each of the three invocations
MERCY_RESPONSES: tuple[str, str, str] = (KYRIE_RESPONSE, CHRISTE_RESPONSE, KYRIE_RESPONSE)

INVOCATION_COUNT: int = 3

TITLE_PREFIX: str = "Penitential Act"
TITLE_SEPARATOR: str = "–"  # en dash
DOCUMENT_SUBJECT: str = "Penitential Act"
FILENAME_EXTENSION: str = ".docx"

# Characters stripped from the celebration title when building a filename
FILENAME_FORBIDDEN_CHARS: str = '<>:"/\\|?*,'

# ---------------------------------------------------------------------------
# Typography defaults
# ---------------------------------------------------------------------------

DEFAULT_FONT_NAME: str = "Sabon Next LT"
RUBRIC_RED: str = "C41E3A"
TEXT_BLACK: str = "000000"

PARAGRAPH_STYLES: dict[BlockStyle, ParagraphStyle] = {
    BlockStyle.TITLE: ParagraphStyle(
        centered=True, bold=True, rubric=False, space_before_twips=0, space_after_twips=360
    ),
    BlockStyle.ROLE_LABEL: ParagraphStyle(
        centered=False, bold=True, rubric=True, space_before_twips=240, space_after_twips=60
    ),
    BlockStyle.SPOKEN: ParagraphStyle(
        centered=False, bold=False, rubric=False, space_before_twips=0, space_after_twips=60
    ),
    BlockStyle.RESPONSE: ParagraphStyle(
        centered=False, bold=False, rubric=False, space_before_twips=0, space_after_twips=120
    ),
}

# ---------------------------------------------------------------------------
# Page layout (US Letter, portrait)
# ---------------------------------------------------------------------------

PAPER_WIDTH_INCHES: float = 8.5
PAPER_HEIGHT_INCHES: float = 11.0
MARGIN_INCHES: float = 0.5
POINTS_PER_INCH: int = 72

# 1 title + 5 role labels + 8 text paragraphs
PARAGRAPH_COUNT: int = 14

# ---------------------------------------------------------------------------
# One-page font fit
# ---------------------------------------------------------------------------

FONT_SIZE_CANDIDATES: tuple[int, ...] = (56, 52, 48, 44, 40, 38, 36, 34, 32, 30, 28, 26, 24)
FONT_SIZE_FLOOR: int = 24  # 12pt

DEFAULT_FIT = FitParameters(
    candidate_sizes=FONT_SIZE_CANDIDATES,
    floor_size=FONT_SIZE_FLOOR,
    # 10in x 72 = 720pt
    available_height_pt=(PAPER_HEIGHT_INCHES - 2 * MARGIN_INCHES) * POINTS_PER_INCH,
    # 7.5in x 72 = 540pt
    line_width_pt=(PAPER_WIDTH_INCHES - 2 * MARGIN_INCHES) * POINTS_PER_INCH,
    line_height_factor=1.25,
    char_width_factor=0.55,
    paragraph_spacing_factor=0.5,
    paragraph_count=PARAGRAPH_COUNT,
)

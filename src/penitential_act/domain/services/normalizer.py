"""Input normalizer — turn raw positional inputs into a DocumentRequest.

Classifies the celebration as a dated Sunday or a named feast, validates the
liturgical year and season, substitutes default priest texts and derives the
output file name. Every check runs before anything touches the filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence

from penitential_act.domain.errors import (
    InvalidYearError,
    MissingArgumentsError,
    MissingSeasonError,
)
from penitential_act.domain.models.document import Celebration, DocumentRequest
from penitential_act.domain.models.enums import CelebrationKind, LiturgicalYear
from penitential_act.domain.rules.constants import (
    DEFAULT_PRIEST_CLOSING,
    DEFAULT_PRIEST_OPENING,
    FILENAME_EXTENSION,
    FILENAME_FORBIDDEN_CHARS,
    INVOCATION_COUNT,
    TITLE_PREFIX,
)

# "1st", "2nd", "23rd", "14TH" ... ASCII digits only
_ORDINAL_RE = re.compile(r"[0-9]+(st|nd|rd|th)", re.IGNORECASE)

_FORBIDDEN_RE = re.compile("[" + re.escape(FILENAME_FORBIDDEN_CHARS) + "]")

# output_dir, celebration, season, year + the invocations
REQUIRED_ARGUMENT_COUNT: int = 4 + INVOCATION_COUNT

USAGE: str = (
    "Usage: penitential-act <output_dir> <celebration> <season> <year> "
    "<invocation1> <invocation2> <invocation3> [priest_opening] [priest_closing]\n"
    "\n"
    "For Sundays:\n"
    '  penitential-act ./output "1st" "Advent" "A" "inv1" "inv2" "inv3"\n'
    "\n"
    "For Named Feasts:\n"
    '  penitential-act ./output "Solemnity of Mary, Mother of God" "" "C" "inv1" "inv2" "inv3"\n'
    "\n"
    "With custom priest texts:\n"
    '  penitential-act ./output "1st" "Advent" "A" "inv1" "inv2" "inv3" '
    '"Custom opening" "Custom closing"'
)


# ---------------------------------------------------------------------------
# Classification & derivation
# ---------------------------------------------------------------------------


def is_dated_celebration(descriptor: str) -> bool:
    """Return True when *descriptor* is an ordinal such as ``1st`` or ``14th``."""
    return _ORDINAL_RE.fullmatch(descriptor.strip()) is not None


def classify_celebration(descriptor: str, season: str) -> Celebration:
    """Build a :class:`Celebration` from the raw descriptor and season.

    Dated Sundays keep the trimmed ordinal and season; named feasts keep the
    descriptor verbatim and ignore the season.
    """
    if is_dated_celebration(descriptor):
        return Celebration(
            kind=CelebrationKind.DATED,
            label=descriptor.strip(),
            season=season.strip(),
        )
    return Celebration(kind=CelebrationKind.NAMED, label=descriptor)


def parse_year(value: str) -> LiturgicalYear:
    """Return the liturgical year for *value* (case-insensitive)."""
    try:
        return LiturgicalYear(value.upper())
    except ValueError:
        raise InvalidYearError("Year must be A, B, or C") from None


def sanitize_for_filename(text: str) -> str:
    """Remove ``<>:"/\\|?*`` and commas, then trim surrounding whitespace."""
    return _FORBIDDEN_RE.sub("", text).strip()


def build_filename(celebration: Celebration, year: LiturgicalYear) -> str:
    """Return ``Penitential Act_{title}_{year}.docx``."""
    sanitized = sanitize_for_filename(celebration.title)
    return f"{TITLE_PREFIX}_{sanitized}_{year.value}{FILENAME_EXTENSION}"


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize(
    output_dir: str | Path,
    celebration: str,
    season: str,
    year: str,
    invocations: Sequence[str],
    priest_opening: Optional[str] = None,
    priest_closing: Optional[str] = None,
    *,
    default_opening: str = DEFAULT_PRIEST_OPENING,
    default_closing: str = DEFAULT_PRIEST_CLOSING,
) -> DocumentRequest:
    """Validate the inputs and return the finalized request.

    Omitted or empty priest texts fall back to *default_opening* and
    *default_closing*.

    Raises:
        MissingArgumentsError: If the number of invocations is not three.
        InvalidYearError: If *year* is not A, B, or C.
        MissingSeasonError: If a dated Sunday has a blank season.
    """
    if len(invocations) != INVOCATION_COUNT:
        raise MissingArgumentsError(
            f"Exactly {INVOCATION_COUNT} invocations are required, got {len(invocations)}"
        )

    liturgical_year = parse_year(year)
    parsed = classify_celebration(celebration, season)

    if parsed.kind == CelebrationKind.DATED and not parsed.season:
        raise MissingSeasonError(
            "Sunday celebrations require a season (e.g., 'Advent', 'Lent', 'Ordinary Time')"
        )

    return DocumentRequest(
        output_dir=Path(output_dir),
        celebration=parsed,
        year=liturgical_year,
        invocations=list(invocations),
        priest_opening=priest_opening or default_opening,
        priest_closing=priest_closing or default_closing,
        filename=build_filename(parsed, liturgical_year),
    )


def require_arguments(arguments: Sequence[str]) -> None:
    """Raise MissingArgumentsError when fewer than seven arguments are given."""
    if len(arguments) < REQUIRED_ARGUMENT_COUNT:
        raise MissingArgumentsError(USAGE)


def normalize_arguments(
    arguments: Sequence[str],
    *,
    default_opening: str = DEFAULT_PRIEST_OPENING,
    default_closing: str = DEFAULT_PRIEST_CLOSING,
) -> DocumentRequest:
    """Normalize the positional command-line arguments.

    ``output_dir celebration season year inv1 inv2 inv3 [opening] [closing]``

    Raises:
        MissingArgumentsError: If fewer than seven arguments are given. Checked
            before any other validation. Arguments past the ninth are ignored.
    """
    require_arguments(arguments)

    output_dir, celebration, season, year, *rest = arguments
    invocations = rest[:INVOCATION_COUNT]
    overrides = rest[INVOCATION_COUNT:] + [None, None]

    return normalize(
        output_dir,
        celebration,
        season,
        year,
        invocations,
        priest_opening=overrides[0],
        priest_closing=overrides[1],
        default_opening=default_opening,
        default_closing=default_closing,
    )


def ensure_output_dir(request: DocumentRequest) -> Path:
    """Create the request's output directory (recursively) if absent."""
    request.output_dir.mkdir(parents=True, exist_ok=True)
    return request.output_dir

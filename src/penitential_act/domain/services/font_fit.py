"""Font-fit estimator — largest font size that keeps the act on one page.

The estimate uses fixed multipliers for glyph width and line height instead
of real text metrics, so the result depends only on the lengths of the texts.
It is a known approximation; the constants are kept as-is so output stays
reproducible.
"""

from __future__ import annotations

import math
from typing import Sequence

from penitential_act.domain.rules.constants import DEFAULT_FIT, FitParameters


def chars_per_line(font_size: int, params: FitParameters = DEFAULT_FIT) -> int:
    """Estimated characters per line at *font_size* half-points."""
    pt_size = font_size / 2
    return math.floor(params.line_width_pt / (pt_size * params.char_width_factor))


def estimate_height(
    texts: Sequence[str], font_size: int, params: FitParameters = DEFAULT_FIT
) -> float:
    """Estimated height in points of *texts* set at *font_size* half-points.

    Each text wraps to ``ceil(len / chars_per_line)`` lines; every one of the
    fixed paragraphs adds half a line of spacing regardless of content.
    """
    pt_size = font_size / 2
    line_height = pt_size * params.line_height_factor
    per_line = chars_per_line(font_size, params)

    total_lines = sum(math.ceil(len(text) / per_line) for text in texts)
    spacing = params.paragraph_count * (line_height * params.paragraph_spacing_factor)
    return (total_lines * line_height) + spacing


def fits_on_page(
    texts: Sequence[str], font_size: int, params: FitParameters = DEFAULT_FIT
) -> bool:
    return estimate_height(texts, font_size, params) <= params.available_height_pt


def estimate_font_size(texts: Sequence[str], params: FitParameters = DEFAULT_FIT) -> int:
    """Return the largest candidate size (half-points) whose estimate fits.

    Candidates are tried largest first. When none fits, the floor size is
    returned; the document is still produced and may overflow the page.
    """
    for font_size in params.candidate_sizes:
        if fits_on_page(texts, font_size, params):
            return font_size
    return params.floor_size

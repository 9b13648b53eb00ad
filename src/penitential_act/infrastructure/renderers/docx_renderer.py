"""DOCX renderer — implements DocumentRendererPort using python-docx."""

from __future__ import annotations

import logging
from pathlib import Path

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor, Twips

from penitential_act.domain.models.document import PenitentialActDocument, RenderBlock
from penitential_act.domain.ports.document_renderer import DocumentRendererPort
from penitential_act.domain.rules.constants import (
    DOCUMENT_SUBJECT,
    MARGIN_INCHES,
    PAPER_HEIGHT_INCHES,
    PAPER_WIDTH_INCHES,
    PARAGRAPH_STYLES,
)

logger = logging.getLogger(__name__)


class DocxRenderer(DocumentRendererPort):
    """Render Penitential Act documents as .docx files."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, document: PenitentialActDocument, output_path: Path) -> Path:
        """Build the one-page document and save it to *output_path*."""
        output_path = Path(output_path)

        docx = Document()
        self._setup_page_layout(docx)
        self._setup_default_style(docx, document)

        docx.core_properties.title = document.title
        docx.core_properties.subject = DOCUMENT_SUBJECT

        for block in document.blocks:
            self._add_block(docx, block, document)

        docx.save(str(output_path))
        logger.info("Wrote %s", output_path)
        return output_path

    # ------------------------------------------------------------------
    # Page Layout
    # ------------------------------------------------------------------

    def _setup_page_layout(self, docx) -> None:
        """Letter portrait with equal margins on all sides."""
        section = docx.sections[0]
        section.orientation = WD_ORIENT.PORTRAIT
        section.page_width = Inches(PAPER_WIDTH_INCHES)
        section.page_height = Inches(PAPER_HEIGHT_INCHES)

        section.top_margin = Inches(MARGIN_INCHES)
        section.bottom_margin = Inches(MARGIN_INCHES)
        section.left_margin = Inches(MARGIN_INCHES)
        section.right_margin = Inches(MARGIN_INCHES)

    # ------------------------------------------------------------------
    # Default Style
    # ------------------------------------------------------------------

    def _setup_default_style(self, docx, document: PenitentialActDocument) -> None:
        """Set the Normal style so empty runs and line breaks match the body."""
        style = docx.styles["Normal"]
        font = style.font
        font.name = document.font_name
        font.size = Pt(document.font_size_pt)
        font.color.rgb = RGBColor.from_string(document.text_color.upper())

        pf = style.paragraph_format
        pf.space_before = Pt(0)
        pf.space_after = Pt(0)

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    def _add_block(self, docx, block: RenderBlock, document: PenitentialActDocument):
        """Add one paragraph styled after its semantic role."""
        style = PARAGRAPH_STYLES[block.style]

        p = docx.add_paragraph("", style="Normal")
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER if style.centered else WD_ALIGN_PARAGRAPH.LEFT
        p.paragraph_format.space_before = Twips(style.space_before_twips)
        p.paragraph_format.space_after = Twips(style.space_after_twips)

        color = document.rubric_color if style.rubric else document.text_color

        run = p.add_run(block.text)
        run.bold = style.bold
        run.font.name = document.font_name
        run.font.size = Pt(document.font_size_pt)
        run.font.color.rgb = RGBColor.from_string(color.upper())
        return p

"""Use Case: Generate Penitential Act.

Validates the raw inputs, chooses the font size, lays out the paragraphs and
delegates writing to an injected renderer port.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from penitential_act.config.models import PenitentialActConfig
from penitential_act.domain.errors import RenderFailureError
from penitential_act.domain.models.document import DocumentRequest, PenitentialActDocument
from penitential_act.domain.ports.config_provider import ConfigProviderPort
from penitential_act.domain.ports.document_renderer import DocumentRendererPort
from penitential_act.domain.services.font_fit import estimate_font_size, fits_on_page
from penitential_act.domain.services.layout import build_blocks, fit_texts
from penitential_act.domain.services.normalizer import (
    ensure_output_dir,
    normalize_arguments,
    require_arguments,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Where the document was written and at what size."""

    output_path: Path
    font_size: int  # half-points

    @property
    def font_size_pt(self) -> float:
        return self.font_size / 2


class GeneratePenitentialActUseCase:
    """Orchestrate document generation through an injected renderer."""

    def __init__(
        self, renderer: DocumentRendererPort, config_provider: ConfigProviderPort
    ) -> None:
        self._renderer = renderer
        self._config_provider = config_provider

    @property
    def config(self) -> PenitentialActConfig:
        return self._config_provider.get_config()

    def execute(self, arguments: Sequence[str]) -> GenerationResult:
        """Generate a document from positional command-line style arguments.

        ``output_dir celebration season year inv1 inv2 inv3 [opening] [closing]``

        Raises:
            MissingArgumentsError: If fewer than seven arguments are given.
                Checked before the configuration is loaded.
            ConfigurationError: If the configuration cannot be loaded.
            InvalidYearError, MissingSeasonError: If the inputs are invalid.
                Nothing is written.
            RenderFailureError: If rendering or writing fails.
        """
        require_arguments(arguments)

        texts = self.config.texts
        request = normalize_arguments(
            arguments,
            default_opening=texts.priest_opening,
            default_closing=texts.priest_closing,
        )
        return self.generate(request)

    def generate(self, request: DocumentRequest) -> GenerationResult:
        """Lay out, size and render an already-normalized request."""
        document = self.build_document(request)

        try:
            ensure_output_dir(request)
            written = self._renderer.render(document, request.output_path)
        except Exception as exc:
            raise RenderFailureError(str(exc)) from exc

        return GenerationResult(output_path=written, font_size=document.font_size)

    def build_document(self, request: DocumentRequest) -> PenitentialActDocument:
        """Build the paragraphs and pick the largest size that fits one page."""
        logger.debug(
            "Celebration %r (%s) -> %s",
            request.celebration.label,
            request.celebration.kind.value,
            request.filename,
        )

        blocks = build_blocks(request)
        texts = fit_texts(blocks)
        font_size = estimate_font_size(texts)

        if fits_on_page(texts, font_size):
            logger.info("Selected font size %gpt", font_size / 2)
        else:
            logger.warning(
                "Texts do not fit on one page at any candidate size; using %gpt",
                font_size / 2,
            )

        typography = self.config.typography
        return PenitentialActDocument(
            title=request.document_title,
            blocks=blocks,
            font_size=font_size,
            font_name=typography.font_name,
            rubric_color=typography.rubric_color,
            text_color=typography.text_color,
        )

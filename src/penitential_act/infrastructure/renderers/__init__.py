"""Document renderers."""

from penitential_act.infrastructure.renderers.docx_renderer import DocxRenderer

__all__ = ["DocxRenderer"]

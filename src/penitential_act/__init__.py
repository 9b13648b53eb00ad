"""Penitential Act generator — one-page order of service as Word (.docx)."""

__version__ = "1.0.0"

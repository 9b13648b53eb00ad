"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from penitential_act.application.use_cases.generate_penitential_act import (
    GeneratePenitentialActUseCase,
)
from penitential_act.config.models import PenitentialActConfig
from penitential_act.domain.ports.document_renderer import DocumentRendererPort
from penitential_act.infrastructure.config.json_config_provider import JsonConfigProvider
from penitential_act.infrastructure.renderers.docx_renderer import DocxRenderer


class Container:
    """Simple dependency injection container.

    Configuration is loaded lazily, on first use.

    Usage::

        container = Container()
        result = container.generate_penitential_act().execute(argv)
    """

    def __init__(self, config_path: Optional[str | Path] = None) -> None:
        self._config_provider = JsonConfigProvider(config_path)
        self._docx_renderer = DocxRenderer()

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> PenitentialActConfig:
        return self._config_provider.get_config()

    @property
    def renderer(self) -> DocumentRendererPort:
        return self._docx_renderer

    # -- Use case factories --------------------------------------------------

    def generate_penitential_act(self) -> GeneratePenitentialActUseCase:
        return GeneratePenitentialActUseCase(self._docx_renderer, self._config_provider)

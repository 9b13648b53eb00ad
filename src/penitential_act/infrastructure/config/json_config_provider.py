"""JSON config provider — implements ConfigProviderPort.

Wraps config/loader.py and turns loader failures into ConfigurationError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from penitential_act.config.loader import get_config, load_config
from penitential_act.config.models import PenitentialActConfig
from penitential_act.domain.errors import ConfigurationError
from penitential_act.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load the generator configuration from JSON files, lazily."""

    def __init__(self, config_path: Optional[str | Path] = None) -> None:
        self._config_path = Path(config_path) if config_path else None
        self._config: Optional[PenitentialActConfig] = None

    def get_config(self) -> PenitentialActConfig:
        """Return the current configuration, loading it on first use."""
        if self._config is None:
            try:
                if self._config_path:
                    self._config = load_config(self._config_path)
                else:
                    self._config = get_config()
            except FileNotFoundError as exc:
                raise ConfigurationError(str(exc)) from exc
            except (ValidationError, ValueError) as exc:
                raise ConfigurationError(
                    f"Invalid configuration file {self._config_path}: {exc}"
                ) from exc
        return self._config

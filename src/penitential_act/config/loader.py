"""Load the liturgical texts and typography used for every generated act.

The built-in ``penitential_act_default.json`` holds the canonical priest
texts and the rubric styling. A custom file only needs the keys it changes;
everything else falls back to the model defaults. Parsed configs are kept
per resolved path, so repeated generations in one process reuse them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from penitential_act.config.models import PenitentialActConfig

# Resolved path -> validated config
_config_cache: dict[str, PenitentialActConfig] = {}

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "penitential_act_default.json"


def load_config(path: Optional[Path] = None) -> PenitentialActConfig:
    """Return the configuration stored at *path*.

    Parameters
    ----------
    path : Path | None
        A JSON file overriding some or all of the default texts and
        typography. ``None`` selects the built-in defaults.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    pydantic.ValidationError
        If a priest text is empty or a color is not a six-digit hex value.
    json.JSONDecodeError
        If the file is not valid JSON.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    cached = _config_cache.get(cache_key)
    if cached is not None:
        return cached

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    config = PenitentialActConfig.model_validate(raw)
    _config_cache[cache_key] = config
    return config


def get_config() -> PenitentialActConfig:
    """Built-in defaults."""
    return load_config()


def clear_cache() -> None:
    """Forget every loaded config so the next call re-reads from disk."""
    _config_cache.clear()

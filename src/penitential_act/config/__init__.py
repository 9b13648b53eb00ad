"""Penitential Act configuration package."""

from penitential_act.config.loader import get_config, load_config
from penitential_act.config.models import PenitentialActConfig

__all__ = ["PenitentialActConfig", "get_config", "load_config"]

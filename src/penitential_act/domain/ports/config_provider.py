"""Port: Configuration provider — supply generator configuration."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigProviderPort(ABC):
    """Contract for providing configuration to the application.

    The concrete return type is ``Any`` at the domain level so the domain
    stays free of the Pydantic config models.
    """

    @abstractmethod
    def get_config(self) -> Any:
        """Return the current configuration object."""
        ...

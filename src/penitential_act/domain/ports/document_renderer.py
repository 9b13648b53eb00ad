"""Port: Document renderer — writes a finished document to a file.

This is a domain-level contract. Infrastructure adapters (docx) implement
this interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from penitential_act.domain.models.document import PenitentialActDocument


class DocumentRendererPort(ABC):
    """Contract for rendering a Penitential Act document to a file."""

    @abstractmethod
    def render(self, document: PenitentialActDocument, output_path: Path) -> Path:
        """Write the formatted document and return the output path.

        An existing file at *output_path* is overwritten.
        """
        ...

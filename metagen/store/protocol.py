"""Storage protocol for metadata documents.

Defines the interface that all document stores must implement.
"""

from typing import Any, Protocol


class MetadataStore(Protocol):
    """Protocol defining the document store used by the generator.

    Identifiers are file-system style paths; stores decide how they map
    to their backing medium.
    """

    def read(self, identifier: str) -> Any:
        """Read and parse a structured document.

        Args:
            identifier: Location of the document.

        Returns:
            Parsed document tree.

        Raises:
            StoreError: If the document is missing or not well-formed.
        """
        ...

    def write(self, identifier: str, data: Any) -> None:
        """Create or overwrite a document.

        Args:
            identifier: Location of the document.
            data: JSON-shaped tree to store.

        Raises:
            StoreError: If the document cannot be written.
        """
        ...

    def prepare(self, location: str) -> None:
        """Make sure documents can be written under ``location``.

        Args:
            location: Directory-like location.
        """
        ...

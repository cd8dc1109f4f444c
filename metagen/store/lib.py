"""Document store implementations.

``JSONFileStore`` keeps one pretty-printed JSON file per document and is the
default for real runs. ``MemoryStore`` keeps documents in a dict and backs
tests and dry runs.
"""

import copy
import json
from pathlib import Path
from typing import Any

from metagen.core import MetadataError, get_logger

logger = get_logger(__name__)


class StoreError(MetadataError):
    """Error reading or writing a document.

    Attributes:
        identifier: Location of the failing document.
    """

    def __init__(self, message: str, identifier: str | None = None):
        super().__init__(message)
        self.identifier = identifier


class JSONFileStore:
    """Stores documents as UTF-8 JSON files."""

    def __init__(self, encoding: str = "utf-8", indent: int = 4):
        """Initialize store.

        Args:
            encoding: File encoding for reads and writes.
            indent: JSON indentation for written documents.
        """
        self._encoding = encoding
        self._indent = indent

    def read(self, identifier: str) -> Any:
        path = Path(identifier)
        logger.debug(f"Read from file: {path}")
        try:
            text = path.read_text(encoding=self._encoding)
        except OSError as e:
            raise StoreError(f"Cannot read {path}: {e}", str(identifier)) from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreError(f"Malformed JSON in {path}: {e}", str(identifier)) from e

    def write(self, identifier: str, data: Any) -> None:
        path = Path(identifier)
        logger.debug(f"Write data to file {path}")
        try:
            path.write_text(
                json.dumps(data, indent=self._indent),
                encoding=self._encoding,
            )
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"Cannot write {path}: {e}", str(identifier)) from e

    def prepare(self, location: str) -> None:
        try:
            Path(location).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create {location}: {e}", str(location)) from e


class MemoryStore:
    """Keeps documents in memory, keyed by normalized path string.

    Example:
        >>> store = MemoryStore({"meta.json": {"Widgets": {}}})
        >>> store.read("meta.json")
        {'Widgets': {}}
    """

    def __init__(self, documents: dict[str, Any] | None = None):
        self.documents: dict[str, Any] = {
            self._key(k): v for k, v in (documents or {}).items()
        }
        self.locations: set[str] = set()

    @staticmethod
    def _key(identifier: str | Path) -> str:
        return Path(identifier).as_posix()

    def read(self, identifier: str) -> Any:
        key = self._key(identifier)
        if key not in self.documents:
            raise StoreError(f"No document at {key}", key)
        return copy.deepcopy(self.documents[key])

    def write(self, identifier: str, data: Any) -> None:
        key = self._key(identifier)
        self.documents[key] = copy.deepcopy(data)

    def prepare(self, location: str) -> None:
        self.locations.add(self._key(location))


__all__ = ["JSONFileStore", "MemoryStore", "StoreError"]

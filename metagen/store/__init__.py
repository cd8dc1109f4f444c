"""Document storage for metadata input and descriptor output."""

from metagen.store.lib import JSONFileStore, MemoryStore, StoreError
from metagen.store.protocol import MetadataStore

__all__ = [
    "MetadataStore",
    "JSONFileStore",
    "MemoryStore",
    "StoreError",
]

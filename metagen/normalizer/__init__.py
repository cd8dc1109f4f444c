"""Global deduplication and inheritance resolution of nested components."""

from metagen.normalizer.lib import (
    DEFAULT_BASE_PATH_PART,
    NormalizedComponents,
    extract_base_components,
    finalize_components,
    merge_components,
    normalize_components,
)

__all__ = [
    "DEFAULT_BASE_PATH_PART",
    "NormalizedComponents",
    "extract_base_components",
    "finalize_components",
    "merge_components",
    "normalize_components",
]

"""metagen: widget metadata to component descriptor graph generator."""

from metagen.config import GeneratorConfig, load_config
from metagen.core import MetadataError
from metagen.generator import GenerationResult, MetadataGenerator, generate
from metagen.normalizer import normalize_components
from metagen.resolver import resolve_complex_option
from metagen.schema import Metadata, parse_metadata

__all__ = [
    # Pipeline
    "MetadataGenerator",
    "GenerationResult",
    "generate",
    # Configuration
    "GeneratorConfig",
    "load_config",
    # Stages
    "parse_metadata",
    "Metadata",
    "resolve_complex_option",
    "normalize_components",
    # Errors
    "MetadataError",
]

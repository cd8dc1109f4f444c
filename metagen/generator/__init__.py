"""Generation pipeline from widget metadata to descriptor documents."""

from metagen.generator.lib import GenerationResult, MetadataGenerator, generate

__all__ = ["GenerationResult", "MetadataGenerator", "generate"]

"""Metadata generation pipeline.

Reads the widget metadata document, builds one descriptor per widget,
normalizes every nested component discovered along the way and writes all
descriptors through a ``MetadataStore``:

    <output>/<widget>.json                      widget descriptors
    <output>/<nested>/<base>/<path>.json         base descriptors
    <output>/<nested>/<path>.json                nested descriptors

Any read or write failure aborts the run; documents written before the
failure are left in place.
"""

from dataclasses import dataclass, field
from pathlib import Path

from metagen.builder import build_widget_descriptors
from metagen.config import GeneratorConfig
from metagen.core import get_logger
from metagen.ir import NestedDescriptor, to_document
from metagen.normalizer import NormalizedComponents, normalize_components
from metagen.schema import Metadata, parse_metadata
from metagen.store import JSONFileStore, MetadataStore

logger = get_logger(__name__)

DOCUMENT_SUFFIX = ".json"


@dataclass
class GenerationResult:
    """Locations written by one generation run.

    Attributes:
        widgets: Widget descriptor documents.
        bases: Base descriptor documents.
        nested: Nested descriptor documents.
    """

    widgets: list[str] = field(default_factory=list)
    bases: list[str] = field(default_factory=list)
    nested: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.widgets) + len(self.bases) + len(self.nested)


class MetadataGenerator:
    """Generates component descriptors from widget metadata.

    Example:
        >>> generator = MetadataGenerator()
        >>> result = generator.generate(config)
        >>> print(f"{result.total} descriptors written")
    """

    def __init__(self, store: MetadataStore | None = None):
        """Initialize generator.

        Args:
            store: Document store for reads and writes. Defaults to
                JSONFileStore.
        """
        self._store = store if store is not None else JSONFileStore()

    @property
    def store(self) -> MetadataStore:
        return self._store

    def load(self, config: GeneratorConfig) -> Metadata:
        """Read and validate the metadata document.

        Raises:
            StoreError: If the document cannot be read or parsed.
            SchemaError: If the document does not match the metadata shape.
        """
        source = config.source_metadata_file_path
        logger.info(f"Read metadata from {source}")
        return parse_metadata(self._store.read(str(source)))

    def generate(self, config: GeneratorConfig) -> GenerationResult:
        """Run the whole pipeline.

        Args:
            config: Run configuration.

        Returns:
            GenerationResult listing every written document.

        Raises:
            MetadataError: On any read, validation or write failure.
        """
        metadata = self.load(config)
        self._prepare(config)

        result = GenerationResult()
        nested_components: list[NestedDescriptor] = []

        for build in build_widget_descriptors(metadata, config.module_prefix):
            target = config.output_folder_path / (build.output_name + DOCUMENT_SUFFIX)
            self._write(target, to_document(build.descriptor))
            result.widgets.append(str(target))
            nested_components.extend(build.nested_components)

        normalized = normalize_components(nested_components, config.base_path_part)
        self._write_nested(config, normalized, result)

        logger.info(
            f"Generated {len(result.widgets)} widgets, {len(result.bases)} bases, "
            f"{len(result.nested)} nested components"
        )
        return result

    def _prepare(self, config: GeneratorConfig) -> None:
        for location in (
            config.output_folder_path,
            config.nested_folder_path,
            config.base_folder_path,
        ):
            self._store.prepare(str(location))

    def _write_nested(
        self,
        config: GeneratorConfig,
        normalized: NormalizedComponents,
        result: GenerationResult,
    ) -> None:
        for base in normalized.bases:
            target = config.base_folder_path / (base.path + DOCUMENT_SUFFIX)
            self._write(target, to_document(base))
            result.bases.append(str(target))

        for component in normalized.components:
            target = config.nested_folder_path / (component.path + DOCUMENT_SUFFIX)
            self._write(target, to_document(component))
            result.nested.append(str(target))

    def _write(self, target: Path, document: dict) -> None:
        logger.debug(f"Write metadata to file {target}")
        self._store.write(str(target), document)


def generate(
    config: GeneratorConfig, store: MetadataStore | None = None
) -> GenerationResult:
    """Convenience wrapper around ``MetadataGenerator(store).generate(config)``."""
    return MetadataGenerator(store).generate(config)


__all__ = ["GenerationResult", "MetadataGenerator", "generate"]

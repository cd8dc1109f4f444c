"""Input models for the framework-supplied widget metadata.

The metadata document has two top-level maps:

- ``Widgets``: widget name to widget description (module, options, flags)
- ``ExtraObjects``: complex-type name to a shared option tree

Source keys are PascalCase (``IsCollection``, ``SingularName``). Keys the
generator does not use (descriptions, value types, ...) are ignored.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_pascal

from metagen.core import MetadataError


class SchemaError(MetadataError):
    """Raised when the metadata document does not match the expected shape."""


class OptionKind(str, Enum):
    """How an option node contributes to the nested component graph.

    - INLINE_OPTIONS: declares its own ``Options`` mapping
    - COMPLEX_TYPE: refers to exactly one shared extra object
    - LEAF: plain value, no nested component
    """

    INLINE_OPTIONS = "inline_options"
    COMPLEX_TYPE = "complex_type"
    LEAF = "leaf"


class _SourceModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class OptionNode(_SourceModel):
    """A configurable option, possibly holding nested options.

    Attributes:
        is_event: Option is an event handler (``onClick``).
        is_collection: Option holds a list of nested items.
        is_data_source: Option is a data source (treated as a collection).
        is_template: Option is a template.
        singular_name: Item name of a collection option (``items`` -> ``item``).
        options: Inline nested options.
        complex_types: Names of shared extra objects describing the value.
    """

    is_event: bool = False
    is_collection: bool = False
    is_data_source: bool = False
    is_template: bool = False
    singular_name: str | None = None
    options: dict[str, "OptionNode"] | None = None
    complex_types: list[str] | None = None

    @field_validator(
        "is_event", "is_collection", "is_data_source", "is_template", mode="before"
    )
    @classmethod
    def _null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def kind(self) -> OptionKind:
        """Classify the node once; inline options win over complex types."""
        if self.options is not None:
            return OptionKind.INLINE_OPTIONS
        if self.complex_types is not None and len(self.complex_types) == 1:
            return OptionKind.COMPLEX_TYPE
        return OptionKind.LEAF

    @property
    def complex_type(self) -> str | None:
        """The referenced type name for COMPLEX_TYPE nodes."""
        if self.kind is OptionKind.COMPLEX_TYPE:
            return self.complex_types[0]
        return None


class WidgetSchema(_SourceModel):
    """A top-level widget description."""

    module: str | None = None
    options: dict[str, OptionNode] = Field(default_factory=dict)
    is_transcluded_content: bool | None = None
    is_extension_component: bool = False

    @field_validator("is_extension_component", mode="before")
    @classmethod
    def _null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class Metadata(_SourceModel):
    """The whole metadata document.

    ``extra_objects`` is the registry consulted for complex-type references.
    """

    widgets: dict[str, WidgetSchema] = Field(default_factory=dict)
    extra_objects: dict[str, OptionNode] = Field(default_factory=dict)


def parse_metadata(data: Any) -> Metadata:
    """Validate a raw metadata tree.

    Args:
        data: Parsed JSON document.

    Returns:
        Metadata model.

    Raises:
        SchemaError: If the tree does not match the metadata shape.
    """
    try:
        return Metadata.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"Invalid metadata document: {e}") from e


__all__ = [
    "Metadata",
    "OptionKind",
    "OptionNode",
    "SchemaError",
    "WidgetSchema",
    "parse_metadata",
]

"""Input models for the widget metadata document."""

from metagen.schema.lib import (
    Metadata,
    OptionKind,
    OptionNode,
    SchemaError,
    WidgetSchema,
    parse_metadata,
)

__all__ = [
    "Metadata",
    "OptionKind",
    "OptionNode",
    "SchemaError",
    "WidgetSchema",
    "parse_metadata",
]

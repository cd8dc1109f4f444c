"""Descriptor models emitted by the generator."""

from metagen.ir.lib import (
    COLLECTION_BASE_CLASS,
    NESTED_BASE_CLASS,
    SIMPLE_BASE_PATH,
    BaseDescriptor,
    Event,
    NestedComponentRef,
    NestedDescriptor,
    NestedProperty,
    Property,
    WidgetDescriptor,
    to_document,
)

__all__ = [
    # Descriptors
    "WidgetDescriptor",
    "NestedDescriptor",
    "BaseDescriptor",
    # Parts
    "Event",
    "Property",
    "NestedProperty",
    "NestedComponentRef",
    # Fallback base
    "COLLECTION_BASE_CLASS",
    "NESTED_BASE_CLASS",
    "SIMPLE_BASE_PATH",
    # Serialization
    "to_document",
]

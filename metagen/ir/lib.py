"""Component descriptor models.

These models are the contract between the generator and the code templates
that produce wrapper classes. Every model serializes with camelCase keys
(``className``, ``isCollection``) and omits unset optional fields, so a
descriptor written to disk only carries the keys that apply to it.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Generic bases for nested components that do not derive from a shared type
COLLECTION_BASE_CLASS = "CollectionNestedOption"
NESTED_BASE_CLASS = "NestedOption"
SIMPLE_BASE_PATH = "../../core/nested-option"


class _Descriptor(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Event(_Descriptor):
    """An output event of a widget.

    Attributes:
        emit: Name of the emitted event (``onValueChanged``, ``valueChange``).
        subscribe: Public subscription name; unset for ``<name>Change``
            notifications.
    """

    emit: str
    subscribe: str | None = None


class Property(_Descriptor):
    """A bindable widget property."""

    name: str
    type: str = "any"
    is_collection: bool | None = None


class NestedProperty(_Descriptor):
    """A property of a nested component."""

    name: str


class NestedComponentRef(_Descriptor):
    """A widget's reference to one of its nested components."""

    path: str
    property_name: str
    class_name: str
    is_collection: bool = False
    has_template: bool = False


class NestedDescriptor(_Descriptor):
    """A nested component synthesized from a structured option.

    Attributes:
        class_name: Generated class name (``DxoLabel``, ``DxcItem``).
        selector: Dash-cased selector (``dxo-label``).
        option_name: Name of the option the component configures.
        property_name: Property of the parent that holds the component.
        path: Dash-cased file path stem (``label``).
        is_collection: Component is an item of a collection option.
        has_template: A ``template`` sub-option is flagged as template.
        properties: Own properties; unset once they live on a base.
        base_class: Shared base class derived from a complex type.
        base_path: Location of the base class.
        has_simple_base_class: Base is one of the generic fallbacks.
    """

    class_name: str
    selector: str
    option_name: str
    property_name: str
    path: str
    is_collection: bool = False
    has_template: bool = False
    properties: list[NestedProperty] | None = Field(default_factory=list)
    base_class: str | None = None
    base_path: str | None = None
    has_simple_base_class: bool | None = None

    @property
    def property_names(self) -> list[str]:
        return [p.name for p in self.properties or []]

    def reference(self) -> NestedComponentRef:
        """Build the reference a widget keeps to this component."""
        return NestedComponentRef(
            path=self.path,
            property_name=self.property_name,
            class_name=self.class_name,
            is_collection=self.is_collection,
            has_template=self.has_template,
        )


class BaseDescriptor(_Descriptor):
    """A shared parent class for nested components of one complex type."""

    class_name: str
    path: str
    properties: list[NestedProperty] = Field(default_factory=list)


class WidgetDescriptor(_Descriptor):
    """A top-level widget component.

    Attributes:
        class_name: Widget class name without the framework prefix
            (``TextBox``).
        widget_name: Source widget name (``dxTextBox``).
        selector: Dash-cased selector (``dx-text-box``).
        module: Import path of the widget module.
        is_transcluded_content: Widget renders transcluded content.
        is_extension: Widget is an extension component.
        is_editor: Widget has a ``value`` option.
        events: Event options followed by ``<name>Change`` notifications.
        properties: Bindable properties in source order.
        nested_components: Direct nested components, unique by class name.
    """

    class_name: str
    widget_name: str
    selector: str
    module: str
    is_transcluded_content: bool | None = None
    is_extension: bool = False
    is_editor: bool = False
    events: list[Event] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    nested_components: list[NestedComponentRef] = Field(default_factory=list)


def to_document(descriptor: BaseModel) -> dict:
    """Serialize a descriptor to a JSON-ready dict with camelCase keys.

    Example:
        >>> to_document(Property(name="value"))
        {'name': 'value', 'type': 'any'}
    """
    return descriptor.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "COLLECTION_BASE_CLASS",
    "NESTED_BASE_CLASS",
    "SIMPLE_BASE_PATH",
    "BaseDescriptor",
    "Event",
    "NestedComponentRef",
    "NestedDescriptor",
    "NestedProperty",
    "Property",
    "WidgetDescriptor",
    "to_document",
]

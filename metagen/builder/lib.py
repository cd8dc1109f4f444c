"""Widget descriptor builder.

Turns every generatable widget of the metadata document into a
``WidgetDescriptor`` and collects the nested components discovered under
its options. Options are classified as:

- events (``IsEvent``): an emit/subscribe pair, never a property
- everything else: a property, a ``<name>Change`` event and the nested
  components resolved from the option
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from metagen.core import get_logger
from metagen.ir import (
    Event,
    NestedComponentRef,
    NestedDescriptor,
    Property,
    WidgetDescriptor,
)
from metagen.naming import camelize, dasherize, trim_prefix, underscore
from metagen.resolver import resolve_complex_option
from metagen.schema import Metadata, WidgetSchema

logger = get_logger(__name__)

DEFAULT_MODULE_PREFIX = "devextreme/"
WIDGET_PREFIX = "dx"
SELECTOR_PREFIX = "dx-"
EVENT_PREFIX = "on"
EDITOR_OPTION = "value"


@dataclass
class WidgetBuild:
    """Result of building one widget.

    Attributes:
        name: Source widget name (``dxTextBox``).
        descriptor: The widget descriptor.
        nested_components: Every nested component found under the widget,
            duplicates included, in discovery order.
    """

    name: str
    descriptor: WidgetDescriptor
    nested_components: list[NestedDescriptor] = field(default_factory=list)

    @property
    def output_name(self) -> str:
        """File name stem of the widget document (``text-box``)."""
        return trim_prefix(SELECTOR_PREFIX, self.descriptor.selector)


def build_widget_descriptor(
    name: str,
    widget: WidgetSchema,
    metadata: Metadata,
    module_prefix: str = DEFAULT_MODULE_PREFIX,
) -> WidgetBuild:
    """Build the descriptor of a single widget.

    Args:
        name: Source widget name.
        widget: Widget description; must have a module.
        metadata: Whole document, supplying the extra-object registry.
        module_prefix: Prefix joined to the widget module path.

    Returns:
        WidgetBuild with the descriptor and discovered nested components.
    """
    events: list[Event] = []
    change_events: list[Event] = []
    properties: list[Property] = []
    nested_components: list[NestedDescriptor] = []

    for option_name, option in widget.options.items():
        if option.is_event:
            subscribe = camelize(
                trim_prefix(EVENT_PREFIX, option_name), lower_first_letter=True
            )
            events.append(Event(emit=option_name, subscribe=subscribe))
            continue

        properties.append(
            Property(
                name=option_name,
                is_collection=True
                if option.is_collection or option.is_data_source
                else None,
            )
        )
        change_events.append(Event(emit=f"{option_name}Change"))
        nested_components.extend(
            resolve_complex_option(metadata.extra_objects, option, option_name)
        )

    descriptor = WidgetDescriptor(
        class_name=camelize(trim_prefix(WIDGET_PREFIX, name)),
        widget_name=name,
        selector=dasherize(underscore(name)),
        module=module_prefix + widget.module,
        is_transcluded_content=widget.is_transcluded_content,
        is_extension=widget.is_extension_component,
        is_editor=EDITOR_OPTION in widget.options,
        events=events + change_events,
        properties=properties,
        nested_components=_unique_references(nested_components),
    )
    return WidgetBuild(
        name=name, descriptor=descriptor, nested_components=nested_components
    )


def build_widget_descriptors(
    metadata: Metadata,
    module_prefix: str = DEFAULT_MODULE_PREFIX,
) -> Iterator[WidgetBuild]:
    """Build every generatable widget in document order.

    Widgets without a module are skipped.

    Args:
        metadata: Parsed metadata document.
        module_prefix: Prefix joined to widget module paths.

    Yields:
        WidgetBuild per widget with a module.
    """
    for name, widget in metadata.widgets.items():
        if not widget.module:
            logger.info(f"Skipping metadata for {name}")
            continue

        logger.info(f"Generate metadata for {name}")
        yield build_widget_descriptor(name, widget, metadata, module_prefix)


def _unique_references(
    components: list[NestedDescriptor],
) -> list[NestedComponentRef]:
    """References to components, first occurrence per class name wins."""
    seen: set[str] = set()
    references: list[NestedComponentRef] = []
    for component in components:
        if component.class_name in seen:
            continue
        seen.add(component.class_name)
        references.append(component.reference())
    return references


__all__ = [
    "DEFAULT_MODULE_PREFIX",
    "WidgetBuild",
    "build_widget_descriptor",
    "build_widget_descriptors",
]

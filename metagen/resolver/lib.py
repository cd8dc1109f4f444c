"""Complex option resolver.

Walks an option tree and turns every structured option into a
``NestedDescriptor``. An option is structured when it either declares
inline ``Options`` or refers to a shared extra object through a single
complex type. Components built from an extra object are tagged with a base
class so the normalizer can hoist their shared properties.

All functions are pure: every call returns a new list and the ordering is
parent first, then its nested components depth-first.
"""

from collections.abc import Mapping

from metagen.core import get_logger
from metagen.ir import NestedDescriptor, NestedProperty
from metagen.naming import camelize, dasherize, selector_part, underscore
from metagen.schema import OptionKind, OptionNode

logger = get_logger(__name__)

TEMPLATE_OPTION = "template"


def resolve_complex_option(
    registry: Mapping[str, OptionNode],
    option: OptionNode,
    option_name: str,
    visited: frozenset[str] = frozenset(),
) -> list[NestedDescriptor]:
    """Resolve the nested components rooted at one option.

    Args:
        registry: Extra objects by complex-type name.
        option: The option to resolve.
        option_name: Name of the option in its parent.
        visited: Complex types already expanded on the current path.

    Returns:
        Nested descriptors, empty when the option is a leaf, refers to an
        unknown type or would re-enter a type on the current path.
    """
    kind = option.kind

    if kind is OptionKind.INLINE_OPTIONS:
        return expand_options(registry, option.options, option_name, visited, option)

    if kind is OptionKind.COMPLEX_TYPE:
        return _resolve_complex_type(registry, option, option_name, visited)

    return []


def _resolve_complex_type(
    registry: Mapping[str, OptionNode],
    option: OptionNode,
    option_name: str,
    visited: frozenset[str],
) -> list[NestedDescriptor]:
    type_name = option.complex_type

    if type_name in visited:
        logger.debug(f"Skipping recursive complex type {type_name} at {option_name}")
        return []

    extra_object = registry.get(type_name)
    if extra_object is None:
        logger.warning(f"Missed complex type: {type_name}")
        return []

    components = expand_options(
        registry,
        extra_object.options or {},
        option_name,
        visited | {type_name},
        option,
    )
    if not components:
        return []

    prefix = "Dxc" if option.is_collection else "Dxo"
    head = components[0].model_copy(
        update={
            "base_class": prefix + type_name,
            "base_path": dasherize(underscore(type_name)),
        }
    )
    return [head, *components[1:]]


def expand_options(
    registry: Mapping[str, OptionNode],
    nested_options: Mapping[str, OptionNode],
    option_name: str,
    visited: frozenset[str],
    owner: OptionNode,
) -> list[NestedDescriptor]:
    """Build the descriptor for one option level and everything below it.

    Args:
        registry: Extra objects by complex-type name.
        nested_options: Options of the level being expanded.
        option_name: Name of the owning option.
        visited: Complex types already expanded on the current path.
        owner: The owning option, supplying collection and singular names.

    Returns:
        The level's descriptor followed by its nested descriptors, or an
        empty list when the level has no options.
    """
    if not nested_options:
        return []

    plural_name = option_name
    if owner.is_collection and option_name == owner.singular_name:
        plural_name += "Collection"
    singular_name = owner.singular_name or plural_name

    prefix = "dxc_" if owner.is_collection else "dxo_"
    selector_source = prefix + selector_part(
        singular_name if owner.is_collection else plural_name
    )

    template = nested_options.get(TEMPLATE_OPTION)
    has_template = template is not None and template.is_template

    properties: list[NestedProperty] = []
    children: list[NestedDescriptor] = []
    for name, nested in nested_options.items():
        if name == TEMPLATE_OPTION and nested.is_template:
            continue
        properties.append(NestedProperty(name=name))
        children.extend(resolve_complex_option(registry, nested, name, visited))

    component = NestedDescriptor(
        class_name=camelize(selector_source),
        selector=dasherize(selector_source),
        option_name=option_name,
        property_name=option_name,
        path=dasherize(selector_part(plural_name)),
        is_collection=owner.is_collection,
        has_template=has_template,
        properties=properties,
    )
    return [component, *children]


__all__ = ["expand_options", "resolve_complex_option"]

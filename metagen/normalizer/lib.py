"""Component normalizer.

The same nested component is usually reached from several widgets (every
chart has a ``label``). Normalization folds those into one descriptor per
class name and hoists properties of components built from a shared complex
type onto a standalone base descriptor:

1. merge: unique by class name, properties unioned
2. extract bases: one ``BaseDescriptor`` per distinct base class
3. finalize: derived components drop their properties, the rest get a
   generic fallback base
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from metagen.core import get_logger
from metagen.ir import (
    COLLECTION_BASE_CLASS,
    NESTED_BASE_CLASS,
    SIMPLE_BASE_PATH,
    BaseDescriptor,
    NestedDescriptor,
    NestedProperty,
)

logger = get_logger(__name__)

DEFAULT_BASE_PATH_PART = "base"


@dataclass
class NormalizedComponents:
    """Output of normalization.

    Attributes:
        bases: Base descriptors, one per distinct base class.
        components: Finalized nested descriptors, unique by class name.
    """

    bases: list[BaseDescriptor] = field(default_factory=list)
    components: list[NestedDescriptor] = field(default_factory=list)


def _union_properties(
    current: list[NestedProperty], extra: Iterable[NestedProperty]
) -> list[NestedProperty]:
    """Append properties whose name is not present yet."""
    names = {p.name for p in current}
    result = list(current)
    for prop in extra:
        if prop.name not in names:
            names.add(prop.name)
            result.append(prop)
    return result


def merge_components(
    components: Iterable[NestedDescriptor],
) -> list[NestedDescriptor]:
    """Fold components into one descriptor per class name.

    The first occurrence keeps its position and attributes. Later
    occurrences contribute properties it lacks and fill ``base_class`` /
    ``base_path`` when still unset. Merging an already merged list
    returns an equal list.

    Args:
        components: Nested components in discovery order.

    Returns:
        Unique components in first-seen order.
    """
    merged: dict[str, NestedDescriptor] = {}
    for component in components:
        existing = merged.get(component.class_name)
        if existing is None:
            merged[component.class_name] = component.model_copy(
                update={"properties": list(component.properties or [])}
            )
            continue

        merged[component.class_name] = existing.model_copy(
            update={
                "properties": _union_properties(
                    existing.properties or [], component.properties or []
                ),
                "base_class": existing.base_class or component.base_class,
                "base_path": existing.base_path or component.base_path,
            }
        )
    return list(merged.values())


def extract_base_components(
    components: Iterable[NestedDescriptor],
) -> list[BaseDescriptor]:
    """Build one base descriptor per distinct base class.

    A base carries the union of the properties of every component deriving
    from it; its path is the first ``base_path`` seen for it.

    Args:
        components: Merged nested components.

    Returns:
        Base descriptors in first-seen order.
    """
    bases: dict[str, BaseDescriptor] = {}
    for component in components:
        if not component.base_class:
            continue

        existing = bases.get(component.base_class)
        if existing is None:
            bases[component.base_class] = BaseDescriptor(
                class_name=component.base_class,
                path=component.base_path or "",
                properties=list(component.properties or []),
            )
            continue

        bases[component.base_class] = existing.model_copy(
            update={
                "properties": _union_properties(
                    existing.properties, component.properties or []
                )
            }
        )
    return list(bases.values())


def finalize_components(
    components: Iterable[NestedDescriptor],
    base_path_part: str = DEFAULT_BASE_PATH_PART,
) -> list[NestedDescriptor]:
    """Produce the written form of merged components.

    Components with a base class lose their own properties and point at
    the base location relative to themselves. The others derive from a
    generic nested option class chosen by their collection flag.

    Args:
        components: Merged nested components.
        base_path_part: Sub-location of base descriptors.

    Returns:
        Finalized components.
    """
    finalized: list[NestedDescriptor] = []
    for component in components:
        if component.base_class:
            update = {
                "properties": None,
                "base_path": f"./{base_path_part}/{component.base_path}",
            }
        else:
            update = {
                "base_class": COLLECTION_BASE_CLASS
                if component.is_collection
                else NESTED_BASE_CLASS,
                "base_path": SIMPLE_BASE_PATH,
                "has_simple_base_class": True,
            }
        finalized.append(component.model_copy(update=update))
    return finalized


def normalize_components(
    components: Iterable[NestedDescriptor],
    base_path_part: str = DEFAULT_BASE_PATH_PART,
) -> NormalizedComponents:
    """Run merge, base extraction and finalization.

    Args:
        components: Every nested component from every widget.
        base_path_part: Sub-location of base descriptors.

    Returns:
        NormalizedComponents with bases and finalized components.
    """
    merged = merge_components(components)
    bases = extract_base_components(merged)
    logger.info(
        f"Normalized {len(merged)} nested components with {len(bases)} bases"
    )
    return NormalizedComponents(
        bases=bases,
        components=finalize_components(merged, base_path_part),
    )


__all__ = [
    "DEFAULT_BASE_PATH_PART",
    "NormalizedComponents",
    "extract_base_components",
    "finalize_components",
    "merge_components",
    "normalize_components",
]

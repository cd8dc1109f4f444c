"""Unit tests for the component normalizer."""

import pytest

from metagen.builder import build_widget_descriptors
from metagen.ir import (
    COLLECTION_BASE_CLASS,
    NESTED_BASE_CLASS,
    SIMPLE_BASE_PATH,
    NestedDescriptor,
    NestedProperty,
)
from metagen.normalizer import (
    extract_base_components,
    finalize_components,
    merge_components,
    normalize_components,
)


def component(
    class_name: str,
    props: list[str] | None = None,
    base_class: str | None = None,
    base_path: str | None = None,
    is_collection: bool = False,
) -> NestedDescriptor:
    path = class_name[3:].lower()
    return NestedDescriptor(
        class_name=class_name,
        selector=f"dxo-{path}",
        option_name=path,
        property_name=path,
        path=path,
        is_collection=is_collection,
        properties=[NestedProperty(name=p) for p in props or []],
        base_class=base_class,
        base_path=base_path,
    )


class TestMergeComponents:
    """Step 1: unique by class name."""

    @pytest.mark.unit
    def test_unique_components_unchanged(self):
        """Unique components pass through."""
        components = [component("DxoFont", ["size"]), component("DxoTitle", ["text"])]
        assert merge_components(components) == components

    @pytest.mark.unit
    def test_duplicates_union_properties(self):
        """Duplicates are folded with properties unioned."""
        merged = merge_components(
            [
                component("DxoFont", ["size", "color"]),
                component("DxoTitle", ["text"]),
                component("DxoFont", ["color", "weight"]),
            ]
        )
        assert [c.class_name for c in merged] == ["DxoFont", "DxoTitle"]
        assert merged[0].property_names == ["size", "color", "weight"]

    @pytest.mark.unit
    def test_first_base_wins(self):
        """First base class seen is kept."""
        merged = merge_components(
            [
                component("DxoLabel", ["text"]),
                component("DxoLabel", ["text"], "DxoLabel", "label"),
                component("DxoLabel", ["text"], "DxoOther", "other"),
            ]
        )
        [label] = merged
        assert label.base_class == "DxoLabel"
        assert label.base_path == "label"

    @pytest.mark.unit
    def test_idempotent(self):
        """Merging twice gives the same result."""
        once = merge_components(
            [
                component("DxoFont", ["size"]),
                component("DxoFont", ["color"], "DxoFont", "font"),
                component("DxcItem", ["text"], is_collection=True),
            ]
        )
        assert merge_components(once) == once

    @pytest.mark.unit
    def test_inputs_not_mutated(self):
        """Input components are left unchanged."""
        first = component("DxoFont", ["size"])
        second = component("DxoFont", ["color"])
        merge_components([first, second])
        assert first.property_names == ["size"]
        assert second.property_names == ["color"]


class TestExtractBaseComponents:
    """Step 2: base descriptors."""

    @pytest.mark.unit
    def test_one_base_per_base_class(self):
        """One base descriptor per distinct base class."""
        bases = extract_base_components(
            [
                component("DxoLabel", ["text"], "DxoLabel", "label"),
                component("DxoFont", ["size"]),
                component("DxoAxisLabel", ["text", "visible"], "DxoLabel", "label"),
            ]
        )
        [base] = bases
        assert base.class_name == "DxoLabel"
        assert base.path == "label"

    @pytest.mark.unit
    def test_properties_unioned_across_derivers(self):
        """Base properties are the union over all derivers."""
        [base] = extract_base_components(
            [
                component("DxoLabel", ["text"], "DxoLabel", "label"),
                component("DxoAxisLabel", ["text", "visible"], "DxoLabel", "label"),
            ]
        )
        assert [p.name for p in base.properties] == ["text", "visible"]

    @pytest.mark.unit
    def test_no_bases_without_base_class(self):
        """Components without a base class produce no base."""
        assert extract_base_components([component("DxoFont", ["size"])]) == []


class TestFinalizeComponents:
    """Step 3: written form."""

    @pytest.mark.unit
    def test_derived_component_drops_properties(self):
        """Derived components drop properties and point at their base."""
        [label] = finalize_components(
            [component("DxoLabel", ["text"], "DxoLabel", "label")]
        )
        assert label.properties is None
        assert label.base_class == "DxoLabel"
        assert label.base_path == "./base/label"
        assert label.has_simple_base_class is None

    @pytest.mark.unit
    def test_custom_base_path_part(self):
        """Base path uses the given base part."""
        [label] = finalize_components(
            [component("DxoLabel", ["text"], "DxoLabel", "label")], "shared"
        )
        assert label.base_path == "./shared/label"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("is_collection", "expected"),
        [(True, COLLECTION_BASE_CLASS), (False, NESTED_BASE_CLASS)],
    )
    def test_simple_base(self, is_collection, expected):
        """Generic base depends on the collection flag."""
        [result] = finalize_components(
            [component("DxoFont", ["size"], is_collection=is_collection)]
        )
        assert result.base_class == expected
        assert result.base_path == SIMPLE_BASE_PATH
        assert result.has_simple_base_class is True
        assert result.property_names == ["size"]


class TestNormalizeComponents:
    """End-to-end normalization of widget builds."""

    @pytest.mark.unit
    def test_shared_label_across_widgets(self, metadata):
        """Label shared by charts becomes one component and one base."""
        nested = [
            c
            for build in build_widget_descriptors(metadata)
            for c in build.nested_components
        ]
        result = normalize_components(nested)

        [label_base] = [b for b in result.bases if b.class_name == "DxoLabel"]
        assert label_base.path == "label"
        assert [p.name for p in label_base.properties] == ["text", "font"]

        labels = [c for c in result.components if c.class_name == "DxoLabel"]
        assert len(labels) == 1
        assert labels[0].base_class == "DxoLabel"
        assert labels[0].properties is None

    @pytest.mark.unit
    def test_class_names_unique(self, metadata):
        """Normalized class names are unique."""
        nested = [
            c
            for build in build_widget_descriptors(metadata)
            for c in build.nested_components
        ]
        names = [c.class_name for c in normalize_components(nested).components]
        assert len(names) == len(set(names))
        assert set(names) == {"DxcItem", "DxoLabel", "DxoFont"}

    @pytest.mark.unit
    def test_every_component_has_a_base(self, metadata):
        """Every finalized component has a base class and path."""
        nested = [
            c
            for build in build_widget_descriptors(metadata)
            for c in build.nested_components
        ]
        for c in normalize_components(nested).components:
            if c.has_simple_base_class:
                expected = COLLECTION_BASE_CLASS if c.is_collection else NESTED_BASE_CLASS
                assert c.base_class == expected
            else:
                assert not c.properties
                assert c.base_path.startswith("./base/")

    @pytest.mark.unit
    def test_union_from_two_widgets(self):
        """Label properties seen by different widgets end up on one base."""
        result = normalize_components(
            [
                component("DxoLabel", ["text"], "DxoLabel", "label"),
                component("DxoLabel", ["visible"], "DxoLabel", "label"),
            ]
        )
        [base] = result.bases
        assert [p.name for p in base.properties] == ["text", "visible"]
        [label] = result.components
        assert label.properties is None

    @pytest.mark.unit
    def test_empty_input(self):
        """Empty input gives empty output."""
        result = normalize_components([])
        assert result.bases == []
        assert result.components == []

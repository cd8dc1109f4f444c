"""Unit tests for the complex option resolver."""

import logging

import pytest

from metagen.resolver import expand_options, resolve_complex_option
from metagen.schema import OptionNode


def option(data: dict) -> OptionNode:
    """Build an option node from source-shaped data."""
    return OptionNode.model_validate(data)


def registry(data: dict) -> dict[str, OptionNode]:
    return {name: option(tree) for name, tree in data.items()}


class TestLeafOptions:
    """Options that produce no nested component."""

    @pytest.mark.unit
    def test_plain_option(self):
        """Plain options produce nothing."""
        assert resolve_complex_option({}, option({}), "width") == []

    @pytest.mark.unit
    def test_several_complex_types_is_leaf(self):
        """Several complex types are treated as a plain value."""
        reg = registry({"A": {"Options": {"x": {}}}, "B": {"Options": {"y": {}}}})
        node = option({"ComplexTypes": ["A", "B"]})
        assert resolve_complex_option(reg, node, "value") == []

    @pytest.mark.unit
    def test_empty_inline_options(self):
        """Empty inline options produce nothing."""
        assert resolve_complex_option({}, option({"Options": {}}), "font") == []


class TestInlineOptions:
    """Options declaring their nested options inline."""

    @pytest.mark.unit
    def test_single_level(self):
        """Inline options produce one component."""
        node = option({"Options": {"size": {}, "color": {}}})
        [font] = resolve_complex_option({}, node, "font")

        assert font.class_name == "DxoFont"
        assert font.selector == "dxo-font"
        assert font.path == "font"
        assert font.option_name == "font"
        assert font.property_name == "font"
        assert font.is_collection is False
        assert font.has_template is False
        assert font.property_names == ["size", "color"]
        assert font.base_class is None

    @pytest.mark.unit
    def test_camel_case_option_name(self):
        """Option name is converted for class and selector."""
        node = option({"Options": {"enabled": {}}})
        [component] = resolve_complex_option({}, node, "columnFixing")
        assert component.class_name == "DxoColumnFixing"
        assert component.selector == "dxo-column-fixing"
        assert component.path == "column-fixing"

    @pytest.mark.unit
    def test_parent_precedes_children(self):
        """Parent components come before their children."""
        node = option(
            {
                "Options": {
                    "title": {"Options": {"font": {"Options": {"size": {}}}}},
                    "visible": {},
                }
            }
        )
        components = resolve_complex_option({}, node, "legend")
        assert [c.class_name for c in components] == [
            "DxoLegend",
            "DxoTitle",
            "DxoFont",
        ]
        assert components[0].property_names == ["title", "visible"]

    @pytest.mark.unit
    def test_collection_with_singular_name(self):
        """Collection uses its singular name for class and selector."""
        node = option(
            {
                "IsCollection": True,
                "SingularName": "item",
                "Options": {"text": {}},
            }
        )
        [item] = resolve_complex_option({}, node, "items")
        assert item.class_name == "DxcItem"
        assert item.selector == "dxc-item"
        assert item.path == "items"
        assert item.is_collection is True
        assert item.property_names == ["text"]

    @pytest.mark.unit
    def test_collection_named_like_its_item(self):
        """A collection whose name equals its singular name gets a Collection path."""
        node = option(
            {
                "IsCollection": True,
                "SingularName": "series",
                "Options": {"name": {}},
            }
        )
        [series] = resolve_complex_option({}, node, "series")
        assert series.path == "series-collection"
        assert series.selector == "dxc-series"
        assert series.class_name == "DxcSeries"

    @pytest.mark.unit
    def test_collection_without_singular_name(self):
        """Collection without singular name keeps its own name."""
        node = option({"IsCollection": True, "Options": {"text": {}}})
        [component] = resolve_complex_option({}, node, "toolbarItems")
        assert component.selector == "dxc-toolbar-items"
        assert component.path == "toolbar-items"

    @pytest.mark.unit
    def test_template_sub_option(self):
        """Template sub-option sets hasTemplate and is not a property."""
        node = option(
            {
                "Options": {
                    "template": {"IsTemplate": True},
                    "text": {},
                }
            }
        )
        [component] = resolve_complex_option({}, node, "button")
        assert component.has_template is True
        assert component.property_names == ["text"]

    @pytest.mark.unit
    def test_template_not_flagged_is_a_property(self):
        """Unflagged template option is an ordinary property."""
        node = option({"Options": {"template": {}, "text": {}}})
        [component] = resolve_complex_option({}, node, "button")
        assert component.has_template is False
        assert component.property_names == ["template", "text"]

    @pytest.mark.unit
    def test_dotted_option_name(self):
        """Dotted option names are flattened."""
        node = option({"Options": {"visible": {}}})
        [component] = resolve_complex_option({}, node, "argumentAxis.label")
        assert component.path == "argument-axis-label"
        assert component.class_name == "DxoArgumentAxisLabel"


class TestComplexTypes:
    """Options referring to shared extra objects."""

    @pytest.mark.unit
    def test_base_class_tagging(self):
        """Complex type component is tagged with its base class."""
        reg = registry({"Label": {"Options": {"text": {}, "visible": {}}}})
        node = option({"ComplexTypes": ["Label"]})
        [label] = resolve_complex_option(reg, node, "label")

        assert label.class_name == "DxoLabel"
        assert label.base_class == "DxoLabel"
        assert label.base_path == "label"
        assert label.property_names == ["text", "visible"]

    @pytest.mark.unit
    def test_collection_base_class_prefix(self):
        """Collection complex type uses the Dxc base prefix."""
        reg = registry({"CommonSeries": {"Options": {"type": {}}}})
        node = option(
            {"IsCollection": True, "SingularName": "series", "ComplexTypes": ["CommonSeries"]}
        )
        [series] = resolve_complex_option(reg, node, "series")
        assert series.base_class == "DxcCommonSeries"
        assert series.base_path == "common-series"

    @pytest.mark.unit
    def test_only_first_component_tagged(self):
        """Only the head component is tagged."""
        reg = registry(
            {"Label": {"Options": {"font": {"Options": {"size": {}}}}}}
        )
        components = resolve_complex_option(
            reg, option({"ComplexTypes": ["Label"]}), "label"
        )
        assert [c.class_name for c in components] == ["DxoLabel", "DxoFont"]
        assert components[0].base_class == "DxoLabel"
        assert components[1].base_class is None

    @pytest.mark.unit
    def test_nested_complex_type(self):
        """Complex types inside complex types are resolved."""
        reg = registry(
            {
                "Label": {"Options": {"font": {"ComplexTypes": ["Font"]}}},
                "Font": {"Options": {"size": {}}},
            }
        )
        components = resolve_complex_option(
            reg, option({"ComplexTypes": ["Label"]}), "label"
        )
        assert [(c.class_name, c.base_class) for c in components] == [
            ("DxoLabel", "DxoLabel"),
            ("DxoFont", "DxoFont"),
        ]

    @pytest.mark.unit
    def test_missing_type_warns_and_skips(self, caplog):
        """Unknown complex type logs a warning and yields nothing."""
        with caplog.at_level(logging.WARNING):
            result = resolve_complex_option(
                {}, option({"ComplexTypes": ["Ghost"]}), "ghost"
            )
        assert result == []
        assert "Ghost" in caplog.text

    @pytest.mark.unit
    def test_extra_object_without_options(self):
        """Extra object without options yields nothing."""
        reg = registry({"Empty": {}})
        assert resolve_complex_option(reg, option({"ComplexTypes": ["Empty"]}), "e") == []

    @pytest.mark.unit
    def test_registry_not_mutated(self):
        """Registry entries are left unchanged."""
        reg = registry({"Label": {"Options": {"text": {}}}})
        before = {k: v.model_dump() for k, v in reg.items()}
        resolve_complex_option(reg, option({"ComplexTypes": ["Label"]}), "label")
        assert {k: v.model_dump() for k, v in reg.items()} == before


class TestCycleGuard:
    """Self-referential complex types terminate."""

    @pytest.mark.unit
    def test_direct_self_reference(self):
        """A type referencing itself terminates."""
        reg = registry(
            {"Node": {"Options": {"name": {}, "child": {"ComplexTypes": ["Node"]}}}}
        )
        components = resolve_complex_option(
            reg, option({"ComplexTypes": ["Node"]}), "root"
        )
        assert [c.class_name for c in components] == ["DxoRoot"]
        assert components[0].property_names == ["name", "child"]

    @pytest.mark.unit
    def test_multi_step_cycle(self):
        """A cycle through several types terminates."""
        reg = registry(
            {
                "A": {"Options": {"b": {"ComplexTypes": ["B"]}}},
                "B": {"Options": {"c": {"ComplexTypes": ["C"]}}},
                "C": {"Options": {"a": {"ComplexTypes": ["A"]}}},
            }
        )
        components = resolve_complex_option(reg, option({"ComplexTypes": ["A"]}), "a")
        assert [c.class_name for c in components] == ["DxoA", "DxoB", "DxoC"]

    @pytest.mark.unit
    def test_sibling_reuse_is_not_a_cycle(self):
        """The same type reached through two siblings is expanded twice."""
        reg = registry({"Font": {"Options": {"size": {}}}})
        node = option(
            {
                "Options": {
                    "titleFont": {"ComplexTypes": ["Font"]},
                    "labelFont": {"ComplexTypes": ["Font"]},
                }
            }
        )
        components = resolve_complex_option(reg, node, "style")
        assert [c.class_name for c in components] == [
            "DxoStyle",
            "DxoTitleFont",
            "DxoLabelFont",
        ]
        assert {c.base_class for c in components[1:]} == {"DxoFont"}

    @pytest.mark.unit
    def test_visited_types_skip_immediately(self):
        """Already visited types are not expanded."""
        reg = registry({"Label": {"Options": {"text": {}}}})
        result = resolve_complex_option(
            reg, option({"ComplexTypes": ["Label"]}), "label", frozenset({"Label"})
        )
        assert result == []


class TestExpandOptions:
    """Direct tests of the level expansion."""

    @pytest.mark.unit
    def test_empty_options(self):
        """No options gives no components."""
        assert expand_options({}, {}, "font", frozenset(), option({})) == []

    @pytest.mark.unit
    def test_uses_owner_flags(self):
        """Owner flags drive collection naming."""
        owner = option({"IsCollection": True, "SingularName": "column"})
        [component] = expand_options(
            {}, {"caption": option({})}, "columns", frozenset(), owner
        )
        assert component.class_name == "DxcColumn"
        assert component.path == "columns"
        assert component.is_collection is True

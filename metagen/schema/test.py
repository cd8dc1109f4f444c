"""Unit tests for metadata input models."""

import pytest

from metagen.schema import (
    Metadata,
    OptionKind,
    OptionNode,
    SchemaError,
    WidgetSchema,
    parse_metadata,
)


class TestOptionNode:
    """Tests for OptionNode parsing and classification."""

    @pytest.mark.unit
    def test_pascal_case_keys(self):
        """Source keys are PascalCase."""
        node = OptionNode.model_validate(
            {
                "IsCollection": True,
                "SingularName": "item",
                "Options": {"text": {}},
            }
        )
        assert node.is_collection is True
        assert node.singular_name == "item"
        assert set(node.options) == {"text"}

    @pytest.mark.unit
    def test_null_flags_are_false(self):
        """Null flags read as false."""
        node = OptionNode.model_validate({"IsCollection": None, "IsEvent": None})
        assert node.is_collection is False
        assert node.is_event is False

    @pytest.mark.unit
    def test_unknown_keys_ignored(self):
        """Unused source keys are ignored."""
        node = OptionNode.model_validate({"Description": "x", "ValueTypes": []})
        assert node.kind is OptionKind.LEAF

    @pytest.mark.unit
    def test_inline_options_kind(self):
        """Inline options win over complex types."""
        node = OptionNode(options={"a": OptionNode()}, complex_types=["Label"])
        assert node.kind is OptionKind.INLINE_OPTIONS
        assert node.complex_type is None

    @pytest.mark.unit
    def test_empty_inline_options_still_inline(self):
        """An empty options map is still inline."""
        assert OptionNode(options={}).kind is OptionKind.INLINE_OPTIONS

    @pytest.mark.unit
    def test_single_complex_type(self):
        """Exactly one complex type is a complex type reference."""
        node = OptionNode(complex_types=["Label"])
        assert node.kind is OptionKind.COMPLEX_TYPE
        assert node.complex_type == "Label"

    @pytest.mark.unit
    @pytest.mark.parametrize("types", [[], ["Label", "Font"], None])
    def test_zero_or_many_complex_types_is_leaf(self, types):
        """Zero or several complex types is a leaf."""
        assert OptionNode(complex_types=types).kind is OptionKind.LEAF

    @pytest.mark.unit
    def test_nested_options_are_models(self):
        """Nested options are parsed into models."""
        node = OptionNode.model_validate(
            {"Options": {"font": {"Options": {"size": {}}}}}
        )
        assert isinstance(node.options["font"], OptionNode)
        assert node.options["font"].kind is OptionKind.INLINE_OPTIONS


class TestMetadata:
    """Tests for the whole document model."""

    @pytest.mark.unit
    def test_parse_widgets_and_extra_objects(self):
        """Widgets and extra objects are parsed."""
        metadata = parse_metadata(
            {
                "Widgets": {
                    "dxButton": {
                        "Module": "ui/button",
                        "IsExtensionComponent": False,
                        "Options": {"text": {}},
                    }
                },
                "ExtraObjects": {"Label": {"Options": {"text": {}}}},
            }
        )
        assert isinstance(metadata.widgets["dxButton"], WidgetSchema)
        assert metadata.widgets["dxButton"].module == "ui/button"
        assert metadata.extra_objects["Label"].kind is OptionKind.INLINE_OPTIONS

    @pytest.mark.unit
    def test_null_widget_flag_is_false(self):
        """Null extension flag on a widget reads as false."""
        metadata = parse_metadata(
            {
                "Widgets": {
                    "dxButton": {
                        "Module": "ui/button",
                        "IsExtensionComponent": None,
                        "IsTranscludedContent": None,
                        "Options": {},
                    }
                }
            }
        )
        widget = metadata.widgets["dxButton"]
        assert widget.is_extension_component is False
        assert widget.is_transcluded_content is None

    @pytest.mark.unit
    def test_widget_order_preserved(self):
        """Widget order follows the document."""
        metadata = parse_metadata(
            {"Widgets": {"dxB": {}, "dxA": {}, "dxC": {}}}
        )
        assert list(metadata.widgets) == ["dxB", "dxA", "dxC"]

    @pytest.mark.unit
    def test_missing_sections_default_empty(self):
        """Missing sections default to empty."""
        metadata = parse_metadata({})
        assert metadata == Metadata()

    @pytest.mark.unit
    def test_malformed_document_raises_schema_error(self):
        """Malformed widgets raise SchemaError."""
        with pytest.raises(SchemaError):
            parse_metadata({"Widgets": {"dxButton": {"Options": "nope"}}})

    @pytest.mark.unit
    def test_non_mapping_document_raises_schema_error(self):
        """A non-mapping document raises SchemaError."""
        with pytest.raises(SchemaError):
            parse_metadata(["not", "a", "mapping"])

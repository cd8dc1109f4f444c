"""Unit tests for descriptor models."""

import pytest

from metagen.ir import (
    BaseDescriptor,
    Event,
    NestedDescriptor,
    NestedProperty,
    Property,
    WidgetDescriptor,
    to_document,
)


def _nested(**kwargs) -> NestedDescriptor:
    fields = {
        "class_name": "DxoLabel",
        "selector": "dxo-label",
        "option_name": "label",
        "property_name": "label",
        "path": "label",
    }
    fields.update(kwargs)
    return NestedDescriptor(**fields)


class TestToDocument:
    """Tests for descriptor serialization."""

    @pytest.mark.unit
    def test_camel_case_keys(self):
        """Documents use camelCase keys."""
        doc = to_document(_nested(properties=[NestedProperty(name="text")]))
        assert doc == {
            "className": "DxoLabel",
            "selector": "dxo-label",
            "optionName": "label",
            "propertyName": "label",
            "path": "label",
            "isCollection": False,
            "hasTemplate": False,
            "properties": [{"name": "text"}],
        }

    @pytest.mark.unit
    def test_unset_fields_omitted(self):
        """Dropped properties and absent bases do not appear."""
        doc = to_document(_nested(properties=None, base_class="DxoLabel"))
        assert "properties" not in doc
        assert "basePath" not in doc
        assert doc["baseClass"] == "DxoLabel"

    @pytest.mark.unit
    def test_event_without_subscribe(self):
        """Event without subscribe omits the key."""
        assert to_document(Event(emit="valueChange")) == {"emit": "valueChange"}

    @pytest.mark.unit
    def test_property_collection_flag(self):
        """Collection flag is written when set."""
        assert to_document(Property(name="items", is_collection=True)) == {
            "name": "items",
            "type": "any",
            "isCollection": True,
        }

    @pytest.mark.unit
    def test_widget_descriptor(self):
        """Widget descriptor dumps every field."""
        widget = WidgetDescriptor(
            class_name="TextBox",
            widget_name="dxTextBox",
            selector="dx-text-box",
            module="devextreme/ui/text_box",
        )
        doc = to_document(widget)
        assert doc["className"] == "TextBox"
        assert doc["events"] == []
        assert doc["properties"] == []
        assert doc["nestedComponents"] == []
        assert doc["isEditor"] is False
        assert "isTranscludedContent" not in doc

    @pytest.mark.unit
    def test_populate_by_alias(self):
        """Descriptors can be rebuilt from their documents."""
        base = BaseDescriptor.model_validate(
            {"className": "DxoFont", "path": "font", "properties": [{"name": "size"}]}
        )
        assert base.class_name == "DxoFont"
        assert base.properties[0].name == "size"


class TestNestedDescriptor:
    """Tests for NestedDescriptor helpers."""

    @pytest.mark.unit
    def test_reference(self):
        """Reference carries path, names and flags."""
        ref = _nested(is_collection=True, has_template=True).reference()
        assert ref.class_name == "DxoLabel"
        assert ref.property_name == "label"
        assert ref.path == "label"
        assert ref.is_collection is True
        assert ref.has_template is True

    @pytest.mark.unit
    def test_property_names(self):
        """Property names are listed in order."""
        nested = _nested(
            properties=[NestedProperty(name="a"), NestedProperty(name="b")]
        )
        assert nested.property_names == ["a", "b"]
        assert _nested(properties=None).property_names == []

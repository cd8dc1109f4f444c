"""Unit tests for name formatting helpers."""

import pytest

from metagen.naming import (
    camelize,
    dasherize,
    lower_first,
    selector_part,
    trim_prefix,
    underscore,
)


class TestUnderscore:
    """Tests for underscore()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("dxTextBox", "dx_text_box"),
            ("Label", "label"),
            ("HTMLEditor", "html_editor"),
            ("dxDataGrid2", "dx_data_grid2"),
            ("already_snake", "already_snake"),
            ("dashed-name", "dashed_name"),
        ],
    )
    def test_conversion(self, name, expected):
        """Camel and kebab names become snake case."""
        assert underscore(name) == expected

    @pytest.mark.unit
    def test_keeps_dots(self):
        """Dots survive so nested type names stay recognizable."""
        assert underscore("dxChart.commonSeries") == "dx_chart.common_series"


class TestDasherize:
    """Tests for dasherize()."""

    @pytest.mark.unit
    def test_underscores_become_dashes(self):
        """Underscores become dashes."""
        assert dasherize("dx_text_box") == "dx-text-box"

    @pytest.mark.unit
    def test_composed_with_underscore(self):
        """Underscore then dasherize gives a selector name."""
        assert dasherize(underscore("dxTextBox")) == "dx-text-box"


class TestCamelize:
    """Tests for camelize()."""

    @pytest.mark.unit
    def test_snake_to_pascal(self):
        """Snake case becomes PascalCase."""
        assert camelize("dxo_label") == "DxoLabel"
        assert camelize("dxc_item") == "DxcItem"

    @pytest.mark.unit
    def test_preserves_inner_case(self):
        """Inner capitals are preserved."""
        assert camelize("TextBox") == "TextBox"
        assert camelize("textBox") == "TextBox"

    @pytest.mark.unit
    def test_lower_first_letter(self):
        """First letter can be lowered."""
        assert camelize("ValueChanged", lower_first_letter=True) == "valueChanged"

    @pytest.mark.unit
    def test_empty(self):
        """Empty name stays empty."""
        assert camelize("") == ""


class TestSmallHelpers:
    """Tests for prefix trimming and selector parts."""

    @pytest.mark.unit
    def test_trim_prefix(self):
        """Leading prefix is removed."""
        assert trim_prefix("dx-", "dx-text-box") == "text-box"
        assert trim_prefix("dx-", "text-box") == "text-box"

    @pytest.mark.unit
    def test_lower_first(self):
        """Only the first letter is lowered."""
        assert lower_first("Click") == "click"
        assert lower_first("") == ""

    @pytest.mark.unit
    def test_selector_part_flattens_dots(self):
        """Dots become underscores in selector parts."""
        assert selector_part("series.label") == "series_label"
        assert selector_part("columnFixing") == "column_fixing"

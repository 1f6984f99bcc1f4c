#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for formatter options."""

import dataclasses

import pytest

from norgfmt.exceptions import ValidationError
from norgfmt.options import NorgFormatterOptions


@pytest.mark.unit
class TestNorgFormatterOptions:
    """Test defaults, validation and cloning."""

    def test_defaults(self):
        options = NorgFormatterOptions()
        assert options.line_length == 80
        assert options.newline_after_headings is False
        assert options.indent_headings is False

    def test_frozen(self):
        options = NorgFormatterOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.line_length = 10

    def test_create_updated_returns_new_instance(self):
        options = NorgFormatterOptions()
        updated = options.create_updated(line_length=60)
        assert updated.line_length == 60
        assert options.line_length == 80

    @pytest.mark.parametrize("value", [0, -5, True, "80", 8.5])
    def test_invalid_line_length(self, value):
        with pytest.raises(ValueError, match="line_length"):
            NorgFormatterOptions(line_length=value)

    def test_field_metadata_describes_every_option(self):
        for field in dataclasses.fields(NorgFormatterOptions):
            assert field.metadata["help"]
            assert field.metadata["importance"] in {"core", "advanced"}

    def test_to_dict(self):
        assert NorgFormatterOptions(line_length=100).to_dict() == {
            "line_length": 100,
            "newline_after_headings": False,
            "indent_headings": False,
        }


@pytest.mark.unit
class TestFromDict:
    """Test building options from configuration mappings."""

    def test_snake_and_kebab_case(self):
        options = NorgFormatterOptions.from_dict({"line-length": 72, "indent_headings": True})
        assert options == NorgFormatterOptions(line_length=72, indent_headings=True)

    def test_empty_mapping_gives_defaults(self):
        assert NorgFormatterOptions.from_dict({}) == NorgFormatterOptions()

    def test_unknown_key(self):
        with pytest.raises(ValidationError, match="Unknown option 'line-width'") as exc_info:
            NorgFormatterOptions.from_dict({"line-width": 72})
        assert exc_info.value.parameter_name == "line-width"
        assert exc_info.value.parameter_value == 72

    def test_invalid_value_wrapped(self):
        with pytest.raises(ValidationError, match="must be positive") as exc_info:
            NorgFormatterOptions.from_dict({"line_length": 0})
        assert isinstance(exc_info.value.original_error, ValueError)

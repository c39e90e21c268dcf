"""Unit tests for the calculate_age tool."""

import json

import pytest

from age_engine.errors import InvalidDate, InvalidRange
from age_engine.tools import calculate_age


@pytest.mark.unit
class TestCalculateAgeHappyPath:
    def test_returns_json_string(self):
        result = calculate_age("1990-01-01", "2000-01-01")
        assert isinstance(result, str)
        assert isinstance(json.loads(result), dict)

    def test_known_span(self):
        payload = json.loads(calculate_age("1990-01-01", "2000-01-01"))
        assert payload["years"] == 10
        assert payload["total_days"] == 3652
        assert payload["weeks"] == 521

    def test_next_birthday_is_iso_string(self):
        payload = json.loads(calculate_age("2000-01-01", "2000-01-01"))
        assert payload["next_birthday"] == "2001-01-01"
        assert payload["days_until_next_birthday"] == 366

    def test_milestones_are_serialised(self):
        payload = json.loads(calculate_age("1990-01-01", "2000-01-01"))
        first = payload["milestones"][0]
        assert first["label"] == "10,000 days on Earth"
        assert first["unit"] == "days"
        assert first["status"] == "upcoming"
        assert first["eta"] == 10_000 - 3652

    def test_cosmic_block_included(self):
        payload = json.loads(calculate_age("1990-01-01", "2000-01-01"))
        assert payload["cosmic"]["sunrises"] == 3652
        assert payload["cosmic"]["lunar_cycles"] == 124

    def test_reference_date_defaults_to_today(self):
        import datetime

        payload = json.loads(calculate_age("2000-01-01"))
        assert payload["reference_date"] == datetime.date.today().isoformat()

    def test_empty_reference_date_means_today(self):
        import datetime

        payload = json.loads(calculate_age("2000-01-01", ""))
        assert payload["reference_date"] == datetime.date.today().isoformat()


@pytest.mark.unit
class TestCalculateAgeValidation:
    def test_invalid_birth_date_raises_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            calculate_age("1990/01/01", "2024-01-01")
        assert "birth_date" in str(exc_info.value)

    def test_invalid_birth_date_is_invalid_date(self):
        with pytest.raises(InvalidDate):
            calculate_age("2023-02-29", "2024-01-01")

    def test_invalid_reference_date(self):
        with pytest.raises(InvalidDate) as exc_info:
            calculate_age("1990-01-01", "2024-00-15")
        assert "reference_date" in str(exc_info.value)

    def test_birth_after_reference(self):
        with pytest.raises(InvalidRange):
            calculate_age("2030-01-01", "2020-01-01")


@pytest.mark.unit
class TestCalculateAgeToolSpec:
    """The tool_spec is sent verbatim to the model; its shape drives parameter extraction."""

    def test_tool_spec_name_matches_function_name(self):
        assert calculate_age.tool_spec["name"] == "calculate_age"

    def test_tool_spec_description_is_non_empty(self):
        assert len(calculate_age.tool_spec["description"].strip()) > 50

    def test_tool_spec_has_both_properties(self):
        props = calculate_age.tool_spec["inputSchema"]["json"]["properties"]
        assert "birth_date" in props
        assert "reference_date" in props

    def test_only_birth_date_is_required(self):
        required = set(calculate_age.tool_spec["inputSchema"]["json"]["required"])
        assert required == {"birth_date"}


@pytest.mark.unit
class TestCalculateAgeDocstring:
    def test_docstring_contains_use_this_tool(self):
        assert "Use this tool" in calculate_age.__doc__

    def test_docstring_mentions_yyyy_mm_dd_format(self):
        assert "YYYY-MM-DD" in calculate_age.__doc__

    def test_docstring_mentions_raises_value_error(self):
        assert "ValueError" in calculate_age.__doc__

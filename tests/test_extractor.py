"""Tests for battlemetricspresence.extractor."""

import pytest

from battlemetricspresence.exceptions import ExtractionError
from battlemetricspresence.extractor import (
    MISSING, extract_snapshot, format_status_text, get_nested_value
)
from battlemetricspresence.models import DEFAULT_JOINING_FIELD


# ---------------------------------------------------------------------------
# format_status_text
# ---------------------------------------------------------------------------

class TestFormatStatusText:
    def test_without_queue(self) -> None:
        assert format_status_text(45, 100, 0) == "[45/100]"

    def test_with_queue(self) -> None:
        assert format_status_text(45, 100, 3) == "[45/100 - 3 joining]"

    def test_all_zero_is_valid(self) -> None:
        assert format_status_text(0, 0, 0) == "[0/0]"

    def test_joining_defaults_to_zero(self) -> None:
        assert format_status_text(12, 50) == "[12/50]"

    def test_integral_floats_render_as_integers(self) -> None:
        assert format_status_text(45.0, 100.0, 2.0) == "[45/100 - 2 joining]"

    def test_no_thousands_separator(self) -> None:
        assert format_status_text(1200, 2000, 1500) == "[1200/2000 - 1500 joining]"


# ---------------------------------------------------------------------------
# get_nested_value
# ---------------------------------------------------------------------------

class TestGetNestedValue:
    def test_resolves_full_path(self) -> None:
        assert get_nested_value({"a": {"b": {"c": 7}}}, "a.b.c") == 7

    def test_missing_leaf(self) -> None:
        assert get_nested_value({"a": {"b": {}}}, "a.b.c") is MISSING

    def test_missing_intermediate(self) -> None:
        assert get_nested_value({"a": {}}, "a.b.c") is MISSING

    def test_non_mapping_intermediate(self) -> None:
        assert get_nested_value({"a": {"b": 5}}, "a.b.c") is MISSING

    def test_single_segment(self) -> None:
        assert get_nested_value({"players": 3}, "players") == 3

    def test_falsy_values_are_found(self) -> None:
        assert get_nested_value({"a": {"b": 0}}, "a.b") == 0

    def test_missing_is_falsy(self) -> None:
        assert not MISSING


# ---------------------------------------------------------------------------
# extract_snapshot
# ---------------------------------------------------------------------------

class TestExtractSnapshot:
    def test_happy_path(self, attributes: dict) -> None:
        snapshot = extract_snapshot(attributes, DEFAULT_JOINING_FIELD)
        assert snapshot.players == 45
        assert snapshot.max_players == 100
        assert snapshot.joining_players == 0
        assert snapshot.server_name == "Rustafied.com - US Long III"

    def test_reads_queue_from_configured_path(self, attributes: dict) -> None:
        attributes["details"]["rust_queued_players"] = 3
        snapshot = extract_snapshot(attributes, DEFAULT_JOINING_FIELD)
        assert snapshot.joining_players == 3

    def test_custom_path(self, attributes: dict) -> None:
        attributes["a"] = {"b": {"c": 7}}
        assert extract_snapshot(attributes, "a.b.c").joining_players == 7

    def test_missing_queue_path_defaults_to_zero(self, attributes: dict) -> None:
        del attributes["details"]
        assert extract_snapshot(attributes, DEFAULT_JOINING_FIELD).joining_players == 0

    def test_null_queue_defaults_to_zero(self, attributes: dict) -> None:
        attributes["details"]["rust_queued_players"] = None
        assert extract_snapshot(attributes, DEFAULT_JOINING_FIELD).joining_players == 0

    def test_numeric_string_queue(self, attributes: dict) -> None:
        attributes["details"]["rust_queued_players"] = "4"
        assert extract_snapshot(attributes, DEFAULT_JOINING_FIELD).joining_players == 4

    def test_non_numeric_queue_defaults_to_zero(self, attributes: dict) -> None:
        attributes["details"]["rust_queued_players"] = "lots"
        assert extract_snapshot(attributes, DEFAULT_JOINING_FIELD).joining_players == 0

    def test_missing_name_falls_back(self, attributes: dict) -> None:
        del attributes["name"]
        assert extract_snapshot(attributes, DEFAULT_JOINING_FIELD).server_name == "Unknown Server"

    def test_empty_name_falls_back(self, attributes: dict) -> None:
        attributes["name"] = ""
        assert extract_snapshot(attributes, DEFAULT_JOINING_FIELD).server_name == "Unknown Server"

    def test_zero_counts_are_valid(self) -> None:
        snapshot = extract_snapshot({"players": 0, "maxPlayers": 0}, DEFAULT_JOINING_FIELD)
        assert (snapshot.players, snapshot.max_players, snapshot.joining_players) == (0, 0, 0)

    @pytest.mark.parametrize("field", ["players", "maxPlayers"])
    def test_missing_player_counts_raise(self, attributes: dict, field: str) -> None:
        del attributes[field]
        with pytest.raises(ExtractionError) as exc_info:
            extract_snapshot(attributes, DEFAULT_JOINING_FIELD)
        assert exc_info.value.fields == [field]
        assert exc_info.value.server_name == "Rustafied.com - US Long III"

    def test_null_player_count_raises(self, attributes: dict) -> None:
        attributes["players"] = None
        with pytest.raises(ExtractionError):
            extract_snapshot(attributes, DEFAULT_JOINING_FIELD)

"""Tests for flat JSON field extraction."""

from __future__ import annotations

from src.services.ip_resolution.core.extractor import extract_field


class TestExtractField:
    """Test suite for extract_field."""

    def test_extracts_string_value(self) -> None:
        assert extract_field('{"ip": "1.2.3.4"}', "ip") == "1.2.3.4"

    def test_tolerates_tabs_and_no_space(self) -> None:
        assert extract_field('{"ip":\t"1.2.3.4"}', "ip") == "1.2.3.4"
        assert extract_field('{"ip":"1.2.3.4"}', "ip") == "1.2.3.4"

    def test_missing_key_returns_empty(self) -> None:
        assert extract_field('{"ip": "1.2.3.4"}', "country") == ""

    def test_non_string_value_returns_empty(self) -> None:
        assert extract_field('{"ip": 1234}', "ip") == ""
        assert extract_field('{"ip": null}', "ip") == ""

    def test_unterminated_value_returns_empty(self) -> None:
        assert extract_field('{"ip": "1.2.3.4', "ip") == ""

    def test_key_at_end_of_text_returns_empty(self) -> None:
        assert extract_field('{"ip"', "ip") == ""

    def test_empty_value(self) -> None:
        assert extract_field('{"org": ""}', "org") == ""

    def test_first_occurrence_wins(self) -> None:
        text = '{"ip": "1.1.1.1", "nested": {"ip": "2.2.2.2"}}'

        assert extract_field(text, "ip") == "1.1.1.1"

    def test_key_match_requires_quotes(self) -> None:
        """"ip" must not match inside a longer key."""
        text = '{"zip": "94043", "ip": "1.2.3.4"}'

        assert extract_field(text, "ip") == "1.2.3.4"

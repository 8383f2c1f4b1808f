"""Tests for tailwindcov.config.validation."""

from __future__ import annotations

from tailwindcov.config.validation import _suggest_key, validate_config


class TestSuggestKey:
    """Tests for _suggest_key function."""

    def test_suggests_close_match(self) -> None:
        assert _suggest_key("outptu", {"output", "coverage", "fetch"}) == "output"

    def test_returns_none_for_no_match(self) -> None:
        assert _suggest_key("xyz", {"output", "coverage"}) is None

    def test_handles_empty_valid_keys(self) -> None:
        assert _suggest_key("test", set()) is None


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid_config_returns_no_warnings(self) -> None:
        data = {
            "version": 1,
            "instrumentation": {"probe_name": "TRACK"},
            "execution": {"sandbox": "quickjs", "memory_limit": 1048576},
            "output": {"format": "json"},
            "coverage": {"threshold": 80},
            "fetch": {"timeout": 10},
        }

        assert validate_config(data, source="test.yml") == []

    def test_warns_on_unknown_top_level_key(self) -> None:
        warnings = validate_config({"coverag": {}}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].key == "coverag"
        assert warnings[0].suggestion == "coverage"
        assert warnings[0].source == "test.yml"

    def test_warns_on_unknown_section_key(self) -> None:
        warnings = validate_config({"coverage": {"treshold": 50}}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].key == "coverage.treshold"
        assert warnings[0].suggestion == "threshold"

    def test_execution_options_pass_through(self) -> None:
        assert validate_config({"execution": {"anything": 1}}, source="test.yml") == []

    def test_section_must_be_mapping(self) -> None:
        warnings = validate_config({"output": "json"}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].key == "output"

    def test_invalid_probe_name(self) -> None:
        warnings = validate_config({"instrumentation": {"probe_name": "a-b"}}, source="test.yml")

        assert [w.key for w in warnings] == ["instrumentation.probe_name"]

    def test_unknown_output_format(self) -> None:
        warnings = validate_config({"output": {"format": "jsn"}}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].suggestion == "json"

    def test_threshold_out_of_range(self) -> None:
        warnings = validate_config({"coverage": {"threshold": 120}}, source="test.yml")

        assert [w.key for w in warnings] == ["coverage.threshold"]

    def test_threshold_must_be_number(self) -> None:
        warnings = validate_config({"coverage": {"threshold": True}}, source="test.yml")

        assert [w.key for w in warnings] == ["coverage.threshold"]

    def test_timeout_must_be_positive(self) -> None:
        warnings = validate_config({"fetch": {"timeout": 0}}, source="test.yml")

        assert [w.key for w in warnings] == ["fetch.timeout"]

    def test_non_mapping_document(self) -> None:
        warnings = validate_config(["a"], source="test.yml")  # type: ignore[arg-type]

        assert len(warnings) == 1
        assert "mapping" in warnings[0].message

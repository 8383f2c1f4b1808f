"""Tests for plugin discovery infrastructure."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from tailwindcov.plugins import (
    REPORTER_ENTRY_POINT_GROUP,
    SANDBOX_ENTRY_POINT_GROUP,
    discover_plugins,
    get_plugin,
    list_available_plugins,
)
from tailwindcov.plugins.reporters import (
    BUILTIN_REPORTERS,
    ReporterPlugin,
    TextReporter,
    get_reporter_plugin,
    list_available_reporters,
)
from tailwindcov.plugins.sandboxes import (
    BUILTIN_SANDBOXES,
    QuickJSSandbox,
    SandboxPlugin,
    list_available_sandboxes,
)


def _entry_point(name: str, loaded) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.load.return_value = loaded
    return ep


class TestDiscoverPlugins:
    """Tests for generic discover_plugins function."""

    def test_builtins_available_without_entry_points(self) -> None:
        with patch("tailwindcov.plugins.discovery.entry_points", return_value=[]):
            plugins = discover_plugins(SANDBOX_ENTRY_POINT_GROUP, SandboxPlugin, BUILTIN_SANDBOXES)

        assert plugins == {"quickjs": QuickJSSandbox}

    def test_entry_points_are_added(self) -> None:
        class ExtraReporter(TextReporter):
            pass

        with patch(
            "tailwindcov.plugins.discovery.entry_points",
            return_value=[_entry_point("extra", ExtraReporter)],
        ):
            plugins = discover_plugins(REPORTER_ENTRY_POINT_GROUP, ReporterPlugin, BUILTIN_REPORTERS)

        assert plugins["extra"] is ExtraReporter
        assert plugins["text"] is TextReporter

    def test_wrong_base_class_skipped(self) -> None:
        with patch(
            "tailwindcov.plugins.discovery.entry_points",
            return_value=[_entry_point("bogus", dict)],
        ):
            plugins = discover_plugins(SANDBOX_ENTRY_POINT_GROUP, SandboxPlugin)

        assert "bogus" not in plugins

    def test_failing_entry_point_skipped(self) -> None:
        ep = _entry_point("broken", None)
        ep.load.side_effect = ImportError("missing module")

        with patch("tailwindcov.plugins.discovery.entry_points", return_value=[ep]):
            plugins = discover_plugins(SANDBOX_ENTRY_POINT_GROUP, SandboxPlugin, BUILTIN_SANDBOXES)

        assert list(plugins) == ["quickjs"]

    def test_returns_empty_dict_for_unknown_group(self) -> None:
        assert discover_plugins("tailwindcov.nonexistent") == {}


class TestGetPlugin:
    """Tests for generic get_plugin function."""

    def test_instantiates_builtin(self) -> None:
        plugin = get_plugin(REPORTER_ENTRY_POINT_GROUP, "text", ReporterPlugin, BUILTIN_REPORTERS)

        assert isinstance(plugin, TextReporter)

    def test_returns_none_for_unknown_plugin(self) -> None:
        assert get_plugin(REPORTER_ENTRY_POINT_GROUP, "unknown", ReporterPlugin, BUILTIN_REPORTERS) is None

    def test_each_call_returns_fresh_instance(self) -> None:
        assert get_reporter_plugin("json") is not get_reporter_plugin("json")


class TestListAvailablePlugins:
    """Tests for listing plugins."""

    def test_lists_builtin_reporters_sorted(self) -> None:
        reporters = list_available_reporters()

        assert {"html", "json", "summary", "text"} <= set(reporters)
        assert reporters == sorted(reporters)

    def test_lists_builtin_sandboxes(self) -> None:
        assert "quickjs" in list_available_sandboxes()

    def test_returns_empty_list_for_unknown_group(self) -> None:
        assert list_available_plugins("tailwindcov.nonexistent") == []

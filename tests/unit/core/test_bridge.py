"""Tests for the execution bridge."""

from __future__ import annotations

import pytest

from tailwindcov.core.bridge import ExecutionBridge
from tailwindcov.core.errors import InternalInvariantError
from tailwindcov.core.models import SyntaxKind, UnitKind
from tailwindcov.core.registry import UnitRegistry


@pytest.fixture
def registry() -> UnitRegistry:
    registry = UnitRegistry("var a = b ? 1 : 2;")
    registry.register((0, 18), UnitKind.BLOCK, SyntaxKind.PROGRAM)
    registry.register((12, 13), UnitKind.TERNARY_BRANCH, SyntaxKind.OTHER, is_expression=True)
    return registry


class TestTrack:
    """Tests for ExecutionBridge.track."""

    def test_increments_count(self, registry: UnitRegistry) -> None:
        bridge = ExecutionBridge(registry)

        bridge.track(1)
        bridge.track(1)

        assert registry.get(1).execution_count == 2
        assert registry.get(0).execution_count == 0

    def test_returns_falsy(self, registry: UnitRegistry) -> None:
        bridge = ExecutionBridge(registry)

        assert not bridge.track(0)

    def test_accepts_integral_floats(self, registry: UnitRegistry) -> None:
        bridge = ExecutionBridge(registry)

        bridge.track(1.0)

        assert registry.get(1).execution_count == 1

    @pytest.mark.parametrize("unit_id", [2, 99, -1, 0.5, "1"])
    def test_unknown_id_raises(self, registry: UnitRegistry, unit_id) -> None:
        bridge = ExecutionBridge(registry)

        with pytest.raises(InternalInvariantError):
            bridge.track(unit_id)

    def test_first_violation_is_kept(self, registry: UnitRegistry) -> None:
        bridge = ExecutionBridge(registry)
        assert bridge.violation is None

        with pytest.raises(InternalInvariantError):
            bridge.track(7)
        first = bridge.violation
        with pytest.raises(InternalInvariantError):
            bridge.track(8)

        assert bridge.violation is first
        assert "7" in str(first)

    def test_unknown_id_does_not_touch_other_counts(self, registry: UnitRegistry) -> None:
        bridge = ExecutionBridge(registry)

        with pytest.raises(InternalInvariantError):
            bridge.track(5)

        assert all(unit.execution_count == 0 for unit in registry)

    def test_take_violation_clears_it(self, registry: UnitRegistry) -> None:
        bridge = ExecutionBridge(registry)
        with pytest.raises(InternalInvariantError):
            bridge.track(7)

        taken = bridge.take_violation()

        assert "7" in str(taken)
        assert bridge.violation is None
        assert bridge.take_violation() is None

"""Tests for coverage summaries and syntax kinds."""

from __future__ import annotations

import pytest

from tailwindcov.core.models import CoverageSummary, SyntaxKind


def test_summary_percentage() -> None:
    summary = CoverageSummary(total_units=8, executed_units=6)

    assert summary.percentage == 75.0
    assert summary.to_dict() == {
        "total_units": 8,
        "executed_units": 6,
        "coverage_percentage": 75.0,
    }


def test_empty_summary_is_fully_covered() -> None:
    assert CoverageSummary().percentage == 100.0
    assert CoverageSummary().passed(100.0)


@pytest.mark.parametrize("threshold,expected", [(0.0, True), (50.0, True), (50.1, False)])
def test_summary_threshold(threshold: float, expected: bool) -> None:
    assert CoverageSummary(total_units=2, executed_units=1).passed(threshold) is expected


def test_percentage_is_rounded_in_dict() -> None:
    assert CoverageSummary(total_units=3, executed_units=2).to_dict()["coverage_percentage"] == 66.67


def test_syntax_kind_from_type() -> None:
    assert SyntaxKind.from_type("BlockStatement") is SyntaxKind.BLOCK_STATEMENT
    assert SyntaxKind.from_type("SwitchCase") is SyntaxKind.SWITCH_CASE
    assert SyntaxKind.from_type("Identifier") is SyntaxKind.OTHER

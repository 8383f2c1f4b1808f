from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class SyntaxKind(str, Enum):
    """Syntax node kinds that discovery and instrumentation distinguish."""

    PROGRAM = "Program"
    BLOCK_STATEMENT = "BlockStatement"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    SWITCH_CASE = "SwitchCase"
    OTHER = "Other"

    @classmethod
    def from_type(cls, type_name: str) -> "SyntaxKind":
        """Map a parser node type name onto a kind (OTHER when not tracked)."""
        try:
            return cls(type_name)
        except ValueError:
            return cls.OTHER


class UnitKind(str, Enum):
    """Selection category of a coverable unit."""

    BLOCK = "block"
    TERNARY_BRANCH = "ternary-branch"
    SWITCH_CASE = "switch-case"


@dataclass
class CoverableUnit:
    """A span of source text whose execution is tracked independently.

    Ranges are half-open character offsets into the original source and
    never change once the unit exists. Only the execution bridge calls
    count_execution().
    """

    id: int
    range_start: int
    range_end: int
    kind: UnitKind
    syntax: SyntaxKind
    is_expression: bool = False
    source_slice: str = ""
    execution_count: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.range_start >= self.range_end:
            raise ValueError(
                f"Unit {self.id} has an empty range [{self.range_start}, {self.range_end})"
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("id", "range_start", "range_end") and name in self.__dict__:
            raise AttributeError(f"CoverableUnit.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def executed(self) -> bool:
        """Whether the unit ran at least once."""
        return self.execution_count > 0

    @property
    def opens_with_delimiter(self) -> bool:
        """Whether the unit's text starts with a delimiter the probe must follow."""
        return self.syntax is SyntaxKind.BLOCK_STATEMENT

    def count_execution(self) -> None:
        self.execution_count += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "syntax": self.syntax.value,
            "range": [self.range_start, self.range_end],
            "expression": self.is_expression,
            "execution_count": self.execution_count,
            "code": self.source_slice,
        }


@dataclass(frozen=True)
class CoverageSummary:
    """Total vs. executed units of a coverage run."""

    total_units: int = 0
    executed_units: int = 0

    @property
    def percentage(self) -> float:
        """Coverage percentage (100.0 when there is nothing to cover)."""
        if self.total_units == 0:
            return 100.0
        return (self.executed_units / self.total_units) * 100

    def passed(self, threshold: float) -> bool:
        """Whether coverage meets the threshold percentage."""
        return self.percentage >= threshold

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "total_units": self.total_units,
            "executed_units": self.executed_units,
            "coverage_percentage": round(self.percentage, 2),
        }

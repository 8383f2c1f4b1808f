"""Coverable-unit discovery over a syntax tree.

Selection rules, applied to every object reached by a pre-order walk:

- ``Program`` and ``BlockStatement`` nodes become ``block`` units.
- A ``ConditionalExpression`` contributes its consequent and alternate as
  expression-form ``ternary-branch`` units (the conditional itself is not a
  unit).
- A ``SwitchCase`` with a non-empty body contributes one ``switch-case``
  unit spanning its first to its last body statement.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from tailwindcov.core.logging import get_logger
from tailwindcov.core.models import CoverableUnit, SyntaxKind, UnitKind
from tailwindcov.core.registry import UnitRegistry
from tailwindcov.core.syntax import SyntaxNode, walk

LOGGER = get_logger(__name__)

BLOCK_KINDS = frozenset({SyntaxKind.PROGRAM, SyntaxKind.BLOCK_STATEMENT})


def discover_units(root: SyntaxNode, registry: UnitRegistry) -> List[CoverableUnit]:
    """Register the coverable units found under root.

    Args:
        root: Syntax tree produced by :func:`tailwindcov.core.syntax.parse`.
        registry: Registry of the run the units belong to.

    Returns:
        The newly registered units sorted by range_start. Equal starts keep
        discovery order.
    """
    discovered: List[CoverableUnit] = []

    for node in walk(root):
        if not node.is_node:
            continue

        kind = node.kind
        if kind in BLOCK_KINDS:
            unit = _register(registry, node.range, UnitKind.BLOCK, kind)
            if unit is not None:
                discovered.append(unit)
        elif kind is SyntaxKind.CONDITIONAL_EXPRESSION:
            for branch_name in ("consequent", "alternate"):
                branch = node.child(branch_name)
                if not isinstance(branch, SyntaxNode) or not branch.is_node:
                    continue
                unit = _register(
                    registry,
                    branch.range,
                    UnitKind.TERNARY_BRANCH,
                    branch.kind,
                    is_expression=True,
                )
                if unit is not None:
                    discovered.append(unit)
        elif kind is SyntaxKind.SWITCH_CASE:
            body_range = _case_body_range(node)
            if body_range is not None:
                unit = _register(registry, body_range, UnitKind.SWITCH_CASE, kind)
                if unit is not None:
                    discovered.append(unit)

    discovered.sort(key=lambda unit: unit.range_start)
    LOGGER.debug(f"Discovered {len(discovered)} coverable units")
    return discovered


def _case_body_range(node: SyntaxNode) -> Optional[Tuple[int, int]]:
    """Span from the first to the last statement of a switch case body."""
    body = node.child("consequent")
    if not isinstance(body, list):
        return None
    statements = [item for item in body if isinstance(item, SyntaxNode) and item.is_node]
    if not statements:
        return None
    return (statements[0].range[0], statements[-1].range[1])


def _register(
    registry: UnitRegistry,
    node_range: Tuple[int, int],
    kind: UnitKind,
    syntax: SyntaxKind,
    is_expression: bool = False,
) -> Optional[CoverableUnit]:
    # Empty ranges (the Program of an empty script) cover nothing
    if node_range[0] >= node_range[1]:
        return None
    return registry.register(node_range, kind, syntax, is_expression=is_expression)

"""Syntax tree adapter over the esprima parser.

The parser is an external collaborator: all it has to provide is a tree of
nodes carrying a ``type`` name and a half-open ``range``. Its output is
normalized into :class:`SyntaxNode` values so the rest of the package
never touches parser objects directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from tailwindcov.core.errors import MissingDependencyError
from tailwindcov.core.logging import get_logger
from tailwindcov.core.models import SyntaxKind

LOGGER = get_logger(__name__)

# Keys handled by SyntaxNode itself, or positional metadata with no children
_RESERVED_KEYS = ("type", "range", "loc")

_SCALARS = (str, bytes, int, float, bool, type(None))


@dataclass
class SyntaxNode:
    """A parser object normalized into a tagged variant.

    ``type_name`` and ``range`` are None for auxiliary objects (regex
    descriptors and the like) that are not syntax nodes; they are still
    traversed because they may hold nodes.
    """

    type_name: Optional[str] = None
    range: Optional[Tuple[int, int]] = None
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> SyntaxKind:
        if self.type_name is None:
            return SyntaxKind.OTHER
        return SyntaxKind.from_type(self.type_name)

    @property
    def is_node(self) -> bool:
        return self.type_name is not None and self.range is not None

    def child(self, name: str) -> Any:
        return self.fields.get(name)

    def children(self) -> Iterator["SyntaxNode"]:
        """Yield direct child objects in field order, flattening lists."""
        for value in self.fields.values():
            yield from _iter_objects(value)


def _iter_objects(value: Any) -> Iterator[SyntaxNode]:
    if isinstance(value, SyntaxNode):
        yield value
    elif isinstance(value, list):
        for item in value:
            yield from _iter_objects(item)


def from_parser_object(obj: Any) -> Any:
    """Convert esprima output (node objects, dicts, lists) into SyntaxNodes.

    Scalars are returned unchanged.
    """
    if isinstance(obj, _SCALARS):
        return obj
    if isinstance(obj, (list, tuple)):
        return [from_parser_object(item) for item in obj]
    if isinstance(obj, dict):
        mapping = obj
    elif hasattr(obj, "__dict__"):
        mapping = vars(obj)
    else:
        return obj

    raw_range = mapping.get("range")
    node_range: Optional[Tuple[int, int]] = None
    if raw_range is not None and len(raw_range) == 2:
        node_range = (int(raw_range[0]), int(raw_range[1]))

    type_name = mapping.get("type")
    return SyntaxNode(
        type_name=type_name if isinstance(type_name, str) else None,
        range=node_range,
        fields={
            key: from_parser_object(value)
            for key, value in mapping.items()
            if key not in _RESERVED_KEYS
        },
    )


def ensure_parser() -> Any:
    """Return the esprima module, raising if it is not installed.

    Raises:
        MissingDependencyError: If esprima cannot be imported.
    """
    try:
        import esprima
    except ImportError as e:
        raise MissingDependencyError(
            "esprima must be installed to parse JavaScript (pip install esprima)"
        ) from e
    return esprima


def parse(source: str) -> SyntaxNode:
    """Parse JavaScript source into a SyntaxNode tree with character ranges.

    Parser errors (``esprima.error_handler.Error``) propagate unchanged.
    """
    esprima = ensure_parser()
    tree = esprima.parseScript(source, {"range": True})
    root = from_parser_object(tree)
    LOGGER.debug(f"Parsed {len(source)} characters, root type {root.type_name}")
    return root


def walk(root: SyntaxNode) -> List[SyntaxNode]:
    """Return every object under root (root included) in pre-order."""
    ordered: List[SyntaxNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        ordered.append(node)
        stack.extend(reversed(list(node.children())))
    return ordered

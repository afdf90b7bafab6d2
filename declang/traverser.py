"""declang Traverser — depth-first walk driven by a visitor table.

The walker only knows the fixed declang node vocabulary. Visitors are
looked up by node-type name; ``enter`` runs before a node's children are
visited and ``exit`` after.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

from declang.ast_nodes import Node
from declang.errors import traverse_error, TraverseError

logger = logging.getLogger(__name__)

VisitFn = Callable[[Node, Optional[Node]], None]


@dataclass
class Visitor:
    enter: Optional[VisitFn] = None
    exit: Optional[VisitFn] = None


VisitorTable = Mapping[str, Union[Visitor, VisitFn]]

# Child attributes visited for each node type, in order.
CHILDREN: dict[str, tuple[str, ...]] = {
    "Program": ("body",),
    "VariableDeclaration": ("declarations",),
    "VariableDeclarator": ("init",),
    "Identifier": (),
    "NumberLiteral": (),
    "StringLiteral": (),
    "BooleanLiteral": (),
    "NullLiteral": (),
}


def _lookup(visitors: VisitorTable, node_type: str) -> Optional[Visitor]:
    entry = visitors.get(node_type)
    if entry is None or isinstance(entry, Visitor):
        return entry
    return Visitor(enter=entry)


def _visit(node: Node, parent: Optional[Node], visitors: VisitorTable) -> None:
    node_type = getattr(node, "type", type(node).__name__)
    if node_type not in CHILDREN:
        raise TraverseError(traverse_error(node_type))

    visitor = _lookup(visitors, node_type)
    if visitor and visitor.enter:
        visitor.enter(node, parent)

    for attr in CHILDREN[node_type]:
        child = getattr(node, attr)
        if isinstance(child, list):
            for item in child:
                _visit(item, node, visitors)
        else:
            _visit(child, node, visitors)

    if visitor and visitor.exit:
        visitor.exit(node, parent)


def traverse(ast: Node, visitors: VisitorTable) -> None:
    """Walk ``ast`` depth-first, calling the visitors registered per node type."""
    logger.debug("traversing with visitors for %s", sorted(visitors))
    _visit(ast, None, visitors)

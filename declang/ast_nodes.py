"""declang AST Node definitions.

The node vocabulary is closed: a Program holds VariableDeclarations, each
declaration holds VariableDeclarators, and each declarator binds an
Identifier to exactly one literal.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional, Union

from declang.errors import SourceLocation


@dataclass
class Node:
    location: Optional[SourceLocation] = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def type(self) -> str:
        """Node-type name used by visitor tables and diagnostics."""
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": self.type}
        for f in fields(self):
            if f.name == "location":
                continue
            d[f.name] = _to_plain(getattr(self, f.name))
        return d


def _to_plain(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

@dataclass
class NumberLiteral(Node):
    value: int = 0


@dataclass
class StringLiteral(Node):
    value: str = ""


@dataclass
class BooleanLiteral(Node):
    value: bool = False


@dataclass
class NullLiteral(Node):
    value: str = "null"


Literal = Union[NumberLiteral, StringLiteral, BooleanLiteral, NullLiteral]

LITERAL_TYPES = (NumberLiteral, StringLiteral, BooleanLiteral, NullLiteral)


# ---------------------------------------------------------------------------
# Bindings
# ---------------------------------------------------------------------------

@dataclass
class Identifier(Node):
    name: str = ""


@dataclass
class VariableDeclarator(Node):
    id: Identifier = field(default_factory=Identifier)
    init: Literal = field(default_factory=NullLiteral)


@dataclass
class VariableDeclaration(Node):
    """A `set`/`define` statement; `kind` becomes `let`/`const` after transform."""
    kind: str = ""
    declarations: list[VariableDeclarator] = field(default_factory=list)


@dataclass
class Program(Node):
    body: list[VariableDeclaration] = field(default_factory=list)
    filename: str = field(default="<stdin>", compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d.pop("filename", None)
        return d

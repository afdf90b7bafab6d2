"""declang Generator — renders an AST as target-syntax source text."""

from __future__ import annotations

from typing import Callable

from declang.ast_nodes import (
    Node, Program, VariableDeclaration, VariableDeclarator, Identifier,
    NumberLiteral, StringLiteral, BooleanLiteral, NullLiteral,
)
from declang.errors import generate_error, GenerateError


class CodeGenerator:
    """Per-node-type rendering rules, applied recursively."""

    def __init__(self):
        self._rules: dict[str, Callable[[Node], str]] = {
            "Program": self._program,
            "VariableDeclaration": self._declaration,
            "VariableDeclarator": self._declarator,
            "Identifier": self._identifier,
            "NumberLiteral": self._number,
            "StringLiteral": self._string,
            "BooleanLiteral": self._boolean,
            "NullLiteral": self._null,
        }

    def generate(self, node: Node) -> str:
        node_type = getattr(node, "type", type(node).__name__)
        rule = self._rules.get(node_type)
        if rule is None:
            raise GenerateError(generate_error(node_type))
        return rule(node)

    def _program(self, node: Program) -> str:
        return "\n".join(self.generate(decl) for decl in node.body)

    def _declaration(self, node: VariableDeclaration) -> str:
        parts = [node.kind] + [self.generate(d) for d in node.declarations]
        return " ".join(parts)

    def _declarator(self, node: VariableDeclarator) -> str:
        return f"{self.generate(node.id)} = {self.generate(node.init)};"

    def _identifier(self, node: Identifier) -> str:
        return node.name

    def _number(self, node: NumberLiteral) -> str:
        try:
            return str(node.value)
        except ValueError:
            raise GenerateError(generate_error(
                node.type, "Number literal too long to render",
            ))

    def _string(self, node: StringLiteral) -> str:
        # no escaping; values containing '"' do not round-trip
        return f'"{node.value}"'

    def _boolean(self, node: BooleanLiteral) -> str:
        return "true" if node.value else "false"

    def _null(self, node: NullLiteral) -> str:
        return "null"


def generate(node: Node) -> str:
    """Convenience function to render an AST node."""
    return CodeGenerator().generate(node)

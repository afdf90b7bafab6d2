"""declang Traverser Tests."""

from dataclasses import dataclass

import pytest

from declang.lexer import tokenize
from declang.parser import parse
from declang.traverser import Visitor, traverse
from declang.ast_nodes import Node, Identifier, NumberLiteral, VariableDeclarator
from declang.errors import TraverseError, ErrorKind


@dataclass
class BinaryOp(Node):
    op: str = "+"


def program_for(source):
    return parse(tokenize(source))


class TestTraverse:

    def test_preorder_enter(self):
        ast = program_for('set a as 1 b as "x"; define c as null')
        seen = []
        record = Visitor(enter=lambda node, parent: seen.append(node.type))
        traverse(ast, {
            "Program": record,
            "VariableDeclaration": record,
            "VariableDeclarator": record,
            "NumberLiteral": record,
            "StringLiteral": record,
            "NullLiteral": record,
        })
        assert seen == [
            "Program",
            "VariableDeclaration",
            "VariableDeclarator", "NumberLiteral",
            "VariableDeclarator", "StringLiteral",
            "VariableDeclaration",
            "VariableDeclarator", "NullLiteral",
        ]

    def test_exit_runs_after_children(self):
        ast = program_for("set a as 1")
        events = []
        traverse(ast, {
            "VariableDeclarator": Visitor(
                enter=lambda n, p: events.append("enter declarator"),
                exit=lambda n, p: events.append("exit declarator"),
            ),
            "NumberLiteral": Visitor(enter=lambda n, p: events.append("number")),
        })
        assert events == ["enter declarator", "number", "exit declarator"]

    def test_parent_passed(self):
        ast = program_for("set a as 1; define b as true")
        parents = []
        traverse(ast, {
            "Program": Visitor(enter=lambda n, p: parents.append(p)),
            "VariableDeclaration": Visitor(enter=lambda n, p: parents.append(p)),
        })
        assert parents[0] is None
        assert parents[1] is ast
        assert parents[2] is ast

    def test_identifier_not_visited_through_declarator(self):
        ast = program_for("set a as 1")
        seen = []
        traverse(ast, {"Identifier": Visitor(enter=lambda n, p: seen.append(n))})
        assert seen == []

    def test_callable_entry_is_enter(self):
        ast = program_for("set a as 1")
        seen = []
        traverse(ast, {"NumberLiteral": lambda n, p: seen.append(n.value)})
        assert seen == [1]

    def test_visitor_can_mutate(self):
        ast = program_for("set a as 1")

        def bump(node, parent):
            node.value += 41

        traverse(ast, {"NumberLiteral": Visitor(enter=bump)})
        assert ast.body[0].declarations[0].init.value == 42

    def test_standalone_nodes(self):
        seen = []
        traverse(Identifier("x"), {"Identifier": lambda n, p: seen.append(n.name)})
        traverse(NumberLiteral(3), {})
        assert seen == ["x"]

    def test_empty_table(self):
        traverse(program_for("set a as 1"), {})


class TestTraverseErrors:

    def test_unknown_node_type(self):
        with pytest.raises(TraverseError) as exc:
            traverse(BinaryOp(), {})
        assert exc.value.kind == ErrorKind.TRAVERSE_ERROR
        assert exc.value.details["node_type"] == "BinaryOp"

    def test_unknown_nested_node(self):
        declarator = VariableDeclarator(id=Identifier("a"), init=BinaryOp())
        with pytest.raises(TraverseError):
            traverse(declarator, {})

    def test_non_node_value(self):
        with pytest.raises(TraverseError) as exc:
            traverse({"type": "Program", "body": []}, {})
        assert exc.value.details["node_type"] == "dict"

"""declang Transformer and Generator Tests."""

import copy
from dataclasses import dataclass

import pytest

from declang.lexer import tokenize
from declang.parser import parse
from declang.transformer import transform
from declang.generator import CodeGenerator, generate
from declang.ast_nodes import (
    Node, Program, VariableDeclaration, VariableDeclarator, Identifier,
    NumberLiteral, StringLiteral, BooleanLiteral, NullLiteral,
)
from declang.errors import GenerateError


@dataclass
class Comment(Node):
    text: str = ""


def program_for(source):
    return parse(tokenize(source))


class TestTransform:

    def test_set_becomes_let(self):
        ast = program_for("set isEmployed as false")
        transform(ast)
        assert ast.body[0].kind == "let"

    def test_define_becomes_const(self):
        ast = program_for("define pi as 3")
        transform(ast)
        assert ast.body[0].kind == "const"

    def test_unknown_kind_becomes_const(self):
        ast = Program(body=[VariableDeclaration(
            kind="var",
            declarations=[VariableDeclarator(Identifier("x"), NumberLiteral(1))],
        )])
        transform(ast)
        assert ast.body[0].kind == "const"

    def test_returns_same_object(self):
        ast = program_for("set a as 1")
        assert transform(ast) is ast

    def test_idempotent(self):
        once = transform(program_for("set a as 1; define b as 2; set c as null"))
        twice = transform(copy.deepcopy(once))
        assert twice == once
        assert [d.kind for d in twice.body] == ["let", "const", "let"]

    def test_values_and_names_untouched(self):
        ast = program_for('set name as "Ada" age as 36 alive as true spouse as null')
        before = [d for d in copy.deepcopy(ast).body[0].declarations]
        transform(ast)
        assert ast.body[0].declarations == before

    def test_custom_keywords(self):
        ast = program_for("set a as 1; define b as 2")
        transform(ast, mutable_keyword="var", immutable_keyword="val")
        assert [d.kind for d in ast.body] == ["var", "val"]


class TestGenerate:

    def test_literals(self):
        assert generate(NumberLiteral(42)) == "42"
        assert generate(StringLiteral("hi there")) == '"hi there"'
        assert generate(BooleanLiteral(True)) == "true"
        assert generate(BooleanLiteral(False)) == "false"
        assert generate(NullLiteral()) == "null"

    def test_identifier(self):
        assert generate(Identifier("isEmployed")) == "isEmployed"

    def test_declarator(self):
        node = VariableDeclarator(Identifier("x"), NumberLiteral(1))
        assert generate(node) == "x = 1;"

    def test_declaration_joins_declarators(self):
        node = VariableDeclaration(kind="let", declarations=[
            VariableDeclarator(Identifier("a"), NumberLiteral(1)),
            VariableDeclarator(Identifier("b"), StringLiteral("two")),
        ])
        assert generate(node) == 'let a = 1; b = "two";'

    def test_program_one_declaration_per_line(self):
        ast = transform(program_for("set a as 1; define b as 2;"))
        assert generate(ast) == "let a = 1;\nconst b = 2;"

    def test_empty_program(self):
        assert generate(Program()) == ""

    def test_untransformed_kind_rendered_verbatim(self):
        assert generate(program_for("set a as 1")) == "set a = 1;"

    def test_string_not_escaped(self):
        assert generate(StringLiteral('say "hi"')) == '"say "hi""'

    def test_generator_instance_reusable(self):
        gen = CodeGenerator()
        assert gen.generate(NumberLiteral(1)) == "1"
        assert gen.generate(NullLiteral()) == "null"


class TestGenerateErrors:

    def test_unknown_node_type(self):
        with pytest.raises(GenerateError) as exc:
            generate(Comment("note"))
        assert exc.value.details["node_type"] == "Comment"

    def test_unknown_nested_node(self):
        ast = Program(body=[VariableDeclaration(kind="let", declarations=[
            VariableDeclarator(Identifier("a"), Comment("x")),
        ])])
        with pytest.raises(GenerateError):
            generate(ast)

    def test_non_node_value(self):
        with pytest.raises(GenerateError):
            generate("set a as 1")

    def test_number_too_long_to_render(self):
        with pytest.raises(GenerateError) as exc:
            generate(NumberLiteral(10 ** 5000))
        assert exc.value.details["node_type"] == "NumberLiteral"


class TestTransformKeywordChecks:

    def test_immutable_source_keyword_rejected(self):
        ast = program_for("define a as 1")
        with pytest.raises(ValueError):
            transform(ast, immutable_keyword="set")
        assert ast.body[0].kind == "define"

    def test_mutable_source_keyword_rejected(self):
        with pytest.raises(ValueError):
            transform(program_for("define a as 1"), mutable_keyword="define")

    def test_identical_keywords_rejected(self):
        with pytest.raises(ValueError):
            transform(program_for("set a as 1"), mutable_keyword="var", immutable_keyword="var")

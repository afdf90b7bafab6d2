"""declang Parser — recursive-descent parser.

Parses a token list into an AST with a single cursor over the list.
No backtracking, and the token list is never modified.
"""

from __future__ import annotations

from typing import Optional

from declang.lexer import Token, TokenType
from declang.ast_nodes import (
    Program, VariableDeclaration, VariableDeclarator, Identifier,
    Literal, NumberLiteral, StringLiteral, BooleanLiteral, NullLiteral,
)
from declang.errors import SourceLocation, parse_error, ParseError


class Parser:
    """Recursive-descent parser for declang.

    With ``strict`` disabled the token after a declarator's name is skipped
    without checking that it is the ``as`` marker.
    """

    def __init__(self, tokens: list[Token], filename: str = "<stdin>", strict: bool = True):
        self.tokens = tokens
        self.pos = 0
        self.filename = filename
        self.strict = strict

    def _current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _peek(self) -> Optional[TokenType]:
        tok = self._current()
        return tok.type if tok else None

    def _loc(self) -> Optional[SourceLocation]:
        tok = self._current()
        if tok:
            return tok.location
        if self.tokens:
            return self.tokens[-1].location
        return None

    def _advance(self) -> Token:
        tok = self._current()
        if tok is None:
            self._fail("Unexpected end of input")
        self.pos += 1
        return tok

    def _fail(self, message: str) -> None:
        tok = self._current()
        raise ParseError(parse_error(
            message,
            tok.type.value if tok else None,
            self._loc(),
        ))

    # -------------------------------------------------------------------
    # Top-level
    # -------------------------------------------------------------------

    def parse(self) -> Program:
        body: list[VariableDeclaration] = []
        while not self._at_end():
            tt = self._peek()
            if tt == TokenType.SEMI:
                # empty statement
                self.pos += 1
            elif tt == TokenType.KEYWORD:
                body.append(self._parse_declaration())
            else:
                self._fail(f"Expected 'set' or 'define', got {tt.value} '{self._current().value}'")
        return Program(body=body, filename=self.filename)

    # -------------------------------------------------------------------
    # set / define
    # -------------------------------------------------------------------

    def _parse_declaration(self) -> VariableDeclaration:
        keyword = self._advance()
        node = VariableDeclaration(kind=keyword.value, location=keyword.location)
        while not self._at_end() and self._peek() != TokenType.SEMI:
            node.declarations.append(self._parse_declarator())
        if not node.declarations:
            self._fail(f"Expected a binding after '{keyword.value}'")
        if self._peek() == TokenType.SEMI:
            self.pos += 1
        return node

    def _parse_declarator(self) -> VariableDeclarator:
        if self._peek() != TokenType.NAME:
            tok = self._current()
            self._fail(f"Expected a name, got {tok.type.value} '{tok.value}'")
        name = self._advance()

        if self._at_end():
            self._fail(f"Expected 'as' after '{name.value}'")
        if self.strict and self._peek() != TokenType.IDENT:
            tok = self._current()
            self._fail(f"Expected 'as' after '{name.value}', got {tok.type.value} '{tok.value}'")
        self._advance()

        return VariableDeclarator(
            id=Identifier(name=name.value, location=name.location),
            init=self._parse_literal(),
            location=name.location,
        )

    # -------------------------------------------------------------------
    # Literals
    # -------------------------------------------------------------------

    def _parse_literal(self) -> Literal:
        tok = self._current()
        if tok is None:
            self._fail("Expected a literal, got end of input")

        if tok.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(value=tok.value, location=tok.location)
        if tok.type == TokenType.STRING:
            self._advance()
            return StringLiteral(value=tok.value, location=tok.location)
        if tok.type == TokenType.BOOLEAN:
            self._advance()
            return BooleanLiteral(value=tok.value == "true", location=tok.location)
        if tok.type == TokenType.NULL:
            self._advance()
            return NullLiteral(location=tok.location)

        self._fail(f"Expected a literal, got {tok.type.value} '{tok.value}'")


def parse(tokens: list[Token], filename: str = "<stdin>", strict: bool = True) -> Program:
    """Convenience function to parse a declang token list."""
    return Parser(tokens, filename, strict=strict).parse()

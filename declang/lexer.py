"""declang Lexer — Tokenizer with offset/line/column tracking.

Produces a flat list of tokens from declang source text. The input is
normalized so that it always ends with a statement terminator, which lets
the scan loop rely on one character of lookahead without bounds checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from declang.errors import SourceLocation, lex_error, LexError


class TokenType(Enum):
    KEYWORD = "keyword"
    NAME = "name"
    IDENT = "ident"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    SEMI = "semi"


WORDS: dict[str, TokenType] = {
    "set": TokenType.KEYWORD,
    "define": TokenType.KEYWORD,
    "null": TokenType.NULL,
    "as": TokenType.IDENT,
    "true": TokenType.BOOLEAN,
    "false": TokenType.BOOLEAN,
}

TERMINATOR = ";"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Union[str, int]
    location: SourceLocation

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.location})"

    def to_dict(self) -> dict:
        return {"type": self.type.value, "value": self.value}


def _is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def normalize(source: str) -> str:
    """Ensure the source ends with a terminator followed by one space."""
    if source.endswith(TERMINATOR):
        return source + " "
    return source + TERMINATOR + " "


class Lexer:
    """Tokenizer for declang source text."""

    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = normalize(source)
        self.filename = filename
        # The trailing padding character is never scanned.
        self.end = len(self.source) - 1
        self.pos = 0
        self.line = 1
        self.column = 1

    def _loc(self) -> SourceLocation:
        return SourceLocation(self.line, self.column, self.filename, self.pos)

    def _peek(self) -> str:
        return self.source[self.pos]

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _read_number(self) -> Token:
        loc = self._loc()
        digits = ""
        while self.pos < self.end and _is_digit(self._peek()):
            digits += self._advance()
        try:
            value = int(digits)
        except ValueError:
            # longer than sys.get_int_max_str_digits()
            raise LexError(lex_error(
                f"Number literal too long ({len(digits)} digits)", digits[0], loc,
            ))
        return Token(TokenType.NUMBER, value, loc)

    def _read_string(self) -> Token:
        loc = self._loc()
        self._advance()  # opening quote
        value = ""
        while self.pos < self.end:
            ch = self._advance()
            if ch == '"':
                return Token(TokenType.STRING, value, loc)
            value += ch
        raise LexError(lex_error("Unterminated string literal", '"', loc))

    def _read_word(self) -> Token:
        loc = self._loc()
        word = ""
        while self.pos < self.end and _is_letter(self._peek()):
            word += self._advance()
        if self.pos < self.end and _is_digit(self._peek()):
            ch = self._peek()
            raise LexError(lex_error(
                f"Unknown character '{ch}' at offset {self.pos}", ch, self._loc(),
            ))
        return Token(WORDS.get(word, TokenType.NAME), word, loc)

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while self.pos < self.end:
            ch = self._peek()

            if ch.isspace():
                self._advance()
            elif ch == TERMINATOR:
                tokens.append(Token(TokenType.SEMI, TERMINATOR, self._loc()))
                self._advance()
            elif _is_digit(ch):
                tokens.append(self._read_number())
            elif ch == '"':
                tokens.append(self._read_string())
            elif _is_letter(ch):
                tokens.append(self._read_word())
            else:
                raise LexError(lex_error(
                    f"Unknown character '{ch}' at offset {self.pos}", ch, self._loc(),
                ))

        return tokens


def tokenize(source: str, filename: str = "<stdin>") -> list[Token]:
    """Convenience function to tokenize declang source text."""
    return Lexer(source, filename).tokenize()

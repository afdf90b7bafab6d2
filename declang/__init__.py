"""declang — a source-to-source compiler for set/define declarations."""

__version__ = "0.1.0"

from declang.errors import (
    CompileError, LexError, ParseError, TraverseError, GenerateError, ConfigError,
)
from declang.lexer import Token, TokenType, tokenize
from declang.parser import parse
from declang.traverser import Visitor, traverse
from declang.transformer import transform
from declang.generator import generate
from declang.compiler import compile_source, compile_to_ast

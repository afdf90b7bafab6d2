"""declang pipeline — tokenize, parse, transform, generate.

Each stage runs to completion before the next one starts; the first error
aborts the whole compilation.
"""

from __future__ import annotations

import logging
from typing import Optional

from declang.ast_nodes import Program
from declang.config import DeclangConfig
from declang.generator import generate
from declang.lexer import tokenize
from declang.parser import parse
from declang.transformer import transform

logger = logging.getLogger(__name__)


def compile_to_ast(source: str, config: Optional[DeclangConfig] = None,
                   filename: str = "<stdin>", transformed: bool = True) -> Program:
    """Run the front end and, unless disabled, the keyword transform."""
    config = config or DeclangConfig()

    tokens = tokenize(source, filename)
    logger.debug("%s: %d token(s)", filename, len(tokens))

    program = parse(tokens, filename, strict=config.strict)
    logger.debug("%s: %d declaration(s)", filename, len(program.body))

    if transformed:
        transform(program, config.mutable_keyword, config.immutable_keyword)
    return program


def compile_source(source: str, config: Optional[DeclangConfig] = None,
                   filename: str = "<stdin>") -> str:
    """Compile declang source text to target-syntax source text."""
    program = compile_to_ast(source, config, filename)
    output = generate(program)
    logger.info("%s: compiled %d declaration(s)", filename, len(program.body))
    return output

"""declang Transformer — rewrites declaration keywords to the target syntax.

`set` becomes the mutable keyword, everything else the immutable one. The
AST is modified in place and returned.
"""

from __future__ import annotations

import logging
from typing import Optional

from declang.ast_nodes import Node, Program, VariableDeclaration
from declang.traverser import Visitor, traverse

logger = logging.getLogger(__name__)

MUTABLE_KEYWORD = "let"
IMMUTABLE_KEYWORD = "const"

SOURCE_KEYWORDS = ("set", "define")


def transform(ast: Program, mutable_keyword: str = MUTABLE_KEYWORD,
              immutable_keyword: str = IMMUTABLE_KEYWORD) -> Program:
    for keyword in (mutable_keyword, immutable_keyword):
        if keyword in SOURCE_KEYWORDS:
            raise ValueError(f"Target keyword '{keyword}' is also a source keyword")
    if mutable_keyword == immutable_keyword:
        raise ValueError(f"Mutable and immutable keywords are both '{mutable_keyword}'")

    def enter_declaration(node: VariableDeclaration, parent: Optional[Node]) -> None:
        # A declaration that already carries the mutable keyword stays mutable.
        if node.kind in ("set", mutable_keyword):
            node.kind = mutable_keyword
        else:
            node.kind = immutable_keyword

    traverse(ast, {"VariableDeclaration": Visitor(enter=enter_declaration)})
    logger.debug("transformed %d declaration(s)", len(ast.body))
    return ast

"""Structured error objects for the declang compiler.

Every failure is a machine-readable diagnostic wrapped in an exception.
Each stage raises its own exception type; all of them derive from
CompileError so callers can catch a single type at the boundary.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    LEX_ERROR = "lex_error"
    PARSE_ERROR = "parse_error"
    TRAVERSE_ERROR = "traverse_error"
    GENERATE_ERROR = "generate_error"
    CONFIG_ERROR = "config_error"


@dataclass
class SourceLocation:
    line: int
    column: int
    file: str = "<stdin>"
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


@dataclass
class Diagnostic:
    kind: ErrorKind
    message: str
    location: Optional[SourceLocation] = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.location:
            d["location"] = {
                "file": self.location.file,
                "line": self.location.line,
                "column": self.location.column,
                "offset": self.location.offset,
            }
        if self.details:
            d["details"] = self.details
        return d

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        loc = f" at {self.location}" if self.location else ""
        return f"[{self.kind.value}]{loc}: {self.message}"


def lex_error(
    message: str,
    char: str,
    location: Optional[SourceLocation] = None,
) -> Diagnostic:
    return Diagnostic(
        kind=ErrorKind.LEX_ERROR,
        message=message,
        location=location,
        details={
            "char": char,
            "offset": location.offset if location else None,
        },
    )


def parse_error(
    message: str,
    token_kind: Optional[str],
    location: Optional[SourceLocation] = None,
) -> Diagnostic:
    return Diagnostic(
        kind=ErrorKind.PARSE_ERROR,
        message=message,
        location=location,
        details={"token_kind": token_kind},
    )


def traverse_error(node_type: str) -> Diagnostic:
    return Diagnostic(
        kind=ErrorKind.TRAVERSE_ERROR,
        message=f"Cannot traverse node of type '{node_type}'",
        details={"node_type": node_type},
    )


def generate_error(node_type: str, message: Optional[str] = None) -> Diagnostic:
    return Diagnostic(
        kind=ErrorKind.GENERATE_ERROR,
        message=message or f"Cannot generate code for node of type '{node_type}'",
        details={"node_type": node_type},
    )


def config_error(message: str, path: Optional[str] = None) -> Diagnostic:
    details: dict[str, Any] = {}
    if path:
        details["path"] = path
    return Diagnostic(
        kind=ErrorKind.CONFIG_ERROR,
        message=message,
        details=details,
    )


class CompileError(Exception):
    """Exception wrapping a single Diagnostic."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(str(diagnostic))

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.kind

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def details(self) -> dict[str, Any]:
        return self.diagnostic.details

    def to_dict(self) -> dict[str, Any]:
        return self.diagnostic.to_dict()

    def to_json(self, indent: int = 2) -> str:
        return self.diagnostic.to_json(indent=indent)


class LexError(CompileError):
    """Raised by the lexer on a character it cannot classify."""


class ParseError(CompileError):
    """Raised by the parser when no production matches at the cursor."""


class TraverseError(CompileError):
    """Raised by the traverser on a node type outside its schema."""


class GenerateError(CompileError):
    """Raised by the generator on a node type it cannot render."""


class ConfigError(CompileError):
    """Raised when a configuration file cannot be loaded."""

"""declang CLI — Command-line interface for the declang compiler.

Commands:
  declang compile <file|->          — Compile to let/const statements
  declang tokens <file|->           — Emit the token list (JSON)
  declang ast <file|->              — Emit the AST (JSON)
  declang run -e "<source>"         — Compile an inline snippet
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from declang import __version__
from declang.compiler import compile_source, compile_to_ast
from declang.config import DeclangConfig, load_config, validate_config
from declang.errors import CompileError
from declang.lexer import tokenize

logger = logging.getLogger("declang")


def _read_source(path: str) -> Optional[str]:
    if path == "-":
        return sys.stdin.read()
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read()


def _display_name(path: str) -> str:
    return "<stdin>" if path == "-" else path


def _load_config(args: argparse.Namespace) -> DeclangConfig:
    config = load_config(args.config) if args.config else load_config()
    if args.format:
        config.format = args.format
    if args.lenient:
        config.strict = False
    validate_config(config)
    return config


def _report(error: CompileError, fmt: str) -> int:
    if fmt == "json":
        print(error.to_json(), file=sys.stderr)
    else:
        print(str(error), file=sys.stderr)
    return 1


def _not_found(path: str, config: DeclangConfig) -> int:
    if config.format == "json":
        print(json.dumps({"error": f"File not found: {path}"}), file=sys.stderr)
    else:
        print(f"declang: file not found: {path}", file=sys.stderr)
    return 1


def _emit_code(source: str, filename: str, config: DeclangConfig) -> int:
    output = compile_source(source, config, filename=filename)
    if config.format == "json":
        print(json.dumps({"file": filename, "output": output}, indent=2))
    else:
        print(output)
    return 0


def cmd_compile(args: argparse.Namespace, config: DeclangConfig) -> int:
    """Compile a declang source file through the whole pipeline."""
    source = _read_source(args.file)
    if source is None:
        return _not_found(args.file, config)
    return _emit_code(source, _display_name(args.file), config)


def cmd_run(args: argparse.Namespace, config: DeclangConfig) -> int:
    """Compile a snippet given on the command line."""
    return _emit_code(args.expression, "<string>", config)


def cmd_tokens(args: argparse.Namespace, config: DeclangConfig) -> int:
    """Emit the token list as JSON."""
    source = _read_source(args.file)
    if source is None:
        return _not_found(args.file, config)
    tokens = tokenize(source, _display_name(args.file))
    print(json.dumps([t.to_dict() for t in tokens], indent=2))
    return 0


def cmd_ast(args: argparse.Namespace, config: DeclangConfig) -> int:
    """Emit the AST as JSON, transformed unless --no-transform is given."""
    source = _read_source(args.file)
    if source is None:
        return _not_found(args.file, config)
    program = compile_to_ast(source, config, filename=_display_name(args.file), transformed=not args.no_transform)
    print(json.dumps(program.to_dict(), indent=2))
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="Path to a .declangrc.yml / .json file")
    common.add_argument("--format", choices=["text", "json"], help="Output format (default: text)")
    common.add_argument("--lenient", action="store_true", help="Do not verify the 'as' marker")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="declang",
        description="declang — compile set/define declarations to let/const statements",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    p_compile = subparsers.add_parser("compile", parents=[common], help="Compile a declang file")
    p_compile.add_argument("file", help="Source file, or '-' for stdin")
    p_compile.set_defaults(func=cmd_compile)

    p_run = subparsers.add_parser("run", parents=[common], help="Compile an inline snippet")
    p_run.add_argument("-e", "--expression", required=True, help="declang source text")
    p_run.set_defaults(func=cmd_run)

    p_tokens = subparsers.add_parser("tokens", parents=[common], help="Emit tokens as JSON")
    p_tokens.add_argument("file", help="Source file, or '-' for stdin")
    p_tokens.set_defaults(func=cmd_tokens)

    p_ast = subparsers.add_parser("ast", parents=[common], help="Emit the AST as JSON")
    p_ast.add_argument("file", help="Source file, or '-' for stdin")
    p_ast.add_argument("--no-transform", action="store_true", dest="no_transform",
                       help="Keep the original set/define keywords")
    p_ast.set_defaults(func=cmd_ast)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config: Optional[DeclangConfig] = None
    try:
        config = _load_config(args)
        level = logging.DEBUG if args.verbose else config.log_level
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        code = args.func(args, config)
    except CompileError as e:
        logger.debug("compilation failed: %s", e)
        code = _report(e, config.format if config else (args.format or "text"))

    sys.exit(code)


if __name__ == "__main__":
    main()

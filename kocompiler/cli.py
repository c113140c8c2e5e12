"""Command-line entry point: lex, parse, optionally print the tree, emit assembly."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Sequence

from kocompiler.ast_printer import AstPrinter
from kocompiler.codegen import CodeGenerator
from kocompiler.lexer import LexerError, Token, lex
from kocompiler.parser import ParseError, parse

log = logging.getLogger(__name__)

PROG = "kocompiler"


def _usage() -> int:
    err = sys.stderr
    print(f"Usage: {PROG} code.ko [--print=parser] [--no-assembly]", file=err)
    print("Options:", file=err)
    print("  --print=parser     Print AST after parser phase", file=err)
    print(
        "  --no-assembly      Disable ARM assembly generation (enabled by default)",
        file=err,
    )
    return 1


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return a listing of tokens as ``text : type-number`` lines."""
    lines = ["Tokens: "]
    lines.extend(f"{token.text} : {int(token.type)}" for token in tokens)
    return "\n".join(lines) + "\n\n"


def read_source(path: str) -> str:
    """Read the whole source file as text."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the compiler; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 1 <= len(args) <= 3:
        return _usage()

    filename, flags = args[0], args[1:]
    print_parser = False
    output_assembly = True
    for flag in flags:
        if flag == "--print=parser":
            print_parser = True
        elif flag == "--no-assembly":
            output_assembly = False
        else:
            print(f"Unknown flag: {flag}", file=sys.stderr)
            return _usage()

    log.debug("Reading file")
    try:
        source = read_source(filename)
    except OSError as exc:
        print(f"Cannot read {filename}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    log.debug("Sending file to lexer")
    try:
        tokens = lex(source)
    except LexerError as exc:
        for line, column in exc.errors:
            print(f"Error: unexpected token at {line}:{column}")
        print(exc)
        return 1

    log.debug("Parse tokens")
    try:
        ast = parse(tokens)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1

    if print_parser:
        log.debug("Print AST")
        AstPrinter().print(ast)

    if output_assembly:
        log.debug("Generate assembly")
        sys.stdout.write(CodeGenerator().generate(ast))

    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Render expression trees as parenthesised prefix text."""

from __future__ import annotations

import sys
from typing import TextIO

from kocompiler.ast import Binary, Expression, Grouping, Literal, LiteralType, Unary, Visitor


class AstPrinter(Visitor):
    """Formats an expression tree as Lisp-like text, e.g. ``(+ 1 (group 2))``."""

    def format(self, expr: Expression) -> str:
        """Return the text form of ``expr``."""
        return expr.accept(self)

    def print(self, expr: Expression, file: TextIO | None = None) -> None:
        """Write the text form of ``expr`` and a newline to ``file`` (stdout by default)."""
        print(self.format(expr), file=file if file is not None else sys.stdout)

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name, *(expr.accept(self) for expr in exprs)]
        return "(" + " ".join(parts) + ")"

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.text, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.inner)

    def visit_literal_expr(self, expr: Literal) -> str:
        if expr.literal_type is LiteralType.NUMBER:
            return str(expr.value)
        if expr.literal_type is LiteralType.STRING:
            return str(expr.value)
        if expr.literal_type is LiteralType.BOOLEAN:
            return "true" if expr.value else "false"
        return "nil"

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.text, expr.right)
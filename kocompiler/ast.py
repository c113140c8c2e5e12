"""Expression tree nodes and the visitor interface that walks them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from kocompiler.lexer import Token


class Visitor(ABC):
    """Interface for operations over expression trees."""

    @abstractmethod
    def visit_binary_expr(self, expr: Binary) -> str:
        """Handle a binary expression."""

    @abstractmethod
    def visit_grouping_expr(self, expr: Grouping) -> str:
        """Handle a parenthesised expression."""

    @abstractmethod
    def visit_literal_expr(self, expr: Literal) -> str:
        """Handle a literal."""

    @abstractmethod
    def visit_unary_expr(self, expr: Unary) -> str:
        """Handle a unary expression."""


class Expression:
    """Base of every expression node."""

    def accept(self, visitor: Visitor) -> str:
        return ""


class LiteralType(enum.Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NIL = "nil"


@dataclass
class Binary(Expression):
    left: Expression
    operator: Token
    right: Expression

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_binary_expr(self)


@dataclass
class Grouping(Expression):
    inner: Expression

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_grouping_expr(self)


@dataclass
class Literal(Expression):
    """A literal value; ``value`` is None for NIL."""

    literal_type: LiteralType
    value: Union[int, str, bool, None] = None

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_literal_expr(self)


@dataclass
class Unary(Expression):
    operator: Token
    right: Expression

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_unary_expr(self)
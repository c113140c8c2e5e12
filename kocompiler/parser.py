"""Recursive-descent parser building expression trees from tokens."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from kocompiler.ast import Binary, Expression, Grouping, Literal, LiteralType, Unary
from kocompiler.lexer import Token, TokenType

log = logging.getLogger(__name__)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ParseError(Exception):
    """Raised when the tokens do not form a valid expression."""


def _number_value(text: str) -> int:
    """Integer value of a number token: the part before any decimal point."""
    value = int(text.split(".", 1)[0])
    if not _INT_MIN <= value <= _INT_MAX:
        raise ParseError(f"Number literal out of range: {text}")
    return value


class Parser:
    """Parses a token list into a single expression.

    Grammar, lowest precedence first: equality, comparison, addition,
    multiplication, unary, primary. Tokens after the expression are ignored.
    """

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.current = 0

    def parse(self, tokens: Sequence[Token]) -> Expression:
        self.tokens = list(tokens)
        self.current = 0
        expr = self.expression()
        log.debug("Parser complete")
        return expr

    def expression(self) -> Expression:
        return self._equality()

    def _at_end(self) -> bool:
        return self.current >= len(self.tokens)

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _advance(self) -> None:
        if not self._at_end():
            self.current += 1

    def _check(self, type_: TokenType) -> bool:
        return not self._at_end() and self.tokens[self.current].type == type_

    def _match(self, *types: TokenType) -> bool:
        if any(self._check(type_) for type_ in types):
            self._advance()
            return True
        return False

    def _consume(self, type_: TokenType, message: str) -> None:
        if not self._check(type_):
            raise ParseError(message)
        self._advance()

    def _binary(
        self, operand: Callable[[], Expression], *operators: TokenType
    ) -> Expression:
        left = operand()
        while self._match(*operators):
            operator = self._previous()
            left = Binary(left, operator, operand())
        return left

    def _equality(self) -> Expression:
        return self._binary(
            self._comparison, TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL
        )

    def _comparison(self) -> Expression:
        return self._binary(
            self._addition,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _addition(self) -> Expression:
        return self._binary(self._multiplication, TokenType.MINUS, TokenType.PLUS)

    def _multiplication(self) -> Expression:
        return self._binary(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Expression:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            return Unary(operator, self._unary())
        return self._primary()

    def _primary(self) -> Expression:
        if self._match(TokenType.FALSE):
            return Literal(LiteralType.BOOLEAN, False)
        if self._match(TokenType.TRUE):
            return Literal(LiteralType.BOOLEAN, True)
        if self._match(TokenType.NULL):
            return Literal(LiteralType.NIL)
        if self._match(TokenType.NUMBER):
            return Literal(LiteralType.NUMBER, _number_value(self._previous().text))
        if self._match(TokenType.STRING):
            return Literal(LiteralType.STRING, self._previous().text)
        if self._match(TokenType.LEFT_PAREN):
            inner = self.expression()
            self._consume(TokenType.RIGHT_PAREN, "Expected ')' after '('")
            return Grouping(inner)
        raise ParseError("Parser error unhandled type in Expression.primary()")


def parse(tokens: Sequence[Token]) -> Expression:
    """Parse ``tokens`` into an expression with a fresh parser."""
    return Parser().parse(tokens)
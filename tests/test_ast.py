import pytest

from kocompiler.ast import (
    Binary,
    Expression,
    Grouping,
    Literal,
    LiteralType,
    Unary,
    Visitor,
)
from kocompiler.lexer import Token, TokenType

PLUS = Token(TokenType.PLUS, "+", 0, 1)
MINUS = Token(TokenType.MINUS, "-", 0, 1)


class Tagger(Visitor):
    def visit_binary_expr(self, expr):
        return f"binary[{expr.left.accept(self)},{expr.right.accept(self)}]"

    def visit_grouping_expr(self, expr):
        return f"grouping[{expr.inner.accept(self)}]"

    def visit_literal_expr(self, expr):
        return f"literal[{expr.value}]"

    def visit_unary_expr(self, expr):
        return f"unary[{expr.right.accept(self)}]"


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()


def test_incomplete_visitor_cannot_be_created():
    class Partial(Visitor):
        def visit_binary_expr(self, expr):
            return "partial"

    class Completed(Partial):
        def visit_grouping_expr(self, expr):
            return ""

        def visit_literal_expr(self, expr):
            return ""

        def visit_unary_expr(self, expr):
            return ""

    with pytest.raises(TypeError):
        Partial()

    node = Binary(Literal(LiteralType.NUMBER, 1), PLUS, Literal(LiteralType.NUMBER, 2))
    assert node.accept(Completed()) == "partial"


def test_base_expression_accepts_with_empty_result():
    assert Expression().accept(Tagger()) == ""


def test_literal_dispatch():
    assert Literal(LiteralType.NUMBER, 7).accept(Tagger()) == "literal[7]"


def test_grouping_dispatch():
    node = Grouping(Literal(LiteralType.STRING, "s"))
    assert node.accept(Tagger()) == "grouping[literal[s]]"


def test_unary_dispatch():
    node = Unary(MINUS, Literal(LiteralType.NUMBER, 4))
    assert node.accept(Tagger()) == "unary[literal[4]]"


def test_binary_dispatch_nested():
    node = Binary(
        Literal(LiteralType.NUMBER, 1),
        PLUS,
        Grouping(Unary(MINUS, Literal(LiteralType.BOOLEAN, True))),
    )
    assert node.accept(Tagger()) == "binary[literal[1],grouping[unary[literal[True]]]]"


def test_nil_literal_has_no_value():
    node = Literal(LiteralType.NIL)
    assert node.value is None
    assert node.accept(Tagger()) == "literal[None]"


def test_nodes_compare_by_value():
    a = Binary(Literal(LiteralType.NUMBER, 1), PLUS, Literal(LiteralType.NUMBER, 2))
    b = Binary(Literal(LiteralType.NUMBER, 1), PLUS, Literal(LiteralType.NUMBER, 2))
    c = Binary(Literal(LiteralType.NUMBER, 1), MINUS, Literal(LiteralType.NUMBER, 2))
    assert a == b
    assert (a == c) is False
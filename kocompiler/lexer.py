"""Turn source text into a list of tokens."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass


class TokenType(enum.IntEnum):
    """Kinds of token; the integer values follow declaration order."""

    LEFT_PAREN = 0
    RIGHT_PAREN = 1
    LEFT_BRACE = 2
    RIGHT_BRACE = 3
    COMMA = 4
    DOT = 5
    MINUS = 6
    PLUS = 7
    SEMICOLON = 8
    STAR = 9
    SLASH = 10
    BANG = 11
    EQUAL = 12
    BANG_EQUAL = 13
    EQUAL_EQUAL = 14
    GREATER = 15
    GREATER_EQUAL = 16
    LESS = 17
    LESS_EQUAL = 18
    STRING = 19
    NUMBER = 20
    IDENTIFIER = 21
    TRUE = 22
    FALSE = 23
    AUTO = 24
    BREAK = 25
    CHAR = 26
    CONST = 27
    CONTINUE = 28
    DEFAULT = 29
    DO = 30
    DOUBLE = 31
    ELSE = 32
    ENUM = 33
    EXTERN = 34
    FLOAT = 35
    FOR = 36
    GOTO = 37
    IF = 38
    INT = 39
    LONG = 40
    NULL = 41
    REGISTER = 42
    RETURN = 43
    SHORT = 44
    SIGNED = 45
    SIZEOF = 46
    STATIC = 47
    STRUCT = 48
    SWITCH = 49
    TYPEDEF = 50
    UNION = 51
    UNSIGNED = 52
    VOID = 53
    VOLATILE = 54
    WHILE = 55


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind, text, offset in the source and line number."""

    type: TokenType
    text: str
    start_pos: int
    line: int


class LexerError(Exception):
    """Raised when the source holds characters the lexer cannot handle.

    ``errors`` lists the ``(line, column)`` of every offending character.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Lexer error encountered. Terminating compilation")


KEYWORDS = {
    "auto": TokenType.AUTO,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "break": TokenType.BREAK,
    "char": TokenType.CHAR,
    "const": TokenType.CONST,
    "do": TokenType.DO,
    "double": TokenType.DOUBLE,
    "else": TokenType.ELSE,
    "float": TokenType.FLOAT,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "int": TokenType.INT,
    "long": TokenType.LONG,
    "NULL": TokenType.NULL,
    "return": TokenType.RETURN,
    "short": TokenType.SHORT,
    "struct": TokenType.STRUCT,
    "void": TokenType.VOID,
    "while": TokenType.WHILE,
}

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that may be followed by '=': (type with '=', type without).
_WITH_EQUAL = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
}

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters)
_ALNUM = _DIGITS | _ALPHA
_BLANKS = frozenset(" \r\t")


class _Scanner:
    def __init__(self, source: str):
        self.source = source
        self.tokens: list[Token] = []
        self.errors: list[tuple[int, int]] = []
        self.line = 1
        self.column = 1
        self.start = 0
        self.current = 0

    def peek(self, offset: int = 1) -> str:
        index = self.current + offset
        return self.source[index] if index < len(self.source) else ""

    def advance(self) -> None:
        self.current += 1
        self.column += 1

    def add_token(self, type_: TokenType, text: str | None = None) -> None:
        if text is None:
            text = self.source[self.start : self.current + 1]
        self.tokens.append(Token(type_, text, self.start, self.line))

    def error(self) -> None:
        self.errors.append((self.line, self.column))

    def scan(self) -> list[Token]:
        while self.current < len(self.source):
            self.start = self.current
            char = self.source[self.current]
            if char in _SINGLE:
                self.add_token(_SINGLE[char])
            elif char in _BLANKS:
                pass
            elif char == "\n":
                self.line += 1
                self.column = 0
            elif char in _WITH_EQUAL:
                with_equal, alone = _WITH_EQUAL[char]
                if self.peek() == "=":
                    self.advance()
                    self.add_token(with_equal)
                else:
                    self.add_token(alone)
            elif char == "/":
                if self.peek() == "/":
                    while self.peek() and self.peek() != "\n":
                        self.advance()
                else:
                    self.add_token(TokenType.SLASH)
            elif char == '"':
                self.string()
            elif char in _DIGITS:
                self.number()
            elif char in _ALPHA:
                self.word()
            else:
                self.error()
            self.advance()

        if self.errors:
            raise LexerError(self.errors)
        return self.tokens

    def string(self) -> None:
        while self.peek() and self.peek() != '"':
            if self.peek() == "\n":
                self.line += 1
            self.advance()
        if not self.peek():
            self.error()
            return
        self.advance()
        self.add_token(TokenType.STRING, self.source[self.start + 1 : self.current])

    def number(self) -> None:
        while self.peek() in _DIGITS and self.peek():
            self.advance()
        if self.peek() == "." and self.peek(2) and self.peek(2) in _DIGITS:
            self.advance()
            while self.peek() and self.peek() in _DIGITS:
                self.advance()
        self.add_token(TokenType.NUMBER)

    def word(self) -> None:
        while self.peek() and self.peek() in _ALNUM:
            self.advance()
        text = self.source[self.start : self.current + 1]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def lex(source: str) -> list[Token]:
    """Split ``source`` into tokens.

    Raises :class:`LexerError` listing every unexpected character.
    """
    return _Scanner(source).scan()
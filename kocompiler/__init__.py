"""A small compiler: lexer, expression parser, AST printer and ARM assembly skeleton."""

__version__ = "0.1.0"
__all__ = ["__version__"]
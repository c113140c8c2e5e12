# kocompiler

kocompiler is a small compiler for `.ko` source files. It does three things:

- It turns source text into tokens.
- It parses a single expression from those tokens into a syntax tree.
- It can print that tree as parenthesised prefix text.

It also writes out an ARM assembly program skeleton.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Command line

```
kocompiler code.ko [--print=parser] [--no-assembly]
```

- `--print=parser` prints the parsed syntax tree to standard output.
- `--no-assembly` turns off ARM assembly output, which is on by default.

The command takes the file name and at most two flags. It exits with status 1
in any of these cases, and with 0 otherwise:

- The number of arguments is wrong, or a flag is unknown. The usage text goes
  to standard error.
- The file cannot be read.
- The lexer hits characters it does not accept. Each one is reported on
  standard output as `Error: unexpected token at LINE:COLUMN`.
- The parser rejects the tokens. The message goes to standard error.

## Library use

```python
from kocompiler.lexer import lex
from kocompiler.parser import parse
from kocompiler.ast_printer import AstPrinter
from kocompiler.codegen import CodeGenerator

tokens = lex('1 + 2 * (3 - 4) == "x"')
tree = parse(tokens)

print(AstPrinter().format(tree))      # (== (+ 1 (* 2 (group (- 3 4)))) x)
print(CodeGenerator().generate(tree))
```

### Lexer

- `kocompiler.lexer.lex(source)` returns a list of `Token` objects. Each token
  has `type`, `text`, `start_pos` and `line`.
- `TokenType` is an `IntEnum`.
- The lexer recognises the following:
  - punctuation and operators;
  - string literals in double quotes;
  - numbers, optionally with a decimal part;
  - identifiers;
  - a set of keywords, including `true`, `false`, `NULL`, `int` and `while`.
- `//` starts a comment that runs to the end of the line.
- Characters it does not accept raise `LexerError`. Its `errors` attribute
  lists the `(line, column)` of each of them.

`kocompiler.cli.format_tokens(tokens)` renders a token list as
`text : type-number` lines.

### Parser

`kocompiler.parser.parse(tokens)`, or `Parser().parse(tokens)`, builds one
expression. Tokens after that expression are ignored. The grammar, from the
loosest binding to the tightest:

| Level | Operators or forms |
| --- | --- |
| equality | `==`, `!=` |
| comparison | `>`, `>=`, `<`, `<=` |
| addition | `+`, `-` |
| multiplication | `*`, `/` |
| unary | `!`, `-` |
| primary | numbers, strings, `true`, `false`, `NULL` and parenthesised groups |

Number literals become integers, and any decimal part is dropped. A number
that falls outside the signed 32-bit range is an error.

The parser raises `ParseError` in these cases:

- a token cannot start a primary expression;
- a `)` is missing;
- a number is out of range.

### Syntax tree

The nodes in `kocompiler.ast` are `Binary`, `Grouping`, `Literal` and `Unary`.
A `Literal` has a `literal_type` from `LiteralType` (`NUMBER`, `STRING`,
`BOOLEAN`, `NIL`) and a `value`.

Each node's `accept(visitor)` calls the matching method of a `Visitor`
subclass.

### Printing and code generation

`AstPrinter.format(expr)` returns the prefix text of a tree.
`AstPrinter.print(expr, file=None)` writes that text to a stream, which is
standard output by default.

`CodeGenerator` keeps two lists of lines, one for the text section and one
for the data section.

- `generate(ast)` returns the whole assembly text.
- `emit(instruction)` appends a line to the text section.
- `emit_data(data)` appends a line to the data section.
- `get_assembly()` returns the data section, if there is one, followed by the
  `.text` section with `.global _start`.

## What it does not do

- The code generator emits no instructions for expressions. Every program it
  produces consists only of the exit system-call sequence.
- The parser handles one expression. It has no statements, declarations or
  functions, even though the lexer recognises keywords such as `int`, `if` and
  `while`.

## Tests

```
pip install .[test]
pytest
```
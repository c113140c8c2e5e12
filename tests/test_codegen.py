from kocompiler.ast import Literal, LiteralType
from kocompiler.codegen import CodeGenerator
from kocompiler.lexer import lex
from kocompiler.parser import parse

TEXT_HEADER = ".section .text\n.global _start\n\n"
EXIT_LINES = [
    "    @ Program exit",
    "    mov r7, #1       @ exit syscall",
    "    mov r0, #0       @ exit status",
    "    svc #0           @ system call",
]


def test_empty_assembly_has_only_text_header():
    assert CodeGenerator().get_assembly() == TEXT_HEADER


def test_emit_appends_lines_in_order():
    gen = CodeGenerator()
    gen.emit("first")
    gen.emit("second")
    assert gen.get_assembly() == TEXT_HEADER + "first\nsecond\n"


def test_data_section_precedes_text():
    gen = CodeGenerator()
    gen.emit_data("msg: .asciz \"hi\"")
    gen.emit("nop")
    assert gen.get_assembly() == (
        ".section .data\nmsg: .asciz \"hi\"\n\n" + TEXT_HEADER + "nop\n"
    )


def test_generate_emits_exit_sequence():
    ast = parse(lex("1 + 2"))
    output = CodeGenerator().generate(ast)
    assert output == TEXT_HEADER + "".join(line + "\n" for line in EXIT_LINES)


def test_generate_on_literal_matches_get_assembly():
    gen = CodeGenerator()
    output = gen.generate(Literal(LiteralType.NUMBER, 3))
    assert output == gen.get_assembly()
    assert output.splitlines()[-1] == EXIT_LINES[-1]


def test_visits_produce_empty_text():
    gen = CodeGenerator()
    ast = parse(lex("!(1 == 2)"))
    assert ast.accept(gen) == ""
    assert gen.get_assembly() == TEXT_HEADER
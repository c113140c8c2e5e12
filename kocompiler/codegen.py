"""Assembly generation for expression trees."""

from __future__ import annotations

from kocompiler.ast import Binary, Expression, Grouping, Literal, Unary, Visitor


class CodeGenerator(Visitor):
    """Collects assembly lines and data definitions into an ARM program.

    Expression nodes currently produce no instructions; the generated program
    consists of the exit sequence.
    """

    def __init__(self) -> None:
        self.assembly_lines: list[str] = []
        self.data_section: list[str] = []

    def visit_binary_expr(self, expr: Binary) -> str:
        return ""

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return ""

    def visit_literal_expr(self, expr: Literal) -> str:
        return ""

    def visit_unary_expr(self, expr: Unary) -> str:
        return ""

    def generate(self, ast: Expression) -> str:
        """Generate the program for ``ast`` and return the full assembly text."""
        self._prologue()
        ast.accept(self)
        self._epilogue()
        return self.get_assembly()

    def emit(self, instruction: str) -> None:
        """Append a line to the text section."""
        self.assembly_lines.append(instruction)

    def emit_data(self, data: str) -> None:
        """Append a line to the data section."""
        self.data_section.append(data)

    def get_assembly(self) -> str:
        """Return the data section (if any) followed by the text section."""
        parts: list[str] = []
        if self.data_section:
            parts.append(".section .data\n")
            parts.extend(f"{line}\n" for line in self.data_section)
            parts.append("\n")
        parts.append(".section .text\n")
        parts.append(".global _start\n\n")
        parts.extend(f"{line}\n" for line in self.assembly_lines)
        return "".join(parts)

    def _prologue(self) -> None:
        """Function prologue; nothing is needed yet."""

    def _epilogue(self) -> None:
        self.emit("    @ Program exit")
        self.emit("    mov r7, #1       @ exit syscall")
        self.emit("    mov r0, #0       @ exit status")
        self.emit("    svc #0           @ system call")
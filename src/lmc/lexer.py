from __future__ import annotations
import string
from typing import Mapping, Optional, Tuple

from .diagnostics import AsmSyntaxError, AsmSemanticError

MAX_LABEL_LEN = 32
COMMENT = "//"

BLANKS = " \t\r"
LABEL_CHARS = frozenset(string.ascii_letters + string.digits + "_")

def is_blank(c: str) -> bool:
    return c != "" and c in BLANKS

def is_label_char(c: str) -> bool:
    return c in LABEL_CHARS

def is_digit(c: str) -> bool:
    return c != "" and c in string.digits

class Scanner:
    """Character reader shared by both assembler passes.

    Works on the whole source text with a single cursor. Every error it
    raises carries the current line (1-based) and column.
    """

    def __init__(self, text: str, *, filename: Optional[str] = None):
        self.text = text
        self.filename = filename
        self.pos = 0
        self.line = 1

    # --- cursor ---

    @property
    def col(self) -> int:
        return self.pos - self.text.rfind("\n", 0, self.pos)

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def advance(self) -> str:
        c = self.peek()
        if c:
            self.pos += 1
            if c == "\n":
                self.line += 1
        return c

    def at_eof(self) -> bool:
        return self.pos >= len(self.text)

    def at_eol(self) -> bool:
        return self.peek() in ("\n", "")

    def at_comment(self) -> bool:
        return self.peek() == "/"

    def skip_blanks(self) -> None:
        while is_blank(self.peek()):
            self.pos += 1

    def syntax_error(self, kind: str, message: str, hint: str | None = None) -> AsmSyntaxError:
        return AsmSyntaxError(kind, message, line=self.line, col=self.col,
                              file=self.filename, hint=hint)

    def semantic_error(self, kind: str, message: str, hint: str | None = None) -> AsmSemanticError:
        return AsmSemanticError(kind, message, line=self.line, col=self.col,
                                file=self.filename, hint=hint)

    # --- line level ---

    def skip_line(self) -> None:
        """Consume the rest of the line verbatim, newline included."""
        while not self.at_eol():
            self.pos += 1
        self.advance()

    def skip_to_end_of_line(self, allow_comment: bool = True) -> None:
        """Consume the rest of the line; only blanks (and a comment) may remain."""
        while not self.at_eol():
            c = self.peek()
            if is_blank(c):
                self.pos += 1
                continue
            if c == "/" and allow_comment:
                if self.peek(1) != "/":
                    self.pos += 1
                    raise self.syntax_error("UnexpectedSlash", "'/' inesperado",
                                            hint=f"los comentarios empiezan con '{COMMENT}'")
                self.skip_line()
                return
            raise self.syntax_error("ExpectedEndOfLine",
                                    f"Se esperaba fin de línea, encontrado '{c}'")
        self.advance()

    def begin_line(self) -> Tuple[Optional[str], bool]:
        """Read the head of a source line.

        Returns (label, has_statement). A label must start in column 0; a
        line without label carries its statement after at least one blank.
        When has_statement is True the cursor sits on the mnemonic, otherwise
        the whole line has been consumed.
        """
        label = None
        c = self.peek()
        if c == "\n":
            self.advance()
            return None, False
        if c == "/":
            self.skip_to_end_of_line()
            return None, False
        if not is_blank(c):
            label = self.read_label()
            if not (self.at_eol() or is_blank(self.peek()) or self.at_comment()):
                raise self.syntax_error("InvalidLabel",
                                        f"Carácter inesperado tras la etiqueta: '{self.peek()}'")
        self.skip_blanks()
        if self.at_eol() or self.at_comment():
            self.skip_to_end_of_line()
            return label, False
        return label, True

    # --- tokens ---

    def read_label(self) -> str:
        """Read a label name: letters, digits and '_', not starting with a digit."""
        c = self.peek()
        if is_digit(c):
            raise self.syntax_error("LabelStartsWithDigit", "La etiqueta empieza con un dígito")
        if not is_label_char(c):
            raise self.syntax_error("InvalidLabel", f"Etiqueta inválida: '{c}'")
        start = self.pos
        while is_label_char(self.peek()) and self.pos - start < MAX_LABEL_LEN:
            self.pos += 1
        if is_label_char(self.peek()):
            raise self.syntax_error("LabelTooLong",
                                    f"La etiqueta excede la longitud máxima de {MAX_LABEL_LEN}")
        return self.text[start:self.pos]

    def read_mnemonic(self) -> str:
        start = self.pos
        while is_label_char(self.peek()):
            self.pos += 1
        if start == self.pos:
            raise self.syntax_error("ExpectedOpcode",
                                    f"Se esperaba una instrucción, encontrado '{self.peek()}'")
        return self.text[start:self.pos]

    def read_operand(self, symbols: Mapping[str, int]) -> int:
        """Read a decimal literal or a label reference and return its value."""
        c = self.peek()
        if is_digit(c):
            start = self.pos
            while is_digit(self.peek()):
                self.pos += 1
            if is_label_char(self.peek()):
                raise self.syntax_error("AmbiguousOperand",
                                        f"Operando ambiguo: '{self.text[start:self.pos]}{self.peek()}...'",
                                        hint="las etiquetas no pueden empezar con un dígito")
            return int(self.text[start:self.pos])
        if is_label_char(c):
            line, col = self.line, self.col
            name = self.read_label()
            addr = symbols.get(name)
            if addr is None:
                raise AsmSemanticError("UndefinedLabel", f"Etiqueta no definida: {name}",
                                       line=line, col=col, file=self.filename)
            return addr
        raise self.syntax_error("MissingOperand", "Campo de dirección inválido o ausente")

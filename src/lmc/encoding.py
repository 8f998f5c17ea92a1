# src/lmc/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping
import logging

from .config import Arch, DEFAULT_ARCH
from .isa import OpSpec, OP_IO, lookup
from .lexer import Scanner, is_label_char
from .utils import in_range, join_word
from .diagnostics import AsmSemanticError

logger = logging.getLogger(__name__)

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # 0..max_value
    addr: int     # buzón que ocupa esta palabra
    line: int
    mnemonic: str

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]

# ---------------- Codificadores por forma ----------------

def encode_op(code: int, addr: int, *, arch: Arch = DEFAULT_ARCH,
              name: str = "", line: int | None = None, file: str | None = None) -> int:
    """Opcode de un dígito seguido de la dirección."""
    if not in_range(addr, arch.max_addr):
        raise AsmSemanticError("AddressOutOfRange",
                               f"{name} buzón {addr} fuera de rango (0..{arch.max_addr})",
                               line=line, file=file)
    return join_word(code, addr, arch.mailboxes)

def encode_dat(value: int, *, arch: Arch = DEFAULT_ARCH,
               line: int | None = None, file: str | None = None) -> int:
    """Valor literal de DAT, tal cual."""
    if not in_range(value, arch.max_value):
        raise AsmSemanticError("ValueOutOfRange",
                               f"Valor DAT {value} fuera de rango (0..{arch.max_value})",
                               line=line, file=file)
    return value

def encode_io(selector: int, *, arch: Arch = DEFAULT_ARCH,
              line: int | None = None, file: str | None = None) -> int:
    """Las dos instrucciones de E/S son 9xx con el selector en el campo de dirección."""
    return encode_op(OP_IO, selector, arch=arch, name="E/S", line=line, file=file)

# ---------------- Pasada 2 ----------------

def _read_argument(sc: Scanner, op: OpSpec, symtab: Mapping[str, int]) -> int:
    sc.skip_blanks()
    if op.arity == "none":
        return 0
    if op.arity == "optional" and not is_label_char(sc.peek()):
        return 0
    return sc.read_operand(symtab)

def encode(text: str, symtab: Mapping[str, int], *, filename: str | None = None,
           arch: Arch = DEFAULT_ARCH) -> EncodeResult:
    """Vuelve a recorrer el fuente y codifica cada instrucción.

    Las direcciones de las etiquetas vienen de la pasada 1, por lo que las
    referencias hacia adelante se resuelven igual que las hacia atrás.
    """
    words: List[Encoded] = []
    sc = Scanner(text, filename=filename)

    while not sc.at_eof():
        line = sc.line
        _, has_stmt = sc.begin_line()
        if not has_stmt:
            continue

        col = sc.col
        name = sc.read_mnemonic()
        try:
            op = lookup(name)
        except KeyError:
            raise AsmSemanticError("UnknownOpcode", f"No existe la instrucción {name}",
                                   line=line, col=col, file=filename) from None

        arg = _read_argument(sc, op, symtab)
        sc.skip_to_end_of_line()

        if op.kind == "dat":
            word = encode_dat(arg, arch=arch, line=line, file=filename)
        elif op.kind == "io":
            word = encode_io(op.code, arch=arch, line=line, file=filename)
        else:
            word = encode_op(op.code, arg, arch=arch, name=op.name, line=line, file=filename)

        words.append(Encoded(word=word, addr=len(words), line=line, mnemonic=op.name))
        logger.debug("%s:%d %02d: %s %d -> %0*d", filename or "<mem>", line,
                     len(words) - 1, op.name, arg, arch.num_digits, word)

    return EncodeResult(words=words)

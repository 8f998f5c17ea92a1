# src/lmc/linker.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple
import logging

from .config import Arch, DEFAULT_ARCH
from .lexer import Scanner
from .diagnostics import AsmSemanticError

logger = logging.getLogger(__name__)

# ---------- Tabla de símbolos ----------

@dataclass
class SymbolTable:
    """Etiquetas en orden de declaración con su dirección.

    Sólo admite altas; una vez definida, la dirección de una etiqueta no cambia.
    """
    _addrs: Dict[str, int] = field(default_factory=dict)
    _order: List[Tuple[str, int]] = field(default_factory=list)

    def define(self, name: str, addr: int, *, line: int | None = None,
               file: str | None = None) -> None:
        if name in self._addrs:
            raise AsmSemanticError("DuplicateLabel", f"Etiqueta redefinida: {name}",
                                   line=line, file=file)
        self._addrs[name] = addr
        self._order.append((name, addr))

    def get(self, name: str, default: Optional[int] = None) -> Optional[int]:
        return self._addrs.get(name, default)

    def __getitem__(self, name: str) -> int:
        return self._addrs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._addrs

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._order)

    def items(self) -> List[Tuple[str, int]]:
        return list(self._order)

# ---------- Resultado de la pasada 1 ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: SymbolTable
    size: int          # número de buzones ocupados

# ---------- Pasada 1 (direcciones de etiquetas) ----------

def first_pass(text: str, *, filename: str | None = None,
               arch: Arch = DEFAULT_ARCH) -> LinkResult:
    """Asigna una dirección a cada línea con instrucción y enlaza las etiquetas.

    Una etiqueta sola en su línea queda ligada a la dirección de la siguiente
    instrucción. El contenido de las instrucciones no se examina aquí.
    """
    symtab = SymbolTable()
    sc = Scanner(text, filename=filename)
    addr = 0

    while not sc.at_eof():
        line = sc.line
        label, has_stmt = sc.begin_line()
        if label is not None:
            symtab.define(label, addr, line=line, file=filename)
        if has_stmt:
            if addr >= arch.mailboxes:
                raise AsmSemanticError(
                    "ProgramTooLarge",
                    f"Programa demasiado largo: más de {arch.mailboxes} buzones",
                    line=line, file=filename,
                )
            sc.skip_line()
            addr += 1

    logger.info("Pasada 1: %d buzones, %d etiquetas", addr, len(symtab))
    return LinkResult(symtab=symtab, size=addr)

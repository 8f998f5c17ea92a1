'''
tabla de instrucciones LMC (mnemónico, código, aridad, forma de codificación)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Literal

Arity = Literal["none", "required", "optional"]
Kind = Literal["op", "dat", "io"]

@dataclass(frozen=True)
class OpSpec:
    """Descripción de una instrucción del ensamblador.

    - code: opcode (kind 'op'), selector de E/S (kind 'io') o None para DAT
    - arity: 'none', 'required' u 'optional' (sólo DAT)
    - kind: 'op' emite opcode + dirección, 'dat' emite el valor literal,
      'io' emite el opcode de E/S con el selector en el campo de dirección
    """
    name: str
    code: int | None
    arity: Arity
    kind: Kind = "op"

# Opcode reservado para E/S
OP_IO = 9

# Selectores de E/S (campo de dirección de 9xx)
IO_INPUT  = 1
IO_OUTPUT = 2

OPCODES: Dict[str, OpSpec] = {}

def _add(op: OpSpec) -> None:
    OPCODES[op.name] = op

_add(OpSpec("DAT", None, "optional", "dat"))
_add(OpSpec("HLT", 0, "none"))
_add(OpSpec("COB", 0, "none"))   # "coffee break", alias de HLT
_add(OpSpec("ADD", 1, "required"))
_add(OpSpec("SUB", 2, "required"))
_add(OpSpec("STA", 3, "required"))
_add(OpSpec("LDA", 5, "required"))
_add(OpSpec("BRA", 6, "required"))
_add(OpSpec("BRZ", 7, "required"))
_add(OpSpec("BRP", 8, "required"))
_add(OpSpec("INP", IO_INPUT, "none", "io"))
_add(OpSpec("OUT", IO_OUTPUT, "none", "io"))

def lookup(mnemonic: str) -> OpSpec:
    """Devuelve la descripción de una instrucción por mnemónico (sin distinguir mayúsculas)."""
    m = mnemonic.upper()
    if m not in OPCODES:
        raise KeyError(f"Instrucción desconocida: {mnemonic}")
    return OPCODES[m]

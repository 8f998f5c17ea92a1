'''
aritmética decimal (rangos, dígitos, split de palabras)
'''

from __future__ import annotations
from typing import Tuple

def in_range(x: int, hi: int, lo: int = 0) -> bool:
    """Devuelve True si x está en [lo, hi]."""
    return lo <= x <= hi

def to_decimal(x: int, digits: int) -> str:
    """Representación decimal de ancho fijo, con ceros a la izquierda."""
    if digits <= 0:
        raise ValueError("digits debe ser positivo")
    if not in_range(x, 10 ** digits - 1):
        raise ValueError(f"{x} no cabe en {digits} dígitos")
    return format(x, f"0{digits}d")

def split_word(word: int, mailboxes: int = 100) -> Tuple[int, int]:
    """Separa una palabra en (opcode, dirección)."""
    return word // mailboxes, word % mailboxes

def join_word(opcode: int, addr: int, mailboxes: int = 100) -> int:
    """Inversa de split_word."""
    return opcode * mailboxes + addr

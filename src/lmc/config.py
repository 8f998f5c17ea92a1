'''
parámetros de la arquitectura decimal (dígitos por palabra, buzones, rangos)
'''

from __future__ import annotations
import logging, sys
from dataclasses import dataclass

@dataclass(frozen=True)
class Arch:
    """Arquitectura de la máquina decimal.

    Todo se deriva del número de dígitos por palabra: con 3 dígitos hay
    100 buzones (direcciones 0..99) y cada palabra vale 0..999. El primer
    dígito de una instrucción es siempre el opcode.
    """
    num_digits: int = 3

    def __post_init__(self) -> None:
        if self.num_digits < 2:
            raise ValueError("num_digits debe ser al menos 2")

    @property
    def mailboxes(self) -> int:
        return 10 ** (self.num_digits - 1)

    @property
    def max_addr(self) -> int:
        return self.mailboxes - 1

    @property
    def max_value(self) -> int:
        return 10 ** self.num_digits - 1

DEFAULT_ARCH = Arch()

def configure_logging(verbose: bool = False) -> None:
    """Logging para los CLI: WARNING por defecto, DEBUG con -v."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

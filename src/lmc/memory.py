'''
buzones de la máquina y cargador del artefacto
'''

from __future__ import annotations
from typing import Iterable, List, Union
import logging

from .config import Arch, DEFAULT_ARCH
from .utils import in_range
from .diagnostics import LoadError

logger = logging.getLogger(__name__)

class Memory:
    """Array fijo de palabras decimales; índice = dirección.

    Se crea a cero. Acceder fuera de 0..mailboxes-1 es un error de rango
    (IndexError), igual que escribir un valor fuera de 0..max_value (ValueError).
    """

    def __init__(self, arch: Arch = DEFAULT_ARCH):
        self.arch = arch
        self._cells: List[int] = [0] * arch.mailboxes

    def __len__(self) -> int:
        return len(self._cells)

    def _check_addr(self, addr: int) -> None:
        if not in_range(addr, self.arch.max_addr):
            raise IndexError(f"dirección {addr} fuera de rango (0..{self.arch.max_addr})")

    def read(self, addr: int) -> int:
        self._check_addr(addr)
        return self._cells[addr]

    def write(self, addr: int, value: int) -> None:
        self._check_addr(addr)
        if not in_range(value, self.arch.max_value):
            raise ValueError(f"valor {value} fuera de rango (0..{self.arch.max_value})")
        self._cells[addr] = value

    def load(self, words: Iterable[int]) -> int:
        """Copia las palabras desde la dirección 0. El resto queda a cero."""
        self._cells = [0] * self.arch.mailboxes
        n = 0
        for addr, value in enumerate(words):
            self.write(addr, value)
            n += 1
        return n

    def snapshot(self) -> List[int]:
        return list(self._cells)

# ---------- Artefacto ----------

def parse_artifact(data: Union[str, bytes], *, arch: Arch = DEFAULT_ARCH) -> List[int]:
    """Convierte el flujo de dígitos ASCII en palabras.

    Se tolera un único fin de línea al final; cualquier otro carácter que no
    sea un dígito, una longitud que no sea múltiplo de num_digits o más
    palabras que buzones es un LoadError.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as ex:
            raise LoadError(f"el artefacto contiene bytes no ASCII: {ex}") from None
    if data.endswith("\r\n"):
        data = data[:-2]
    elif data.endswith("\n"):
        data = data[:-1]

    for i, ch in enumerate(data):
        if ch not in "0123456789":
            raise LoadError(f"carácter no decimal {ch!r} en la posición {i}")
    if len(data) % arch.num_digits != 0:
        raise LoadError("El tamaño del archivo no es múltiplo del número de dígitos por buzón")

    d = arch.num_digits
    words = [int(data[i:i + d]) for i in range(0, len(data), d)]
    if len(words) > arch.mailboxes:
        raise LoadError(f"el programa ocupa {len(words)} buzones, máximo {arch.mailboxes}")
    return words

def load_artifact(path: str, *, arch: Arch = DEFAULT_ARCH) -> List[int]:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as ex:
        raise LoadError(f"Error al abrir {path}: {ex.strerror or ex}") from ex
    words = parse_artifact(data, arch=arch)
    logger.info("%s cargado. %d buzones.", path, len(words))
    return words

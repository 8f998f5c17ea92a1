from __future__ import annotations
import sys
from typing import Optional, TextIO

class Console:
    """Canal de E/S del operador para INP y OUT.

    Por defecto usa stdin/stdout; los tests pasan io.StringIO. `prompt=False`
    suprime el texto de petición (útil cuando la entrada viene redirigida).
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 *, prompt: bool = True):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def read_value(self, max_value: int) -> int:
        """Bloquea hasta leer un entero decimal en 0..max_value; repite si no es válido.

        Lanza EOFError si la entrada se agota.
        """
        while True:
            if self.prompt:
                self.stdout.write(f"Introduce un número (0-{max_value}): ")
                self.stdout.flush()
            line = self.stdin.readline()
            if line == "":
                raise EOFError("entrada agotada")
            tok = line.strip()
            if tok.isascii() and tok.isdigit() and int(tok) <= max_value:
                return int(tok)

    def write_value(self, value: int) -> None:
        self.stdout.write(f"{value}\n")
        self.stdout.flush()

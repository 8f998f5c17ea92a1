from __future__ import annotations
import os, tempfile
from typing import Iterable
from .config import Arch, DEFAULT_ARCH
from .utils import to_decimal
from .encoding import Encoded

def to_artifact(words: Iterable[Encoded], *, arch: Arch = DEFAULT_ARCH) -> str:
    """Dígitos ASCII, num_digits por palabra, sin separadores ni cabecera."""
    return "".join(to_decimal(w.word, arch.num_digits) for w in words)

def write_artifact(words: Iterable[Encoded], path: str, *, arch: Arch = DEFAULT_ARCH) -> None:
    """Escribe el artefacto completo o nada: se usa un temporal que luego se renombra."""
    data = to_artifact(words, arch=arch)
    f = tempfile.NamedTemporaryFile("w", encoding="ascii", newline="",
                                    dir=os.path.dirname(path) or ".",
                                    prefix=".lmasm-", suffix=".tmp", delete=False)
    try:
        with f:
            f.write(data)
        os.replace(f.name, path)
    except OSError:
        if os.path.exists(f.name):
            os.remove(f.name)
        raise

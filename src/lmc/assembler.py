from __future__ import annotations
import argparse, logging, sys
from dataclasses import dataclass
from typing import List

from .config import Arch, DEFAULT_ARCH, configure_logging
from .linker import first_pass, LinkResult
from .encoding import encode, Encoded
from .writers import write_artifact
from .diagnostics import AsmError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AssemblyResult:
    words: List[Encoded]
    link: LinkResult

def assemble_text(text: str, *, filename: str | None = None,
                  arch: Arch = DEFAULT_ARCH) -> AssemblyResult:
    """Hace PASADA 1 y PASADA 2. Lanza AsmError con el primer problema encontrado."""
    logger.info("Ensamblando para un sistema de %d dígitos. Valor máximo: %d",
                arch.num_digits, arch.max_value)
    link = first_pass(text, filename=filename, arch=arch)
    enc = encode(text, link.symtab, filename=filename, arch=arch)
    return AssemblyResult(words=enc.words, link=link)

def assemble_file(source: str, output: str, *, arch: Arch = DEFAULT_ARCH) -> AssemblyResult:
    """Ensambla `source` y escribe el artefacto en `output` sólo si no hubo errores."""
    with open(source, "r", encoding="utf-8") as f:
        text = f.read()
    result = assemble_text(text, filename=source, arch=arch)
    write_artifact(result.words, output, arch=arch)
    logger.info("%s: %d buzones, %d bytes en disco", output,
                len(result.words), len(result.words) * arch.num_digits)
    return result

def add_arguments(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("source", help="archivo .lmc/.asm de entrada")
    ap.add_argument("output", help="artefacto de salida (dígitos decimales)")
    ap.add_argument("--digits", type=int, default=DEFAULT_ARCH.num_digits,
                    help="dígitos por palabra (3 → 100 buzones)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log detallado")

def run(args: argparse.Namespace) -> int:
    configure_logging(args.verbose)
    try:
        arch = Arch(num_digits=args.digits)
    except ValueError as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return 1

    try:
        result = assemble_file(args.source, args.output, arch=arch)
    except AsmError as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 1
    except OSError as ex:
        name = ex.filename if ex.filename is not None else args.source
        print(f"ERROR: no pude acceder a {name}: {ex.strerror or ex}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as ex:
        print(f"ERROR: {args.source} no es texto UTF-8: {ex}", file=sys.stderr)
        return 1

    print(f"OK: {len(result.words)} palabras → {args.output}")
    return 0

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="lmasm", description="Ensamblador de dos pasadas para LMC")
    add_arguments(ap)
    return run(ap.parse_args(argv))

if __name__ == "__main__":
    raise SystemExit(main())

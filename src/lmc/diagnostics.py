'''
clase Diagnostic, excepciones del ensamblador/cargador y helpers
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

# Tipos de error del ensamblador
SyntaxKind = Literal[
    "LabelStartsWithDigit", "LabelTooLong", "InvalidLabel",
    "AmbiguousOperand", "MissingOperand", "ExpectedOpcode",
    "ExpectedEndOfLine", "UnexpectedSlash",
]
SemanticKind = Literal[
    "UndefinedLabel", "DuplicateLabel", "UnknownOpcode",
    "AddressOutOfRange", "ValueOutOfRange", "ProgramTooLarge",
]

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo, línea y columna)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

# ---- Excepciones ----

class AsmError(Exception):
    """Error fatal de ensamblado. El primero que aparece aborta ambas pasadas."""

    def __init__(self, kind: str, message: str, *, line: int | None = None,
                 col: int | None = None, hint: str | None = None,
                 file: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.line = line
        self.col = col
        self.hint = hint
        self.file = file

    @property
    def diagnostic(self) -> Diagnostic:
        return error(self.message, line=self.line, col=self.col,
                     file=self.file, hint=self.hint)

    def __str__(self) -> str:
        return str(self.diagnostic)

class AsmSyntaxError(AsmError):
    """Token mal formado, fin de línea inesperado, etiqueta inválida."""
    kind: SyntaxKind

class AsmSemanticError(AsmError):
    """Etiqueta no definida, rango excedido, mnemónico desconocido, programa demasiado largo."""
    kind: SemanticKind

class LoadError(Exception):
    """El artefacto no se pudo leer o no tiene el formato esperado."""

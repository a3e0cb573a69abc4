'''
clase Diagnostic, excepción AsmError y helpers (línea/columna, tipos de error)
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

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Lleva ubicación opcional (archivo, línea y columna), un mensaje de ayuda
    (pista) y el tipo de error que lo originó (``kind``), útil para los tests
    y para herramientas que quieran distinguir errores sin leer el mensaje.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    kind: Optional[str] = None

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
          file: str | None = None, hint: str | None = None,
          kind: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file, kind)


class AsmError(Exception):
    """Error del front-end. Se propaga hasta el punto de entrada del parser.

    La ubicación puede faltar al crearse (p.ej. en el resolutor de registros,
    que no conoce la posición); quien la conozca la añade con ``locate``.
    """
    kind = "asm"

    def __init__(self, message: str, *, hint: str | None = None,
                 line: int | None = None, col: int | None = None,
                 file: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.line = line
        self.col = col
        self.file = file

    def locate(self, line: int | None = None, col: int | None = None,
               file: str | None = None) -> "AsmError":
        """Completa la ubicación sin pisar la que ya tenga. Devuelve self."""
        if self.line is None and line is not None:
            self.line = line
            self.col = col
        if self.file is None:
            self.file = file
        return self

    @property
    def diagnostic(self) -> Diagnostic:
        return error(self.message, line=self.line, col=self.col,
                     file=self.file, hint=self.hint, kind=self.kind)

    def __str__(self) -> str:
        return str(self.diagnostic)


class AsmSyntaxError(AsmError):
    """Ningún parser (etiqueta, directiva, instrucción) reconoce la entrada."""
    kind = "syntax"


class ValueOutOfRange(AsmError):
    """Literal entero que no cabe en su campo (inmediato, .byte, .half, ...)."""
    kind = "value-range"

    def __init__(self, value: int, what: str, lo: int, hi: int, **kw):
        super().__init__(f"Valor {value} fuera de rango para {what}",
                         hint=f"rango permitido: {lo}..{hi}", **kw)
        self.value = value
        self.what = what

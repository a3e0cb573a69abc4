'''
Span: vista inmutable sobre el texto fuente con línea/columna precalculadas
'''

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Span:
    """Sufijo del texto fuente que empieza en ``offset``.

    ``line`` y ``col`` (base 1) son la posición de ``offset``. Los parsers
    nunca modifican un Span: consumir un prefijo devuelve uno nuevo.
    """
    text: str
    offset: int = 0
    line: int = 1
    col: int = 1

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self, n: int = 1) -> str:
        return self.text[self.offset:self.offset + n]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def match(self, pattern: re.Pattern) -> Optional[re.Match]:
        """Aplica ``pattern`` anclado en el offset actual."""
        return pattern.match(self.text, self.offset)

    def advance(self, n: int) -> "Span":
        """Consume ``n`` caracteres y recalcula línea/columna."""
        if n <= 0:
            return self
        end = min(self.offset + n, len(self.text))
        newlines = self.text.count("\n", self.offset, end)
        if newlines:
            last_nl = self.text.rfind("\n", self.offset, end)
            return Span(self.text, end, self.line + newlines, end - last_nl)
        return Span(self.text, end, self.line, self.col + (end - self.offset))

    def advance_to(self, end: int) -> "Span":
        return self.advance(end - self.offset)

    def __repr__(self) -> str:
        preview = self.text[self.offset:self.offset + 16]
        return f"Span({self.line}:{self.col}, {preview!r})"

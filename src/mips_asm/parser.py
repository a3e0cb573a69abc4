# src/mips_asm/parser.py
from __future__ import annotations
import logging
import re
from typing import List, Optional, Tuple

from .ast import Item, Label, Program
from .combinators import Result, alt
from .diagnostics import AsmError, AsmSyntaxError, Diagnostic
from .directives import parse_directive
from .lexer import TAB_WIDTH, skip_ws_comments, tabs_to_spaces
from .operands import parse_instruction
from .span import Span

logger = logging.getLogger(__name__)

LABEL_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_.]*) *:")

def parse_label(s: Span) -> Result:
    """'nombre:' (admite espacios antes de ':')."""
    m = s.match(LABEL_RE)
    if m is None:
        return None
    return s.advance_to(m.end()), Label(name=m.group(1))

# El orden importa: 'main:' también empieza como una instrucción.
parse_item = alt(
    parse_label,
    parse_directive,
    parse_instruction,
)

def parse_program(s: Span) -> Program:
    """Bucle principal: blancos, posición, item, blancos; hasta agotar la entrada.

    Si ningún parser reconoce el item se lanza AsmSyntaxError en la posición
    registrada; no se intenta resincronizar.
    """
    items: List[Tuple[Item, int]] = []
    cur = s
    while True:
        cur = skip_ws_comments(cur)
        if cur.at_end():
            break
        pos = cur
        r = parse_item(cur)
        if r is None:
            logger.debug("ningún item reconocido en %d:%d", pos.line, pos.col)
            raise AsmSyntaxError(
                "se esperaba etiqueta, directiva o instrucción",
                line=pos.line, col=pos.col,
                hint=f"cerca de {pos.peek(16).splitlines()[0]!r}",
            )
        cur, item = r
        items.append((item, pos.line))
    return Program(items=tuple(items))

def parse_mips(text: str, *, filename: Optional[str] = None,
               tab_width: int = TAB_WIDTH) -> Program:
    """Parsea un fuente MIPS completo y devuelve el Program.

    Lanza AsmError (AsmSyntaxError, RegisterError, ValueOutOfRange) con
    línea/columna y el nombre de archivo si se indicó.
    """
    normalized = tabs_to_spaces(text, tab_width)
    try:
        program = parse_program(Span(normalized))
    except AsmError as e:
        raise e.locate(file=filename)
    logger.debug("%s: %d items", filename or "<texto>", len(program))
    return program

def parse(text: str, *, filename: Optional[str] = None,
          tab_width: int = TAB_WIDTH) -> Tuple[Optional[Program], List[Diagnostic]]:
    """
    Devuelve (program, diagnostics):
      - éxito: (Program, [])
      - fallo: (None, [diagnóstico]), exactamente uno; no hay programas parciales.
    """
    try:
        return parse_mips(text, filename=filename, tab_width=tab_width), []
    except AsmError as e:
        return None, [e.diagnostic]

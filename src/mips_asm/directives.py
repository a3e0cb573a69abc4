'''
sintaxis de directivas (.text, .data, .word, .asciiz, ...); su semántica la interpreta otra fase
'''

from __future__ import annotations
import re
from typing import Callable, Dict, Tuple

from .ast import Directive, Repeat
from .combinators import Result, alt, opt, pmap, position, preceded, separated_list1, seq, tag
from .diagnostics import ValueOutOfRange
from .lexer import float_literal, identifier, int_literal, space0, space1, string_literal
from .operands import comma, symbol
from .span import Span
from .utils import fits_nbit, nbit_range

DIRECTIVE_RE = re.compile(r"\.[A-Za-z_][A-Za-z0-9_]*(?![A-Za-z0-9_.])")

# Máximo de repeticiones en 'valor:n'
MAX_REPEAT = (1 << 31) - 1

def _no_args(s: Span) -> Result:
    return s, []

def _string(s: Span) -> Result:
    return pmap(preceded(space1, string_literal), lambda v: [v])(s)

def _repeat(s: Span) -> Result:
    """':n' opcional tras un elemento de .byte/.half/.word."""
    return opt(preceded(seq(space0, tag(":"), space0), seq(position, int_literal)))(s)

def _int_list(bits: int, what: str, allow_symbols: bool = False) -> Callable[[Span], Result]:
    lo, hi = nbit_range(bits)

    def _element(s: Span) -> Result:
        r = seq(position, int_literal)(s)
        if r is None:
            if allow_symbols:
                return pmap(symbol, lambda sym: [sym])(s)
            return None
        rest, (pos, value) = r
        if not fits_nbit(value, bits):
            raise ValueOutOfRange(value, what, lo, hi, line=pos.line, col=pos.col)
        rest, rep = _repeat(rest)
        if rep is None:
            return rest, [value]
        rpos, count = rep
        if not 1 <= count <= MAX_REPEAT:
            raise ValueOutOfRange(count, "una repetición", 1, MAX_REPEAT,
                                  line=rpos.line, col=rpos.col)
        return rest, [Repeat(value, count)]

    def _list(s: Span) -> Result:
        r = preceded(space1, separated_list1(comma, _element))(s)
        if r is None:
            return None
        rest, chunks = r
        return rest, [v for chunk in chunks for v in chunk]
    return _list

def _float_list(s: Span) -> Result:
    number = alt(float_literal, pmap(int_literal, float))
    return preceded(space1, separated_list1(comma, number))(s)

def _unsigned(what: str) -> Callable[[Span], Result]:
    def _parse(s: Span) -> Result:
        r = preceded(space1, seq(position, int_literal))(s)
        if r is None:
            return None
        rest, (pos, value) = r
        if not 0 <= value <= MAX_REPEAT:
            raise ValueOutOfRange(value, what, 0, MAX_REPEAT, line=pos.line, col=pos.col)
        return rest, [value]
    return _parse

def _ident(s: Span) -> Result:
    return pmap(preceded(space1, identifier), lambda v: [v])(s)

_HANDLERS: Dict[str, Callable[[Span], Result]] = {
    ".text":   _no_args,
    ".data":   _no_args,
    ".ktext":  _no_args,
    ".kdata":  _no_args,
    ".ascii":  _string,
    ".asciiz": _string,
    ".byte":   _int_list(8, ".byte"),
    ".half":   _int_list(16, ".half"),
    ".word":   _int_list(32, ".word", allow_symbols=True),
    ".float":  _float_list,
    ".double": _float_list,
    ".align":  _unsigned(".align"),
    ".space":  _unsigned(".space"),
    ".globl":  _ident,
}

DIRECTIVES: Tuple[str, ...] = tuple(_HANDLERS)

def parse_directive(s: Span) -> Result:
    """'.nombre args'. Un nombre desconocido o argumentos mal formados no
    consumen nada (el dispatcher probará la siguiente alternativa)."""
    m = s.match(DIRECTIVE_RE)
    if m is None:
        return None
    name = m.group(0)
    handler = _HANDLERS.get(name)
    if handler is None:
        return None
    r = handler(s.advance_to(m.end()))
    if r is None:
        return None
    rest, args = r
    rest, _ = space0(rest)
    rest, _ = opt(tag(";"))(rest)
    return rest, Directive(name=name, args=tuple(args))

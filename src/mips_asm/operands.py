# src/mips_asm/operands.py
from __future__ import annotations
import re

from .ast import Argument, Char, Float, Imm, Instruction, Mem, Reg, Sym
from .combinators import (
    Result, alt, opt, pmap, position, preceded, separated_list1, seq, tag,
)
from .diagnostics import AsmError, ValueOutOfRange
from .lexer import (
    char_literal, float_literal, identifier, int_literal, parse_int_literal,
    space0, space1,
)
from .regs import Register, RegisterError
from .span import Span
from .utils import fits_nbit, nbit_range

REG_RE = re.compile(r"\$([+-]?[A-Za-z0-9_]+)")
SYM_OFFSET_RE = re.compile(r" *([+-]) *(0[xX][0-9a-fA-F]+|[0-9]+)(?![A-Za-z0-9_.])")

comma = seq(space0, tag(","), space0)

def register(s: Span) -> Result:
    """'$t0', '$8', '$ZERO'... resuelto con Register.from_str.

    Un registro mal escrito no es "otra alternativa": aborta el parseo con
    la posición del '$'.
    """
    m = s.match(REG_RE)
    if m is None:
        return None
    try:
        reg = Register.from_str(m.group(1))
    except RegisterError as e:
        raise e.locate(s.line, s.col)
    return s.advance_to(m.end()), reg

def immediate(s: Span) -> Result:
    r = int_literal(s)
    if r is None:
        return None
    rest, value = r
    if not fits_nbit(value, 32):
        lo, hi = nbit_range(32)
        raise ValueOutOfRange(value, "un inmediato de 32 bits", lo, hi,
                              line=s.line, col=s.col)
    return rest, Imm(value)

def symbol(s: Span) -> Result:
    """Etiqueta referenciada, con desplazamiento opcional: 'msg', 'msg+4'."""
    r = identifier(s)
    if r is None:
        return None
    rest, name = r
    m = rest.match(SYM_OFFSET_RE)
    if m is None:
        return rest, Sym(name)
    off = parse_int_literal(m.group(2))
    if m.group(1) == "-":
        off = -off
    return rest.advance_to(m.end()), Sym(name, off)

# off($rs) / sym($rs) / ($rs)
memory = pmap(
    seq(opt(alt(immediate, symbol)), tag("("), space0, register, space0, tag(")")),
    lambda t: Mem(register=t[3], offset=t[0]),
)

argument = alt(
    memory,
    pmap(register, Reg),
    pmap(float_literal, Float),
    immediate,
    pmap(char_literal, Char),
    symbol,
)

argument_with_col = pmap(seq(position, argument), lambda t: (t[1], t[0].col))

_arg_list = preceded(space1, separated_list1(comma, argument_with_col))

def parse_instruction(s: Span) -> Result:
    """mnemónico [argumentos separados por comas] [';']

    Los argumentos nunca cruzan líneas: entre ellos sólo se admiten espacios.
    """
    r = identifier(s)
    if r is None:
        return None
    cur, name = r
    args: list = []
    r = _arg_list(cur)
    if r is not None:
        cur, args = r
    cur, _ = space0(cur)
    cur, _ = opt(tag(";"))(cur)
    return cur, Instruction(mnemonic=name, arguments=tuple(args), col=s.col)

def parse_argument(text: str) -> Argument:
    """Parsea un único argumento suelto ('4($sp)', '$t0', 'msg+4')."""
    s = Span(text)
    r = argument(s)
    if r is None or not r[0].at_end():
        raise AsmError(f"Argumento inválido: '{text}'", line=1, col=1)
    return r[1]

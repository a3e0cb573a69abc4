from __future__ import annotations
import re
from typing import Optional

from .combinators import Result, regex
from .span import Span

TAB_WIDTH = 8
COMMENT_CHAR = "#"

def tabs_to_spaces(text: str, width: int = TAB_WIDTH) -> str:
    """Expand tabs to the next tab stop so columns match what an editor shows."""
    return text.expandtabs(width)

# ---- blancos y comentarios ----

WS_COMMENT_RE = re.compile(r"(?:[ \r\n]+|" + re.escape(COMMENT_CHAR) + r"[^\n]*)*")
SPACE0_RE = re.compile(r" *")
SPACE1_RE = re.compile(r" +")

def skip_ws_comments(s: Span) -> Span:
    """Skip whitespace and '#' comments, zero or more times. Never fails."""
    m = s.match(WS_COMMENT_RE)
    return s.advance_to(m.end())

space0 = regex(SPACE0_RE)
space1 = regex(SPACE1_RE)

# ---- tokens ----

IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
# un literal no puede ir pegado a un identificador ("17abc" no es un número)
_NOT_IDENT = r"(?![A-Za-z0-9_.])"
INT_RE = re.compile(r"[+-]?(?:0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|[0-9]+)" + _NOT_IDENT)
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+)" + _NOT_IDENT)
CHAR_RE = re.compile(r"'(\\.|[^\\'\n])'")
STRING_RE = re.compile(r'"((?:\\.|[^"\\\n])*)"')

_ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "0": "\0",
    "\\": "\\", '"': '"', "'": "'",
}
_ESCAPE_RE = re.compile(r"\\(.)")

def parse_int_literal(token: str) -> int:
    """'17', '-0x10', '0b101', '0o17' -> int. Decimal allows leading zeros."""
    t = token.strip()
    body = t.lstrip("+-")
    if len(body) > 1 and body[0] == "0" and body[1] in "xXbBoO":
        return int(t, 0)
    return int(t, 10)

def unescape(body: str) -> Optional[str]:
    """Decode backslash escapes; None if an escape is unknown."""
    bad = []

    def _sub(m: re.Match) -> str:
        ch = m.group(1)
        if ch not in _ESCAPES:
            bad.append(ch)
            return ch
        return _ESCAPES[ch]

    out = _ESCAPE_RE.sub(_sub, body)
    return None if bad else out

identifier = regex(IDENT_RE)

def string_literal(s: Span) -> Result:
    m = s.match(STRING_RE)
    if m is None:
        return None
    value = unescape(m.group(1))
    if value is None:
        return None
    return s.advance_to(m.end()), value

def char_literal(s: Span) -> Result:
    m = s.match(CHAR_RE)
    if m is None:
        return None
    value = unescape(m.group(1))
    if value is None:
        return None
    return s.advance_to(m.end()), value

def int_literal(s: Span) -> Result:
    m = s.match(INT_RE)
    if m is None:
        return None
    return s.advance_to(m.end()), parse_int_literal(m.group(0))

def float_literal(s: Span) -> Result:
    m = s.match(FLOAT_RE)
    if m is None:
        return None
    return s.advance_to(m.end()), float(m.group(0))

"""Small parser-combinator layer over Span.

A parser is a callable ``Span -> Optional[(Span, value)]``. Returning None
means "no match" and never consumes input; raising an AsmError is a hard
failure that aborts the whole parse.
"""

from __future__ import annotations
import re
from typing import Any, Callable, List, Optional, Tuple, TypeVar, Union

from .span import Span

T = TypeVar("T")
U = TypeVar("U")
Result = Optional[Tuple[Span, T]]
Parser = Callable[[Span], Result]


def tag(literal: str) -> Parser:
    def _tag(s: Span) -> Result:
        if s.startswith(literal):
            return s.advance(len(literal)), literal
        return None
    return _tag


def regex(pattern: Union[str, re.Pattern], group: Union[int, str] = 0) -> Parser:
    """Match a regex at the current position; value is ``group`` of the match."""
    rx = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _regex(s: Span) -> Result:
        m = s.match(rx)
        if m is None:
            return None
        return s.advance_to(m.end()), m.group(group)
    return _regex


def position(s: Span) -> Result:
    """Return the current span without consuming anything."""
    return s, s


def pmap(parser: Parser, fn: Callable[[Any], U]) -> Parser:
    def _map(s: Span) -> Result:
        r = parser(s)
        if r is None:
            return None
        rest, value = r
        return rest, fn(value)
    return _map


def alt(*parsers: Parser) -> Parser:
    """Ordered choice: first parser that matches wins."""
    def _alt(s: Span) -> Result:
        for p in parsers:
            r = p(s)
            if r is not None:
                return r
        return None
    return _alt


def seq(*parsers: Parser) -> Parser:
    """All parsers in order; value is the tuple of their values."""
    def _seq(s: Span) -> Result:
        values = []
        cur = s
        for p in parsers:
            r = p(cur)
            if r is None:
                return None
            cur, v = r
            values.append(v)
        return cur, tuple(values)
    return _seq


def opt(parser: Parser, default: Any = None) -> Parser:
    def _opt(s: Span) -> Result:
        r = parser(s)
        return r if r is not None else (s, default)
    return _opt


def many0(parser: Parser) -> Parser:
    """Zero or more repetitions. Stops if the parser matches without consuming."""
    def _many0(s: Span) -> Result:
        out: List[Any] = []
        cur = s
        while True:
            r = parser(cur)
            if r is None or r[0].offset == cur.offset:
                return cur, out
            cur, v = r
            out.append(v)
    return _many0


def preceded(first: Parser, second: Parser) -> Parser:
    return pmap(seq(first, second), lambda t: t[1])


def separated_list1(sep: Parser, item: Parser) -> Parser:
    """``item (sep item)*``; a trailing separator is left unconsumed."""
    return pmap(seq(item, many0(preceded(sep, item))),
                lambda t: [t[0], *t[1]])

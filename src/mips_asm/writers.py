from __future__ import annotations
from typing import List

from .ast import (
    Argument, Char, Directive, Float, Imm, Instruction, Item, Mem, Program, Reg, Repeat, Sym,
    item_kind,
)

_CHAR_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r", "\0": "\\0", "\\": "\\\\"}

def _escape(value: str, quote: str) -> str:
    out = []
    for ch in value:
        if ch == quote:
            out.append("\\" + ch)
        else:
            out.append(_CHAR_ESCAPES.get(ch, ch))
    return "".join(out)

def _sym(sym: Sym) -> str:
    if sym.offset > 0:
        return f"{sym.name}+{sym.offset}"
    if sym.offset < 0:
        return f"{sym.name}-{-sym.offset}"
    return sym.name

def render_argument(arg: Argument) -> str:
    if isinstance(arg, Reg):
        return "$" + arg.register.to_lower_str()
    if isinstance(arg, Mem):
        off = ""
        if isinstance(arg.offset, Imm):
            off = str(arg.offset.value)
        elif isinstance(arg.offset, Sym):
            off = _sym(arg.offset)
        return f"{off}(${arg.register.to_lower_str()})"
    if isinstance(arg, Imm):
        return str(arg.value)
    if isinstance(arg, Sym):
        return _sym(arg)
    if isinstance(arg, Char):
        return "'" + _escape(arg.value, "'") + "'"
    if isinstance(arg, Float):
        return repr(arg.value)
    raise TypeError(f"Argumento desconocido: {arg!r}")

def _directive_arg(value) -> str:
    if isinstance(value, Repeat):
        return f"{value.value}:{value.count}"
    if isinstance(value, Sym):
        return _sym(value)
    return str(value)

def render_item(item: Item) -> str:
    kind = item_kind(item)
    if kind == "label":
        return f"{item.name}:"
    if kind == "directive":
        if item.name in (".ascii", ".asciiz"):
            return f'{item.name} "{_escape(item.args[0], chr(34))}"'
        if not item.args:
            return item.name
        return item.name + " " + ", ".join(_directive_arg(a) for a in item.args)
    args = ", ".join(render_argument(a) for a, _ in item.arguments)
    return f"{item.mnemonic} {args}" if args else item.mnemonic

def to_listing_lines(program: Program) -> List[str]:
    """Una línea por item: '<línea>\\t<item>'; las instrucciones van sangradas."""
    out = []
    for item, line in program:
        text = render_item(item)
        if isinstance(item, (Instruction, Directive)):
            text = "    " + text
        out.append(f"{line}\t{text}")
    return out

def write_listing(program: Program, path: str) -> None:
    lines = to_listing_lines(program)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

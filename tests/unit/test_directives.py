import pytest
from src.mips_asm.directives import parse_directive, DIRECTIVES
from src.mips_asm.ast import Directive, Repeat, Sym
from src.mips_asm.diagnostics import ValueOutOfRange
from src.mips_asm.parser import parse
from src.mips_asm.span import Span

def _d(text):
    r = parse_directive(Span(text))
    assert r is not None, text
    return r[1]

@pytest.mark.parametrize("src, expected", [
    (".text", Directive(".text")),
    (".data", Directive(".data")),
    (".ktext", Directive(".ktext")),
    (".kdata", Directive(".kdata")),
    ('.ascii "ab"', Directive(".ascii", ("ab",))),
    ('.asciiz "a\\tb"', Directive(".asciiz", ("a\tb",))),
    (".byte 1, -1, 255", Directive(".byte", (1, -1, 255))),
    (".half 0x7fff, -32768", Directive(".half", (0x7FFF, -32768))),
    (".word 0xffffffff, -1, end-4", Directive(".word", (0xFFFFFFFF, -1, Sym("end", -4)))),
    (".word 0:3", Directive(".word", (Repeat(0, 3),))),
    (".half 1, 2 : 4, 3", Directive(".half", (1, Repeat(2, 4), 3))),
    (".text;", Directive(".text")),
    (".byte 'a'", None),
    (".float 1.5, 2", Directive(".float", (1.5, 2.0))),
    (".double -0.25", Directive(".double", (-0.25,))),
    (".align 2", Directive(".align", (2,))),
    (".space 64", Directive(".space", (64,))),
    (".globl main", Directive(".globl", ("main",))),
])
def test_directive_forms(src, expected):
    r = parse_directive(Span(src))
    if expected is None:
        assert r is None
    else:
        assert r[1] == expected

def test_known_names():
    assert ".word" in DIRECTIVES and ".asciiz" in DIRECTIVES
    assert len(DIRECTIVES) == 14

@pytest.mark.parametrize("src", [".TEXT", ".unknown", ".word", ".align x", ".globl 3", '.ascii "x\\q"'])
def test_rejected_without_consuming(src):
    assert parse_directive(Span(src)) is None

@pytest.mark.parametrize("src, col", [
    (".byte 1, 256", 10),
    (".half 70000", 7),
    (".word 0x1ffffffff", 7),
    (".space -1", 8),
    (".word 5:0", 9),
    (".space 4294967296", 8),
    (".align 2147483648", 8),
    (".byte 1:2147483648", 9),
])
def test_out_of_range_is_located(src, col):
    with pytest.raises(ValueOutOfRange) as ei:
        parse_directive(Span(src))
    assert (ei.value.line, ei.value.col) == (1, col)

def test_out_of_range_aborts_program():
    program, diags = parse(".data\nx: .byte 1000\n")
    assert program is None
    assert diags[0].kind == "value-range"
    assert (diags[0].line, diags[0].col) == (2, 10)

def test_large_repetition_stays_compact():
    program, diags = parse(".data\nbuf: .byte 0:2147483647\n")
    assert diags == []
    d, line = program.directives()[1]
    assert line == 2
    assert d.args == (Repeat(0, 2147483647),)
    assert len(d.args) == 1

def test_largest_space_accepted():
    assert _d(".space 2147483647") == Directive(".space", (2147483647,))

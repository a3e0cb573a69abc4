import pytest
from src.mips_asm.lexer import (
    tabs_to_spaces, skip_ws_comments, parse_int_literal, unescape,
    int_literal, float_literal, char_literal, string_literal, identifier,
)
from src.mips_asm.span import Span

# --- tabs_to_spaces ---
@pytest.mark.parametrize("src, expected", [
    ("\tli", "        li"),
    ("li\t$t0", "li      $t0"),
    ("abcdefgh\tx", "abcdefgh        x"),
    ("a\n\tb", "a\n        b"),
    ("no tabs", "no tabs"),
    ("", ""),
])
def test_tabs_to_spaces(src, expected):
    assert tabs_to_spaces(src) == expected

@pytest.mark.parametrize("src", ["\t\tmain:\n\tli\t$t0,\t17\t# c", "x\ty\n\t\tz", "   "])
def test_tabs_to_spaces_idempotent(src):
    once = tabs_to_spaces(src)
    assert tabs_to_spaces(once) == once

def test_tab_width_parameter():
    assert tabs_to_spaces("a\tb", 4) == "a   b"

# --- skip_ws_comments ---
def test_skip_ws_and_comments():
    s = skip_ws_comments(Span("  # uno\n\r\n   # dos\n  li $t0, 1"))
    assert s.peek(2) == "li"
    assert (s.line, s.col) == (4, 3)

def test_skip_nothing():
    s = Span("li")
    assert skip_ws_comments(s) == s

def test_skip_comment_at_eof():
    s = skip_ws_comments(Span("# solo comentario"))
    assert s.at_end()

# --- literales ---
@pytest.mark.parametrize("tok, value", [
    ("17", 17), ("-17", -17), ("+3", 3), ("0x1F", 31), ("-0x10", -16),
    ("0b101", 5), ("0o17", 15), ("007", 7),
])
def test_parse_int_literal(tok, value):
    assert parse_int_literal(tok) == value

def test_int_literal_not_glued_to_identifier():
    assert int_literal(Span("17abc")) is None
    assert int_literal(Span("\u0661\u0667")) is None
    assert float_literal(Span("\u0661.5")) is None
    rest, v = int_literal(Span("17, 4"))
    assert v == 17 and rest.peek() == ","

def test_float_literal():
    assert float_literal(Span("1.5"))[1] == 1.5
    assert float_literal(Span("-2e3"))[1] == -2000.0
    assert float_literal(Span("12")) is None

@pytest.mark.parametrize("src, value", [("'a'", "a"), ("'\\n'", "\n"), ("'\\''", "'"), ("'\\0'", "\0")])
def test_char_literal(src, value):
    assert char_literal(Span(src))[1] == value

def test_string_literal_and_escapes():
    rest, v = string_literal(Span('"hola\\n\\"mundo\\"" resto'))
    assert v == 'hola\n"mundo"'
    assert rest.peek() == " "
    assert string_literal(Span('"sin cerrar')) is None
    assert unescape("\\q") is None

def test_identifier():
    rest, name = identifier(Span("main.loop_2: x"))
    assert name == "main.loop_2"
    assert identifier(Span("2x")) is None

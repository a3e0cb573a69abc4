from src.mips_asm.diagnostics import error, AsmError, AsmSyntaxError, ValueOutOfRange

def test_error_str():
    d = error("inmediato fuera de rango", line=12, col=8, file="prog.s", hint="use 16 bits con signo")
    s = str(d)
    assert "prog.s:12:8:" in s
    assert "ERROR: inmediato fuera de rango" in s
    assert "(pista: use 16 bits con signo)" in s

def test_locate_does_not_overwrite():
    e = AsmSyntaxError("se esperaba etiqueta, directiva o instrucción", line=3, col=5)
    e.locate(9, 9, file="a.s")
    assert (e.line, e.col, e.file) == (3, 5, "a.s")
    d = e.diagnostic
    assert d.kind == "syntax"
    assert str(d).startswith("a.s:3:5: ERROR:")

def test_locate_fills_missing():
    e = AsmError("algo")
    assert e.locate(2, 7) is e
    assert (e.line, e.col) == (2, 7)

def test_value_out_of_range_message():
    e = ValueOutOfRange(300, ".byte", -128, 255, line=1, col=7)
    assert e.value == 300
    assert "Valor 300 fuera de rango para .byte" in str(e)
    assert "-128..255" in str(e)

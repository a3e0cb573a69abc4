from src.mips_asm.cli import main
from src.mips_asm.parser import parse
from src.mips_asm.writers import to_listing_lines, render_argument, render_item
from src.mips_asm.ast import Char, Float, Imm, Mem, Repeat, Sym, Instruction, Directive
from src.mips_asm.regs import Register

HELLO = """
    .data
msg:    .asciiz "Hello, world!\\n"

    .text
main:
    la   $a0, msg          # cadena a imprimir
    li   $v0, 4
    syscall
    lw   $t0, 4($sp)
    jr   $ra
"""

def test_e2e_hello_listing():
    program, diags = parse(HELLO, filename="hello.s")
    assert not diags
    lines = to_listing_lines(program)
    assert lines[0] == "2\t    .data"
    assert lines[1] == "3\tmsg:"
    assert lines[2] == '3\t    .asciiz "Hello, world!\\n"'
    assert lines[4] == "6\tmain:"
    assert lines[5] == "7\t    la $a0, msg"
    assert lines[-2] == "10\t    lw $t0, 4($sp)"
    assert lines[-1] == "11\t    jr $ra"

def test_render_arguments():
    assert render_argument(Mem(Register.GP, Sym("x", -8))) == "x-8($gp)"
    assert render_argument(Mem(Register.ZERO)) == "($zero)"
    assert render_argument(Char("'")) == "'\\''"
    assert render_argument(Float(1.5)) == "1.5"
    assert render_argument(Imm(-3)) == "-3"
    assert render_item(Instruction("syscall", (), 1)) == "syscall"
    assert render_item(Directive(".word", (1, Sym("a", 4)))) == ".word 1, a+4"
    assert render_item(Directive(".byte", (Repeat(0, 2147483647), 7))) == ".byte 0:2147483647, 7"

def test_cli_prints_listing(tmp_path, capsys):
    src = tmp_path / "hello.s"
    src.write_text(HELLO, encoding="utf-8")
    assert main([str(src)]) == 0
    out = capsys.readouterr().out
    assert "7\t    la $a0, msg" in out

def test_cli_writes_listing_file(tmp_path):
    src = tmp_path / "hello.s"
    src.write_text(HELLO, encoding="utf-8")
    out = tmp_path / "hello.lst"
    assert main([str(src), "-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8").splitlines()
    assert text[1] == "3\tmsg:"

def test_cli_reports_error(tmp_path, capsys):
    src = tmp_path / "bad.s"
    src.write_text("main:\n\tli\t$t10, 1\n", encoding="utf-8")
    assert main([str(src)]) == 1
    err = capsys.readouterr().err
    assert f"{src}:2:17: ERROR: Registro $t10 fuera de rango" in err

def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.s")]) == 2

'''
dataclases del programa parseado (Program, Label, Directive, Instruction) y de sus argumentos
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional, Tuple, Union

from .regs import Register
from .utils import is_signed_nbit, is_unsigned_nbit

# ---- Argumentos ----

@dataclass(frozen=True)
class Reg:
    """Operando de registro '$x' ya resuelto."""
    register: Register
    kind: ClassVar[str] = "register"

@dataclass(frozen=True)
class Imm:
    """Inmediato entero (cabe en 32 bits con o sin signo)."""
    value: int
    kind: ClassVar[str] = "immediate"

    @property
    def width(self) -> str:
        """Primer tipo en el que cabe: 'i16', 'u16', 'i32' o 'u32'."""
        if is_signed_nbit(self.value, 16):
            return "i16"
        if is_unsigned_nbit(self.value, 16):
            return "u16"
        if is_signed_nbit(self.value, 32):
            return "i32"
        return "u32"

@dataclass(frozen=True)
class Sym:
    """Referencia a una etiqueta, opcionalmente desplazada ('msg+4')."""
    name: str
    offset: int = 0
    kind: ClassVar[str] = "symbol"

@dataclass(frozen=True)
class Mem:
    """Base+desplazamiento: off($rs), sym($rs) o ($rs)."""
    register: Register
    offset: Optional[Union[Imm, Sym]] = None
    kind: ClassVar[str] = "memory"

@dataclass(frozen=True)
class Char:
    value: str
    kind: ClassVar[str] = "char"

@dataclass(frozen=True)
class Float:
    value: float
    kind: ClassVar[str] = "float"

Argument = Union[Reg, Mem, Imm, Sym, Char, Float]

# ---- Items ----

@dataclass(frozen=True)
class Label:
    """Etiqueta en el código fuente (p.ej., 'main:')."""
    name: str
    kind: ClassVar[str] = "label"

@dataclass(frozen=True)
class Repeat:
    """'valor:n' de .byte/.half/.word, sin expandir."""
    value: int
    count: int
    kind: ClassVar[str] = "repeat"

@dataclass(frozen=True)
class Directive:
    """Directiva del ensamblador (p.ej., .text, .word 1, 2)."""
    name: str
    args: Tuple[Union[int, float, str, Sym, Repeat], ...] = ()
    kind: ClassVar[str] = "directive"

@dataclass(frozen=True)
class Instruction:
    """Mnemónico tal como se escribió, argumentos con su columna y columna del mnemónico."""
    mnemonic: str
    arguments: Tuple[Tuple[Argument, int], ...]
    col: int
    kind: ClassVar[str] = "instruction"

    @property
    def args(self) -> List[Argument]:
        return [a for a, _ in self.arguments]

Item = Union[Label, Directive, Instruction]

_ITEM_KINDS = {Label: "label", Directive: "directive", Instruction: "instruction"}

def item_kind(item: Item) -> str:
    """Único punto de despacho sobre el tipo de item."""
    try:
        return _ITEM_KINDS[type(item)]
    except KeyError:
        raise TypeError(f"Item desconocido: {item!r}") from None

@dataclass(frozen=True)
class Program:
    """Items en orden textual, cada uno con la línea (base 1) donde empieza."""
    items: Tuple[Tuple[Item, int], ...]

    def __iter__(self) -> Iterator[Tuple[Item, int]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _of_kind(self, kind: str) -> List[Tuple[Item, int]]:
        return [(it, line) for it, line in self.items if item_kind(it) == kind]

    def labels(self) -> List[Tuple[Label, int]]:
        return self._of_kind("label")

    def directives(self) -> List[Tuple[Directive, int]]:
        return self._of_kind("directive")

    def instructions(self) -> List[Tuple[Instruction, int]]:
        return self._of_kind("instruction")

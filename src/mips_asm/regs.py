'''
tabla fija de los 32 registros MIPS, resolución de operandos y sus errores
'''

from __future__ import annotations
import enum
import re
from typing import Dict, List, Optional

from .diagnostics import AsmError

# ---- Errores del resolutor ----

class RegisterError(AsmError):
    """Base de los errores de resolución de registros."""
    kind = "register"

class UnknownRegister(RegisterError):
    kind = "unknown-register"

    def __init__(self, name: str):
        super().__init__(f"Registro desconocido: ${name}",
                         hint="use $0..$31 o un nombre como $t0, $sp, $ra")
        self.name = name

class NamedRegisterOutOfRange(RegisterError):
    kind = "named-register-range"

    def __init__(self, family: str, index: int):
        hint = None
        if family in FAMILY_RANGES:
            lo, hi = FAMILY_RANGES[family]
            hint = f"los registros ${family} van de ${family}{lo} a ${family}{hi}"
        super().__init__(f"Registro ${family}{index} fuera de rango", hint=hint)
        self.family = family
        self.index = index

class NumRegisterOutOfRange(RegisterError):
    kind = "num-register-range"

    def __init__(self, index: int):
        super().__init__(f"Registro ${index} fuera de rango",
                         hint="los registros numéricos van de $0 a $31")
        self.index = index

# ---- Tabla de registros ----

class Register(enum.IntEnum):
    """Registro canónico; el valor es su índice 0..31."""
    ZERO = 0
    AT = 1
    V0 = 2
    V1 = 3
    A0 = 4
    A1 = 5
    A2 = 6
    A3 = 7
    T0 = 8
    T1 = 9
    T2 = 10
    T3 = 11
    T4 = 12
    T5 = 13
    T6 = 14
    T7 = 15
    S0 = 16
    S1 = 17
    S2 = 18
    S3 = 19
    S4 = 20
    S5 = 21
    S6 = 22
    S7 = 23
    T8 = 24
    T9 = 25
    K0 = 26
    K1 = 27
    GP = 28
    SP = 29
    FP = 30
    RA = 31

    @classmethod
    def all(cls) -> List["Register"]:
        return list(cls)

    @classmethod
    def from_number(cls, num: int) -> "Register":
        if 0 <= num <= 31:
            return cls(num)
        raise NumRegisterOutOfRange(num)

    @classmethod
    def from_str(cls, name: str) -> "Register":
        """Resuelve el texto de un operando (sin '$') a un registro.

        Pasos, cada uno sólo si el anterior no aplica:
          1. número: '0'..'31'; otro entero -> NumRegisterOutOfRange
          2. nombre canónico, sin distinguir mayúsculas
          3. familia conocida con índice ('t12') -> NamedRegisterOutOfRange
          4. UnknownRegister
        """
        for step in _RESOLUTION_STEPS:
            reg = step(name)
            if reg is not None:
                return reg
        raise UnknownRegister(name)

    def to_number(self) -> int:
        return int(self)

    def to_str(self) -> str:
        return self.name

    def to_lower_str(self) -> str:
        return self.name.lower()

# Familias con sufijo numérico y su rango real (primera letra -> (min, max))
FAMILY_RANGES: Dict[str, tuple] = {
    "v": (0, 1),
    "a": (0, 3),
    "t": (0, 9),
    "s": (0, 7),
    "k": (0, 1),
}

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(1 << 31), (1 << 31) - 1
_BY_NAME: Dict[str, Register] = {r.name.lower(): r for r in Register}

def _parse_i32(text: str) -> Optional[int]:
    if not _INT_RE.fullmatch(text):
        return None
    n = int(text)
    if not (_I32_MIN <= n <= _I32_MAX):
        return None
    return n

def _by_number(name: str) -> Optional[Register]:
    n = _parse_i32(name)
    if n is None:
        return None
    return Register.from_number(n)

def _by_name(name: str) -> Optional[Register]:
    return _BY_NAME.get(name.lower())

def _family_out_of_range(name: str) -> Optional[Register]:
    # sólo mejora el mensaje; nunca devuelve un registro
    if name[:1] in FAMILY_RANGES:
        n = _parse_i32(name[1:])
        if n is not None:
            raise NamedRegisterOutOfRange(name[0], n)
    return None

_RESOLUTION_STEPS = (_by_number, _by_name, _family_out_of_range)

# ---- API de módulo ----

def parse_register(token: str) -> Register:
    """Resuelve '$t0', 't0', '8', ... o lanza RegisterError."""
    t = token.strip()
    if t.startswith("$"):
        t = t[1:]
    return Register.from_str(t)

def is_reg(token: str) -> bool:
    """Indica si el token representa un registro válido."""
    try:
        parse_register(token)
        return True
    except RegisterError:
        return False

def reg_num(token: str) -> int:
    """Devuelve el índice numérico 0..31 del registro."""
    return parse_register(token).to_number()

def reg_name(num: int, *, upper: bool = False) -> str:
    """Nombre canónico del registro ``num`` (minúsculas por defecto)."""
    reg = Register.from_number(num)
    return reg.to_str() if upper else reg.to_lower_str()

'''
comprobaciones de rango de enteros de n bits (inmediatos y datos de directivas)
'''

from __future__ import annotations
from typing import Tuple

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def is_signed_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [-(2^(n-1)), 2^(n-1)-1] (con signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    lo = -(1 << (n - 1))
    hi = (1 << (n - 1)) - 1
    return lo <= x <= hi

def fits_nbit(x: int, n: int) -> bool:
    """x cabe en n bits interpretado con o sin signo."""
    return is_signed_nbit(x, n) or is_unsigned_nbit(x, n)

def nbit_range(n: int) -> Tuple[int, int]:
    """Rango (min, max) aceptado por fits_nbit."""
    return -(1 << (n - 1)), (1 << n) - 1

"""
src/f4jumble/kernel/feistel.py
Red de Feistel F4Jumble v1.0.
Permutación sin clave, reversible y que preserva la longitud.

ESQUEMA (4 capas: G0, H0, G1, H1):
    m = a || b           (lenL = min(64, lenM // 2), lenR = lenM - lenL)
    x = b ^ G(0, a)
    y = a ^ H(0, x)
    d = x ^ G(1, y)
    c = y ^ H(1, d)
    F4Jumble(m) = c || d

Cualquier cambio en un byte de `m` altera la salida completa.
"""
from typing import Tuple
from ..hashing.invariants import MIN_LEN_M, MAX_LEN_M, LEN_H
from .rounds import g_round, h_round, xor_bytes


class InvalidMessageLength(ValueError):
    """La longitud del mensaje está fuera de [MIN_LEN_M, MAX_LEN_M]."""

    def __init__(self, length: int):
        self.length = length
        self.min_length = MIN_LEN_M
        self.max_length = MAX_LEN_M
        super().__init__(
            f"Invalid message length: {length} (esperado entre {MIN_LEN_M} y {MAX_LEN_M})"
        )


def _as_bytes(m) -> bytes:
    if not isinstance(m, (bytes, bytearray, memoryview)):
        raise TypeError(f"Se esperaba un objeto bytes-like, recibido {type(m).__name__}")
    return bytes(m)


def check_length(len_m: int) -> None:
    """Valida la longitud antes de cualquier llamada a la primitiva."""
    if len_m < MIN_LEN_M or len_m > MAX_LEN_M:
        raise InvalidMessageLength(len_m)


def split_lengths(len_m: int) -> Tuple[int, int]:
    """
    Particiona el mensaje en (lenL, lenR).
    Invariante: lenL <= 64 <= lenR y lenL + lenR == lenM.
    """
    check_length(len_m)
    len_l = min(LEN_H, len_m // 2)
    return len_l, len_m - len_l


def f4_jumble(m: bytes) -> bytes:
    """
    Aplica F4Jumble a `m` y devuelve los bytes mezclados (misma longitud).
    Lanza InvalidMessageLength si len(m) no está en [48, 4194368].
    """
    m = _as_bytes(m)
    len_l, len_r = split_lengths(len(m))

    a, b = m[:len_l], m[len_l:]

    x = xor_bytes(b, g_round(0, a, len_r))
    y = xor_bytes(a, h_round(0, x, len_l))
    d = xor_bytes(x, g_round(1, y, len_r))
    c = xor_bytes(y, h_round(1, d, len_l))

    return c + d


def f4_jumble_inv(m: bytes) -> bytes:
    """
    Invierte F4Jumble: recupera el mensaje original desde c || d.
    Deshace cada XOR en orden inverso; G y H nunca se invierten.
    """
    m = _as_bytes(m)
    len_l, len_r = split_lengths(len(m))

    c, d = m[:len_l], m[len_l:]

    y = xor_bytes(c, h_round(1, d, len_l))
    x = xor_bytes(d, g_round(1, y, len_r))
    a = xor_bytes(y, h_round(0, x, len_l))
    b = xor_bytes(x, g_round(0, a, len_r))

    return a + b

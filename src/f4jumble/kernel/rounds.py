"""
src/f4jumble/kernel/rounds.py
Funciones de Ronda G y H.
PRFs deterministas sobre BLAKE2b, separadas por dominio (Rol, Ronda, Bloque).
"""
from ..hashing.invariants import LEN_H
from ..hashing.primitive import digest, g_pers, h_pers


def xor_bytes(x: bytes, y: bytes) -> bytes:
    """
    XOR byte a byte de dos operandos de igual longitud.
    Se opera como enteros sin signo (Little Endian), así que no hay extensión de signo.
    """
    if len(x) != len(y):
        raise ValueError(f"XOR con longitudes distintas: {len(x)} != {len(y)}")
    n = len(x)
    return (int.from_bytes(x, 'little') ^ int.from_bytes(y, 'little')).to_bytes(n, 'little')


def g_round(i: int, u: bytes, out_len: int) -> bytes:
    """
    Ronda G: extiende BLAKE2b a longitud arbitraria.
    Concatena ceil(out_len / 64) digests personalizados con j = 0, 1, ...
    y trunca a exactamente `out_len` bytes.
    """
    chunks = (out_len + LEN_H - 1) // LEN_H

    # Buffer pre-dimensionado: cada bloque va a su offset j * 64
    out = bytearray(chunks * LEN_H)
    for j in range(chunks):
        off = j * LEN_H
        out[off:off + LEN_H] = digest(g_pers(i, j), LEN_H, u)

    # El último bloque solo se usa parcialmente
    return bytes(out[:out_len])


def h_round(i: int, u: bytes, out_len: int) -> bytes:
    """Ronda H: un único digest de `out_len` bytes (siempre <= 64)."""
    return digest(h_pers(i), out_len, u)

"""
src/f4jumble/hashing/primitive.py
Adaptador de la Primitiva Hash (BLAKE2b).
Digest sin clave ni sal, con longitud variable (1..64) y Personalización de 16 bytes.
"""
import hashlib
import struct
from .invariants import *


def digest(person: bytes, out_len: int, data: bytes) -> bytes:
    """
    Hash personalizado de `data` con `out_len` bytes de salida.
    Determinista y sin material secreto.
    """
    if len(person) != PERS_SIZE:
        raise ValueError(f"La personalización debe medir {PERS_SIZE} bytes, recibido {len(person)}")
    if not 1 <= out_len <= LEN_H:
        raise ValueError(f"Longitud de digest fuera de rango [1, {LEN_H}]: {out_len}")

    hasher = hashlib.blake2b(digest_size=out_len, person=person)
    hasher.update(data)
    return hasher.digest()


def _pers(role: bytes, i: int, j: int) -> bytes:
    if i not in ROUNDS:
        raise ValueError(f"Índice de ronda inválido: {i}")
    if not 0 <= j <= MAX_CHUNK:
        raise ValueError(f"Índice de bloque inválido: {j}")
    # Prefijo (12) + Rol (1) + i (1) + j (2, LE)
    return PERS_PREFIX + role + struct.pack('<BH', i, j)


def g_pers(i: int, j: int) -> bytes:
    """Personalización de la ronda G: 'UA_F4Jumble_G' || i || j (LE16)."""
    return _pers(ROLE_G, i, j)


def h_pers(i: int) -> bytes:
    """Personalización de la ronda H: 'UA_F4Jumble_H' || i || 0x0000."""
    return _pers(ROLE_H, i, 0)

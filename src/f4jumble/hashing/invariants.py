"""
src/f4jumble/hashing/invariants.py
Constantes de la Construcción F4Jumble.
Define los límites del mensaje y el layout de la Personalización (16 bytes).
"""

# =============================================================================
# LÍMITES DEL MENSAJE
# =============================================================================
MIN_LEN_M = 48          # Mínimo: garantiza lenR >= lenL
MAX_LEN_M = 4194368     # 2^16 bloques de 64 bytes + LEN_H

# Tamaño de un digest completo de BLAKE2b (bytes)
LEN_H = 64

# =============================================================================
# PERSONALIZACIÓN (BLAKE2b person, 16 bytes)
# =============================================================================
# [ 0-11 : "UA_F4Jumble_" | 12 : Rol | 13 : i | 14-15 : j (Little Endian) ]

PERS_PREFIX = b"UA_F4Jumble_"
PERS_SIZE   = 16

ROLE_G = b"G"
ROLE_H = b"H"

# Índices válidos
ROUNDS    = (0, 1)
MAX_CHUNK = 0xFFFF

"""
tests/f4jumble/hashing/test_primitive.py
Verificación del Adaptador BLAKE2b y del layout de Personalización.
"""
import hashlib
import unittest
from f4jumble.hashing.invariants import *
from f4jumble.hashing.primitive import digest, g_pers, h_pers


class TestPersonalization(unittest.TestCase):

    def test_prefix_bytes(self):
        """El prefijo es 'UA_F4Jumble_' (12 bytes ASCII)."""
        self.assertEqual(
            list(PERS_PREFIX),
            [85, 65, 95, 70, 52, 74, 117, 109, 98, 108, 101, 95],
        )

    def test_h_pers_layout(self):
        self.assertEqual(h_pers(0), b"UA_F4Jumble_H\x00\x00\x00")
        self.assertEqual(h_pers(1), b"UA_F4Jumble_H\x01\x00\x00")
        self.assertEqual(len(h_pers(1)), PERS_SIZE)

    def test_g_pers_little_endian_chunk_index(self):
        self.assertEqual(g_pers(0, 0), b"UA_F4Jumble_G\x00\x00\x00")
        self.assertEqual(g_pers(1, 1), b"UA_F4Jumble_G\x01\x01\x00")
        self.assertEqual(g_pers(0, 0x0102), b"UA_F4Jumble_G\x00\x02\x01")
        self.assertEqual(g_pers(1, MAX_CHUNK), b"UA_F4Jumble_G\x01\xff\xff")

    def test_tags_are_distinct(self):
        """Separación de dominio: ninguna combinación (rol, i, j) colisiona."""
        tags = {h_pers(i) for i in ROUNDS}
        tags |= {g_pers(i, j) for i in ROUNDS for j in range(4)}
        self.assertEqual(len(tags), 2 + 8)

    def test_invalid_indices(self):
        with self.assertRaises(ValueError):
            h_pers(2)
        with self.assertRaises(ValueError):
            g_pers(-1, 0)
        with self.assertRaises(ValueError):
            g_pers(0, MAX_CHUNK + 1)


class TestDigest(unittest.TestCase):

    def test_matches_raw_blake2b(self):
        data = b"holographic" * 7
        for out_len in (1, 20, 48, 64):
            expected = hashlib.blake2b(data, digest_size=out_len, person=h_pers(0)).digest()
            self.assertEqual(digest(h_pers(0), out_len, data), expected)

    def test_output_length(self):
        for out_len in range(1, LEN_H + 1):
            self.assertEqual(len(digest(g_pers(1, 3), out_len, b"")), out_len)

    def test_personalization_separates_domains(self):
        data = bytes(64)
        self.assertNotEqual(digest(h_pers(0), 64, data), digest(h_pers(1), 64, data))
        self.assertNotEqual(digest(h_pers(0), 64, data), digest(g_pers(0, 0), 64, data))

    def test_deterministic(self):
        self.assertEqual(digest(g_pers(0, 5), 64, b"x"), digest(g_pers(0, 5), 64, b"x"))

    def test_rejects_bad_arguments(self):
        with self.assertRaises(ValueError):
            digest(b"short", 32, b"")
        with self.assertRaises(ValueError):
            digest(h_pers(0), 0, b"")
        with self.assertRaises(ValueError):
            digest(h_pers(0), LEN_H + 1, b"")

"""
Tests for animator parameter hashing.
"""

import zlib

import pytest

from constgen.core.services.hashing import HASH_ALGORITHMS, crc32, fnv1, string_to_hash, to_int32


class TestCrc32:
    def test_empty_string(self):
        assert crc32("") == 0

    def test_check_value(self):
        """Standard CRC-32 check value 0xCBF43926, as a signed int32."""
        assert crc32("123456789") == 0xCBF43926 - 2**32

    def test_matches_zlib_bit_pattern(self):
        assert crc32("Speed") & 0xFFFFFFFF == zlib.crc32(b"Speed")

    def test_hashes_utf8_bytes(self):
        assert crc32("Größe") & 0xFFFFFFFF == zlib.crc32("Größe".encode("utf-8"))


class TestFnv1:
    def test_empty_string_is_offset_basis(self):
        assert fnv1("") == 0x811C9DC5 - 2**32

    def test_single_char(self):
        assert fnv1("a") == 0x050C5D7E


class TestStringToHash:
    @pytest.mark.parametrize("algorithm", HASH_ALGORITHMS)
    def test_signed_32_bit_range(self, algorithm: str):
        for name in ("Speed", "IsGrounded", "Jump", "Attack 2", ""):
            value = string_to_hash(name, algorithm)
            assert -(2**31) <= value < 2**31

    @pytest.mark.parametrize("algorithm", HASH_ALGORITHMS)
    def test_deterministic(self, algorithm: str):
        assert string_to_hash("Speed", algorithm) == string_to_hash("Speed", algorithm)

    @pytest.mark.parametrize("algorithm", HASH_ALGORITHMS)
    def test_distinct_names_differ(self, algorithm: str):
        names = ["Speed", "speed", "IsGrounded", "Jump", "Attack", "Attack2", "Die"]
        hashes = {string_to_hash(n, algorithm) for n in names}
        assert len(hashes) == len(names)

    def test_default_is_crc32(self):
        assert string_to_hash("Speed") == crc32("Speed")

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            string_to_hash("Speed", "md5")


class TestToInt32:
    @pytest.mark.parametrize("value, expected", [
        (0, 0),
        (2**31 - 1, 2**31 - 1),
        (2**31, -(2**31)),
        (3871954323, -423012973),
        (2**32 - 1, -1),
        (-5, -5),
    ])
    def test_reinterprets_low_32_bits(self, value: int, expected: int):
        assert to_int32(value) == expected

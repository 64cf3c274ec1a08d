"""
Animator parameter hashing.

Unity's ``Animator.StringToHash`` is CRC-32 over the UTF-8 bytes of
the name, returned as a signed 32-bit int. Generated ``<Name>Hash``
constants must match it bit for bit so they can be passed straight to
``Animator.SetFloat(int, ...)`` and friends.

32-bit FNV-1 is available as an alternative for runtimes that use it.
"""

from __future__ import annotations

import zlib

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193

HASH_ALGORITHMS = ("crc32", "fnv1")


def to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed int."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def crc32(name: str) -> int:
    return to_int32(zlib.crc32(name.encode("utf-8")))


def fnv1(name: str) -> int:
    h = _FNV_OFFSET_BASIS
    for byte in name.encode("utf-8"):
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
        h ^= byte
    return to_int32(h)


def string_to_hash(name: str, algorithm: str = "crc32") -> int:
    """Hash a parameter name to a signed 32-bit integer.

    Args:
        name: Raw parameter name (not the sanitized identifier).
        algorithm: ``"crc32"`` (Unity) or ``"fnv1"``.

    Raises:
        ValueError: For an unknown algorithm name.
    """
    if algorithm == "crc32":
        return crc32(name)
    if algorithm == "fnv1":
        return fnv1(name)
    raise ValueError(f"Unknown hash algorithm '{algorithm}'. Valid: {', '.join(HASH_ALGORITHMS)}")

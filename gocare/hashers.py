"""String hashers producing hexadecimal digests."""

from __future__ import annotations

import hashlib
from typing import Protocol

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


class Hasher(Protocol):
    def hash(self, data: str) -> str: ...


class FNVHasher:
    """FNV-1a 64-bit hasher."""

    def hash(self, data: str) -> str:
        value = _FNV64_OFFSET
        for byte in data.encode("utf-8"):
            value ^= byte
            value = (value * _FNV64_PRIME) & _MASK64
        return value.to_bytes(8, "big").hex()


class MD5Hasher:
    """MD5 hasher."""

    def hash(self, data: str) -> str:
        return hashlib.md5(data.encode("utf-8")).hexdigest()
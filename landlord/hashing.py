"""Incremental message digests."""

from __future__ import annotations

import enum
import hashlib


class HashType(enum.Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"


class OutputType(enum.Enum):
    BINARY = "binary"
    HEX = "hex"


class Hash:
    """Accumulates data and produces its digest."""

    def __init__(self, hash_type: HashType) -> None:
        self.hash_type = hash_type
        self._ctx = hashlib.new(hash_type.value)

    def add_data(self, data: bytes | bytearray | memoryview | str) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._ctx.update(data)

    def result(self, output: OutputType = OutputType.BINARY) -> bytes | str:
        """Raw digest bytes, or lower-case hex text."""
        if output is OutputType.HEX:
            return self._ctx.hexdigest()
        return self._ctx.digest()
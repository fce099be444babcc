"""AES encryption with a key-derived initialisation vector."""

from __future__ import annotations

import enum

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .hashing import Hash, HashType

BLOCK_SIZE = 16


class Algorithm(enum.Enum):
    AES_ECB_128 = ("ecb", 128)
    AES_CBC_128 = ("cbc", 128)
    AES_CFB_128 = ("cfb", 128)
    AES_OFB_128 = ("ofb", 128)
    AES_CTR_128 = ("ctr", 128)

    AES_ECB_192 = ("ecb", 192)
    AES_CBC_192 = ("cbc", 192)
    AES_CFB_192 = ("cfb", 192)
    AES_OFB_192 = ("ofb", 192)
    AES_CTR_192 = ("ctr", 192)

    AES_ECB_256 = ("ecb", 256)
    AES_CBC_256 = ("cbc", 256)
    AES_CFB_256 = ("cfb", 256)
    AES_OFB_256 = ("ofb", 256)
    AES_CTR_256 = ("ctr", 256)

    @property
    def mode(self) -> str:
        return self.value[0]

    @property
    def key_size(self) -> int:
        return self.value[1] // 8

    @property
    def padded(self) -> bool:
        return self.mode in ("ecb", "cbc")


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class AesCrypto:
    """Symmetric cipher whose IV is the MD5 digest of the key."""

    def __init__(self, algorithm: Algorithm, key: bytes | str) -> None:
        key_bytes = _as_bytes(key)
        if len(key_bytes) != algorithm.key_size:
            raise ValueError(
                f"{algorithm.name} needs a {algorithm.key_size}-byte key, got {len(key_bytes)}"
            )
        self.algorithm = algorithm
        self._key = key_bytes
        digest = Hash(HashType.MD5)
        digest.add_data(key_bytes)
        self._iv = digest.result()[:BLOCK_SIZE]

    def _cipher(self) -> Cipher:
        mode = self.algorithm.mode
        if mode == "ecb":
            cipher_mode = modes.ECB()
        elif mode == "cbc":
            cipher_mode = modes.CBC(self._iv)
        elif mode == "cfb":
            cipher_mode = modes.CFB(self._iv)
        elif mode == "ofb":
            cipher_mode = modes.OFB(self._iv)
        else:
            cipher_mode = modes.CTR(self._iv)
        return Cipher(algorithms.AES(self._key), cipher_mode)

    def encrypt(self, text: bytes | str) -> bytes:
        data = _as_bytes(text)
        if self.algorithm.padded:
            padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
            data = padder.update(data) + padder.finalize()
        encryptor = self._cipher().encryptor()
        return encryptor.update(data) + encryptor.finalize()

    def decrypt(self, text: bytes | str) -> bytes:
        """Decrypt; raises ValueError when the ciphertext is malformed."""
        decryptor = self._cipher().decryptor()
        data = decryptor.update(_as_bytes(text)) + decryptor.finalize()
        if self.algorithm.padded:
            unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
            data = unpadder.update(data) + unpadder.finalize()
        return data
"""
Abstract base classes for every symmetric cipher in CipherKit.

Each catalog variant (AES, DES, Blowfish, RC4 ...) is backed by one
subclass so the Symmetric, PBE and DH families can treat them uniformly.

encrypt() returns a self-contained blob:
    CBC    ciphers  → iv + ciphertext (PKCS#7 padded)
    stream ciphers  → ciphertext

decrypt() accepts that blob and returns plaintext.
"""

from abc import ABC, abstractmethod

from cryptography.hazmat.primitives import padding as sym_padding

from ..utils.random_gen import SecureRandom
from .errors import DecryptionError, InvalidKeyError, PaddingError


class SymmetricCipher(ABC):
    """Unified interface for symmetric encryption."""

    ALGORITHM = ""
    KEY_SIZES: tuple[int, ...] = ()

    def __init__(self, key: bytes):
        if self.KEY_SIZES and len(key) not in self.KEY_SIZES:
            raise InvalidKeyError(
                f"{self.ALGORITHM} key must be one of "
                f"{self.KEY_SIZES} bytes, got {len(key)}"
            )
        self._key = key

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt plaintext → self-contained encrypted blob."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt blob produced by encrypt() → plaintext."""

    @property
    @abstractmethod
    def iv_size(self) -> int:
        """IV size in bytes (0 for stream ciphers)."""

    @property
    def key_size(self) -> int:
        return len(self._key)

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8

    def info(self) -> dict:
        """Return cipher metadata."""
        return {
            "name":     self.cipher_name,
            "key_bits": self.key_size_bits,
            "iv_bytes": self.iv_size,
        }


class CBCCipher(SymmetricCipher):
    """
    Block cipher in CBC mode with PKCS#7 padding.

    Output format:  [IV][ciphertext padded]

    Subclasses supply the raw block transform in ``_transform``.
    """
    BLOCK_BITS = 128

    @property
    def cipher_name(self) -> str:
        return f"{self.ALGORITHM}-{self.key_size_bits}-CBC"

    @property
    def iv_size(self) -> int:
        return self.BLOCK_BITS // 8

    @abstractmethod
    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        """CBC-encrypt or decrypt block-aligned *data* under *iv*."""

    # ── explicit IV (used by PBE) ────────────────────────────────
    def encrypt_with_iv(self, plaintext: bytes, iv: bytes) -> bytes:
        padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
        padded = padder.update(plaintext) + padder.finalize()
        return self._transform(padded, iv, True)

    def decrypt_with_iv(self, ciphertext: bytes, iv: bytes) -> bytes:
        block = self.BLOCK_BITS // 8
        if not ciphertext or len(ciphertext) % block:
            raise DecryptionError(
                f"{self.cipher_name} ciphertext must be a non-empty "
                f"multiple of {block} bytes, got {len(ciphertext)}"
            )
        padded = self._transform(ciphertext, iv, False)
        unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
        try:
            return unpad.update(padded) + unpad.finalize()
        except ValueError as exc:
            raise PaddingError(
                f"{self.cipher_name} padding invalid, data corrupt or wrong key"
            ) from exc

    # ── self-contained blob ──────────────────────────────────────
    def encrypt(self, plaintext: bytes) -> bytes:
        iv = SecureRandom.generate_iv(self.iv_size)
        return iv + self.encrypt_with_iv(plaintext, iv)

    def decrypt(self, data: bytes) -> bytes:
        iv = data[:self.iv_size]
        ct = data[self.iv_size:]
        if len(iv) != self.iv_size:
            raise DecryptionError(
                f"{self.cipher_name} ciphertext shorter than its IV"
            )
        return self.decrypt_with_iv(ct, iv)


class StreamCipher(SymmetricCipher):
    """
    Stream cipher without IV; the keystream depends on the key alone.

    Output format:  [ciphertext]
    """

    @property
    def cipher_name(self) -> str:
        return f"{self.ALGORITHM}-{self.key_size_bits}"

    @property
    def iv_size(self) -> int:
        return 0

    @abstractmethod
    def _keystream_xor(self, data: bytes) -> bytes:
        """Combine *data* with the key's keystream."""

    def encrypt(self, plaintext: bytes) -> bytes:
        return self._keystream_xor(plaintext)

    def decrypt(self, data: bytes) -> bytes:
        return self._keystream_xor(data)

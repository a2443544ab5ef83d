"""
CipherFactory — symmetric cipher registry and the Symmetric family.

Usage:
    key        = Symmetric.AES.generate_key()
    ciphertext = Symmetric.AES.encrypt("hello world", key)
    plaintext  = Symmetric.AES.decrypt(ciphertext, key)

    # Raw bytes, used by the key-agreement family
    cipher = CipherFactory.create("DES", key_bytes)
"""

import logging

from ..utils.random_gen import SecureRandom
from .aes_crypto import AESCBCCipher, RijndaelCBCCipher
from .base import Algorithm, AlgorithmVariant, Catalog
from .blowfish_crypto import BlowfishCBCCipher
from .coder import BASE64
from .des_crypto import DESCBCCipher, TripleDESCipher
from .errors import EncryptionError, InvalidKeyError, UnsupportedAlgorithmError
from .legacy_crypto import IDEACBCCipher, RC2CBCCipher, RC4Cipher
from .provider import decode_text, encode_text, external, from_hex, invoke, to_hex
from .symmetric_base import SymmetricCipher

logger = logging.getLogger("CipherKit.Symmetric")


class CipherFactory:
    """
    Create any supported symmetric cipher by name.

    Entries whose class is ``None`` are catalogued for completeness but
    need a provider implementation that is not installed.
    """

    # ── Registry ─────────────────────────────────────────────────
    _REGISTRY: dict[str, dict] = {
        "AES": {
            "class":    AESCBCCipher,
            "key_size": 16,
            "external": False,
            "category": "Block (CBC)",
            "security": "High (128-bit)",
        },
        "DES": {
            "class":    DESCBCCipher,
            "key_size": 8,
            "external": True,
            "category": "Block (CBC)",
            "security": "Broken (56-bit)",
        },
        "DESEDE": {
            "class":    TripleDESCipher,
            "key_size": 24,
            "external": False,
            "category": "Block (CBC)",
            "security": "Medium (~112-bit)",
        },
        "BLOWFISH": {
            "class":    BlowfishCBCCipher,
            "key_size": 16,
            "external": False,
            "category": "Block (CBC)",
            "security": "Low (64-bit block)",
        },
        "RC2": {
            "class":    RC2CBCCipher,
            "key_size": 16,
            "external": True,
            "category": "Block (CBC)",
            "security": "Low (64-bit block)",
        },
        "RC4": {
            "class":    RC4Cipher,
            "key_size": 16,
            "external": False,
            "category": "Stream",
            "security": "Broken (keystream biases)",
        },
        "IDEA": {
            "class":    IDEACBCCipher,
            "key_size": 16,
            "external": False,
            "category": "Block (CBC)",
            "security": "Medium (64-bit block)",
        },
        "RIJNDAEL": {
            "class":    RijndaelCBCCipher,
            "key_size": 16,
            "external": True,
            "category": "Block (CBC)",
            "security": "High (128-bit)",
        },
        "SERPENT": {
            "class":    None,
            "key_size": 16,
            "external": True,
            "category": "Block",
            "security": "High (128-bit)",
        },
        "TWOFISH": {
            "class":    None,
            "key_size": 16,
            "external": True,
            "category": "Block",
            "security": "High (128-bit)",
        },
        "RC5": {
            "class":    None,
            "key_size": 16,
            "external": True,
            "category": "Block",
            "security": "Medium",
        },
    }

    # ── Factory method ───────────────────────────────────────────

    @classmethod
    def create(cls, cipher_name: str, key: bytes) -> SymmetricCipher:
        """
        Create a cipher instance.

        Parameters
        ----------
        cipher_name : str
            One of the registered names (e.g. "AES"), case-insensitive.
        key : bytes
            Raw key of a length the cipher accepts.

        Returns
        -------
        SymmetricCipher
            Ready-to-use cipher instance.
        """
        cipher = cls.require(cipher_name)["class"](key)
        logger.debug("Created cipher: %s", cipher.cipher_name)
        return cipher

    @classmethod
    def require(cls, cipher_name: str) -> dict:
        """Registry entry of an implemented cipher."""
        info = cls._lookup(cipher_name)
        if info["class"] is None:
            # no installed provider implements it; external() raises
            external(cipher_name)
        return info

    @classmethod
    def _lookup(cls, cipher_name: str) -> dict:
        try:
            return cls._REGISTRY[cipher_name.upper()]
        except (KeyError, AttributeError):
            raise UnsupportedAlgorithmError(
                f"Unknown cipher: {cipher_name}. "
                f"Available: {cls.list_ciphers()}"
            ) from None

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_ciphers(cls) -> list[str]:
        """Return all registered cipher names in catalog order."""
        return list(cls._REGISTRY)

    @classmethod
    def get_info(cls, cipher_name: str) -> dict:
        """Return metadata for a cipher."""
        info = cls._lookup(cipher_name)
        return {
            "name":      cipher_name.upper(),
            "key_bits":  info["key_size"] * 8,
            "external":  info["external"],
            "available": info["class"] is not None,
            "category":  info["category"],
            "security":  info["security"],
        }

    @classmethod
    def get_all_info(cls) -> list[dict]:
        return [cls.get_info(name) for name in cls.list_ciphers()]

    @classmethod
    def is_available(cls, cipher_name: str) -> bool:
        info = cls._REGISTRY.get(cipher_name.upper())
        return info is not None and info["class"] is not None

    @classmethod
    def get_required_key_size(cls, cipher_name: str) -> int:
        """Return default key size in bytes."""
        return cls._lookup(cipher_name)["key_size"]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Symmetric family
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SymmetricAlgorithm(Algorithm):
    """Secret-key cipher; keys as Base64 text, ciphertext as hex."""

    family = "Symmetric"

    def generate_key(self) -> str:
        self._prepare()
        CipherFactory.require(self.name)
        key = SecureRandom.generate_bytes(self.variant.key_size)
        logger.debug("Generated %s key (%d bits)", self.name, len(key) * 8)
        return BASE64.encode(key)

    def encrypt(self, plaintext: str, key: str) -> str:
        return to_hex(self.encrypt_bytes(encode_text(plaintext),
                                         BASE64.decode_bytes(key)))

    def decrypt(self, ciphertext: str, key: str) -> str:
        data = self.decrypt_bytes(from_hex(ciphertext),
                                  BASE64.decode_bytes(key))
        return decode_text(data, self.name)

    # ── raw bytes ────────────────────────────────────────────────
    def cipher(self, key: bytes) -> SymmetricCipher:
        self._prepare()
        with invoke("initialise", self.name, default=InvalidKeyError):
            return CipherFactory.create(self.name, key)

    def encrypt_bytes(self, plaintext: bytes, key: bytes) -> bytes:
        cipher = self.cipher(key)
        with invoke("encrypt", self.name, default=EncryptionError):
            return cipher.encrypt(plaintext)

    def decrypt_bytes(self, data: bytes, key: bytes) -> bytes:
        cipher = self.cipher(key)
        with invoke("decrypt", self.name):
            return cipher.decrypt(data)


class SymmetricCatalog(Catalog):
    """Symmetric catalog with registry metadata lookups."""

    def get_info(self, name: str) -> dict:
        return CipherFactory.get_info(self.get(name).name)

    def get_all_info(self) -> list[dict]:
        return CipherFactory.get_all_info()


Symmetric = SymmetricCatalog("Symmetric", [
    SymmetricAlgorithm(AlgorithmVariant(
        name, "Symmetric",
        requires_external_provider=info["external"],
        key_size=info["key_size"],
    ))
    for name, info in CipherFactory._REGISTRY.items()
])

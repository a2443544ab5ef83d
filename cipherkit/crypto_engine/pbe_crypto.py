"""
Password-based encryption (PKCS#5 v1.5, PBES1).

The password is first passed through the Base64 coder; its ASCII bytes,
together with an 8-byte random salt, feed PBKDF1 (100 iterations). The
16 derived bytes split into a DES key and a CBC IV.

The salt is NOT embedded in the ciphertext — callers must store the
salt returned by encrypt() and hand it back to decrypt().
"""

import logging

from ..config.settings import Settings
from ..utils.random_gen import SecureRandom
from .base import Algorithm, AlgorithmVariant, Catalog, PBEResult
from .coder import BASE64
from .des_crypto import DESCBCCipher
from .errors import DecodingError, EncryptionError
from .provider import decode_text, encode_text, external, from_hex, invoke, to_hex

logger = logging.getLogger("CipherKit.PBE")


class PBEAlgorithm(Algorithm):
    """PBES1 with a digest (MD5 / SHA-1) and DES-CBC."""

    family = "PBE"

    _DIGESTS = {
        "PBEWITHMD5ANDDES":  "MD5",
        "PBEWITHSHA1ANDDES": "SHA1",
    }

    def generate_salt(self) -> str:
        return BASE64.encode(SecureRandom.generate_salt(Settings.PBE_SALT_SIZE))

    def encrypt(self, plaintext: str, password: str) -> PBEResult:
        salt = self.generate_salt()
        cipher, iv = self._cipher(password, salt)
        with invoke("encrypt", self.name, default=EncryptionError):
            ct = cipher.encrypt_with_iv(encode_text(plaintext), iv)
        logger.debug("%s encrypted %d bytes", self.name, len(ct))
        return PBEResult(salt=salt, ciphertext=to_hex(ct))

    def decrypt(self, ciphertext: str, password: str, salt: str) -> str:
        data = from_hex(ciphertext)
        cipher, iv = self._cipher(password, salt)
        with invoke("decrypt", self.name):
            plaintext = cipher.decrypt_with_iv(data, iv)
        return decode_text(plaintext, self.name)

    def _cipher(self, password: str, salt: str) -> tuple[DESCBCCipher, bytes]:
        self._prepare()
        raw_salt = BASE64.decode_bytes(salt)
        if len(raw_salt) != Settings.PBE_SALT_SIZE:
            raise DecodingError(
                f"{self.name} salt must be {Settings.PBE_SALT_SIZE} bytes, "
                f"got {len(raw_salt)}"
            )
        secret = BASE64.encode(encode_text(password)).encode("ascii")
        with invoke("derive key", self.name):
            derived = external("PBKDF1")(
                secret, raw_salt, 16,
                count=Settings.PBE_ITERATIONS,
                hashAlgo=external(self._DIGESTS[self.name]),
            )
        return DESCBCCipher(derived[:8]), derived[8:16]


PBE = Catalog("PBE", [
    PBEAlgorithm(AlgorithmVariant("PBEWITHMD5ANDDES", "PBE",
                                  requires_external_provider=True)),
    PBEAlgorithm(AlgorithmVariant("PBEWITHSHA1ANDDES", "PBE",
                                  requires_external_provider=True)),
])

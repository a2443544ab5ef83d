"""
Blowfish block cipher — CBC mode with PKCS#7 padding.

Designed by Bruce Schneier (1993). Included for legacy compatibility.

Key:  4–56 bytes (we default to 16 = 128 bits)
Block: 64 bits (8 bytes)
"""

from cryptography.hazmat.decrepit.ciphers.algorithms import Blowfish
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .symmetric_base import CBCCipher


class BlowfishCBCCipher(CBCCipher):
    """
    Blowfish-CBC.

    Output format:  [IV 8B][ciphertext padded]
    """
    ALGORITHM  = "BLOWFISH"
    KEY_SIZES  = tuple(range(4, 57))
    BLOCK_BITS = 64

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        cipher = Cipher(Blowfish(self._key), modes.CBC(iv))
        ctx    = cipher.encryptor() if encrypt else cipher.decryptor()
        return ctx.update(data) + ctx.finalize()

    def info(self) -> dict:
        base = super().info()
        base["security_note"] = (
            "Blowfish has a 64-bit block size — vulnerable to "
            "birthday attacks on large data. Use AES for production."
        )
        return base

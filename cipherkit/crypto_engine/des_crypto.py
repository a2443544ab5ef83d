"""
DES and Triple DES (DESede) — CBC mode with PKCS#7 padding.

Single DES (56-bit effective key) is only available from the external
provider. 3DES applies DES three times with a 168-bit key (24 bytes).
Both are included for legacy compatibility.
Block size: 64 bits (8 bytes).
"""

from cryptography.hazmat.decrepit.ciphers import algorithms
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .provider import external
from .symmetric_base import CBCCipher


class DESCBCCipher(CBCCipher):
    """
    DES-CBC via the external provider.

    Output format:  [IV 8B][ciphertext padded]

    Key: 8 bytes (parity bits ignored)
    """
    ALGORITHM  = "DES"
    KEY_SIZES  = (8,)
    BLOCK_BITS = 64

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        des = external("DES")
        cipher = des.new(self._key, des.MODE_CBC, iv=iv)
        return cipher.encrypt(data) if encrypt else cipher.decrypt(data)


class TripleDESCipher(CBCCipher):
    """
    3DES-CBC.

    Output format:  [IV 8B][ciphertext padded]

    Key: 24 bytes (three 8-byte DES keys)
    """
    ALGORITHM  = "DESEDE"
    KEY_SIZES  = (24,)
    BLOCK_BITS = 64

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        cipher = Cipher(algorithms.TripleDES(self._key), modes.CBC(iv))
        ctx    = cipher.encryptor() if encrypt else cipher.decryptor()
        return ctx.update(data) + ctx.finalize()

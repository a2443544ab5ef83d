"""
AES / Rijndael — CBC mode with PKCS#7 padding.

AES runs on the default provider; Rijndael is the same 128-bit-block
cipher served by the external provider, kept as a separate catalog
entry for callers that select it by that name.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .provider import external
from .symmetric_base import CBCCipher


class AESCBCCipher(CBCCipher):
    """
    AES in CBC mode.

    Output format:  [IV 16B][ciphertext padded]
    """
    ALGORITHM  = "AES"
    KEY_SIZES  = (16, 24, 32)
    BLOCK_BITS = 128

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        cipher = Cipher(algorithms.AES(self._key), modes.CBC(iv))
        ctx    = cipher.encryptor() if encrypt else cipher.decryptor()
        return ctx.update(data) + ctx.finalize()


class RijndaelCBCCipher(CBCCipher):
    """
    Rijndael (128-bit block) in CBC mode via the external provider.

    Output format:  [IV 16B][ciphertext padded]
    """
    ALGORITHM  = "RIJNDAEL"
    KEY_SIZES  = (16, 24, 32)
    BLOCK_BITS = 128

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        aes = external("RIJNDAEL")
        cipher = aes.new(self._key, aes.MODE_CBC, iv=iv)
        return cipher.encrypt(data) if encrypt else cipher.decrypt(data)

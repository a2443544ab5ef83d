"""
Legacy ciphers kept for interoperability: IDEA, RC2 and RC4.

IDEA (CBC): 128-bit key, 64-bit block.
RC2  (CBC): variable key (we default to 16 bytes), 64-bit block,
            external provider.
RC4:        stream cipher, no IV.
"""

from cryptography.hazmat.decrepit.ciphers.algorithms import ARC4, IDEA
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .provider import external
from .symmetric_base import CBCCipher, StreamCipher


class IDEACBCCipher(CBCCipher):
    """
    IDEA-CBC.

    Output format:  [IV 8B][ciphertext padded]
    """
    ALGORITHM  = "IDEA"
    KEY_SIZES  = (16,)
    BLOCK_BITS = 64

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        cipher = Cipher(IDEA(self._key), modes.CBC(iv))
        ctx    = cipher.encryptor() if encrypt else cipher.decryptor()
        return ctx.update(data) + ctx.finalize()


class RC2CBCCipher(CBCCipher):
    """
    RC2-CBC via the external provider; effective key bits equal the
    key length.

    Output format:  [IV 8B][ciphertext padded]
    """
    ALGORITHM  = "RC2"
    KEY_SIZES  = tuple(range(5, 129))
    BLOCK_BITS = 64

    def _transform(self, data: bytes, iv: bytes, encrypt: bool) -> bytes:
        rc2 = external("RC2")
        cipher = rc2.new(self._key, rc2.MODE_CBC, iv=iv,
                         effective_keylen=len(self._key) * 8)
        return cipher.encrypt(data) if encrypt else cipher.decrypt(data)


class RC4Cipher(StreamCipher):
    """
    RC4 (ARC4) stream cipher.

    Output format:  [ciphertext]

    The keystream is fixed per key, so a key must never encrypt two
    different messages an attacker can compare.
    """
    ALGORITHM = "RC4"
    KEY_SIZES = (5, 7, 8, 10, 16, 20, 24, 32)

    def _keystream_xor(self, data: bytes) -> bytes:
        ctx = Cipher(ARC4(self._key), mode=None).encryptor()
        return ctx.update(data) + ctx.finalize()

"""
One-way digests and keyed digests (HMAC).
"""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from ..config.settings import Settings
from ..utils.random_gen import SecureRandom
from .base import Algorithm, AlgorithmVariant, Catalog
from .coder import BASE64
from .errors import InvalidKeyError
from .provider import encode_text, external, from_hex, invoke, to_hex

logger = logging.getLogger("CipherKit.Hash")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  One-way digests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class OnewayDigest(Algorithm):
    """Unkeyed digest returning hex text."""

    family = "Oneway"

    # external-provider digests are looked up by name instead
    _DEFAULT = {
        "MD5":    hashes.MD5,
        "SHA":    hashes.SHA1,
        "SHA256": hashes.SHA256,
        "SHA384": hashes.SHA384,
        "SHA512": hashes.SHA512,
    }

    def encrypt(self, plaintext: str,
                strip_leading_zeros: bool | None = None) -> str:
        """
        Hex digest of the UTF-8 bytes of *plaintext*.

        Output is fixed width unless *strip_leading_zeros* (defaulting to
        ``Settings.HEX_STRIP_LEADING_ZEROS``) asks for the legacy
        big-integer rendering.
        """
        if strip_leading_zeros is None:
            strip_leading_zeros = Settings.HEX_STRIP_LEADING_ZEROS
        return to_hex(self.digest(encode_text(plaintext)),
                      strip_leading_zeros)

    def digest(self, data: bytes) -> bytes:
        self._prepare()
        with invoke("digest", self.name):
            if self.variant.requires_external_provider:
                h = external(self.name).new()
                h.update(data)
                return h.digest()
            d = hashes.Hash(self._DEFAULT[self.name]())
            d.update(data)
            return d.finalize()

    @property
    def digest_size(self) -> int:
        if self.variant.requires_external_provider:
            return external(self.name).digest_size
        return self._DEFAULT[self.name].digest_size


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  HMAC
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HMACDigest(Algorithm):
    """Keyed digest; keys travel as Base64 text."""

    family = "HMAC"

    _HASHES = {
        "HMACMD5":    hashes.MD5,
        "HMACSHA1":   hashes.SHA1,
        "HMACSHA256": hashes.SHA256,
        "HMACSHA384": hashes.SHA384,
        "HMACSHA512": hashes.SHA512,
    }

    def generate_key(self) -> str:
        key = SecureRandom.generate_bytes(self.variant.key_size)
        logger.debug("Generated %s key (%d bytes)", self.name, len(key))
        return BASE64.encode(key)

    def encrypt(self, plaintext: str, key: str) -> str:
        return to_hex(self._mac(encode_text(plaintext), key).finalize())

    def verify(self, plaintext: str, key: str, digest: str) -> bool:
        """Constant-time comparison of *digest* against a fresh HMAC."""
        expected = from_hex(digest)
        h = self._mac(encode_text(plaintext), key)
        try:
            h.verify(expected)
            return True
        except InvalidSignature:
            return False

    def _mac(self, data: bytes, key: str) -> hmac.HMAC:
        raw = BASE64.decode_bytes(key)
        if not raw:
            raise InvalidKeyError(f"{self.name} key must not be empty")
        with invoke("initialise", self.name, default=InvalidKeyError):
            h = hmac.HMAC(raw, self._HASHES[self.name]())
        h.update(data)
        return h


# ── catalogs ─────────────────────────────────────────────────────

Oneway = Catalog("Oneway", [
    OnewayDigest(AlgorithmVariant("MD2", "Oneway",
                                  requires_external_provider=True)),
    OnewayDigest(AlgorithmVariant("MD5", "Oneway")),
    OnewayDigest(AlgorithmVariant("SHA", "Oneway")),
    OnewayDigest(AlgorithmVariant("MD4", "Oneway",
                                  requires_external_provider=True)),
    OnewayDigest(AlgorithmVariant("SHA256", "Oneway")),
    OnewayDigest(AlgorithmVariant("SHA384", "Oneway")),
    OnewayDigest(AlgorithmVariant("SHA512", "Oneway")),
])

HMAC = Catalog("HMAC", [
    HMACDigest(AlgorithmVariant("HMACMD5",    "HMAC", key_size=64)),
    HMACDigest(AlgorithmVariant("HMACSHA1",   "HMAC", key_size=64)),
    HMACDigest(AlgorithmVariant("HMACSHA256", "HMAC", key_size=32)),
    HMACDigest(AlgorithmVariant("HMACSHA384", "HMAC", key_size=48)),
    HMACDigest(AlgorithmVariant("HMACSHA512", "HMAC", key_size=64)),
])

"""
Elliptic-curve encryption (ECIES).

Wire format:  [ephemeral public point, uncompressed][12-byte nonce][ct + tag]

Per message a fresh ephemeral key pair is generated on the recipient's
curve; the ECDH secret is expanded with HKDF-SHA256 (bound to the
ephemeral point) into an AES-256-GCM key.
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ..config.settings import Settings
from ..utils.random_gen import SecureRandom
from .base import Algorithm, AlgorithmVariant, Catalog, KeyPair
from .errors import DecryptionError, EncryptionError, UnsupportedAlgorithmError
from .provider import decode_text, encode_text, from_hex, invoke, to_hex
from .rsa_crypto import export_key_pair, load_private_key, load_public_key

logger = logging.getLogger("CipherKit.EllipticCurve")

CURVES = {
    "SECP256R1": ec.SECP256R1,
    "SECP384R1": ec.SECP384R1,
    "SECP521R1": ec.SECP521R1,
    "SECP256K1": ec.SECP256K1,
}

_HKDF_INFO = b"cipherkit-ecies"


def get_curve(name: str) -> ec.EllipticCurve:
    try:
        return CURVES[name.upper()]()
    except (KeyError, AttributeError):
        raise UnsupportedAlgorithmError(
            f"Unknown curve: {name!r}. Available: {list(CURVES)}"
        ) from None


def point_size(curve: ec.EllipticCurve) -> int:
    """Length of an uncompressed SEC1 point on *curve*."""
    return 1 + 2 * ((curve.key_size + 7) // 8)


class ECAlgorithm(Algorithm):
    """ECIES over a configurable named curve."""

    family = "EllipticCurve"

    def generate_key_pair(self, curve: str | None = None) -> KeyPair:
        curve_obj = get_curve(curve or Settings.ECC_CURVE)
        with invoke("generate key pair", self.name,
                    default=UnsupportedAlgorithmError):
            private_key = ec.generate_private_key(curve_obj)
        logger.debug("Generated %s key pair on %s", self.name, curve_obj.name)
        return export_key_pair(private_key)

    def encrypt(self, plaintext: str, public_key: str) -> str:
        recipient = load_public_key(public_key, ec.EllipticCurvePublicKey,
                                    self.name)
        with invoke("encrypt", self.name, default=EncryptionError):
            ephemeral = ec.generate_private_key(recipient.curve)
            point = ephemeral.public_key().public_bytes(
                encoding=serialization.Encoding.X962,
                format=serialization.PublicFormat.UncompressedPoint,
            )
            key   = self._derive(ephemeral.exchange(ec.ECDH(), recipient), point)
            nonce = SecureRandom.generate_nonce(Settings.GCM_NONCE_SIZE)
            ct    = AESGCM(key).encrypt(nonce, encode_text(plaintext), None)
        return to_hex(point + nonce + ct)

    def decrypt(self, ciphertext: str, private_key: str) -> str:
        data = from_hex(ciphertext)
        own  = load_private_key(private_key, ec.EllipticCurvePrivateKey,
                                self.name)
        plen = point_size(own.curve)
        if len(data) < plen + Settings.GCM_NONCE_SIZE + 16:
            raise DecryptionError(
                f"{self.name} ciphertext too short ({len(data)} bytes)"
            )

        point = data[:plen]
        nonce = data[plen:plen + Settings.GCM_NONCE_SIZE]
        ct    = data[plen + Settings.GCM_NONCE_SIZE:]

        with invoke("decrypt", self.name):
            ephemeral = ec.EllipticCurvePublicKey.from_encoded_point(
                own.curve, point
            )
            key = self._derive(own.exchange(ec.ECDH(), ephemeral), point)
            try:
                plaintext = AESGCM(key).decrypt(nonce, ct, None)
            except InvalidTag:
                raise DecryptionError(
                    f"{self.name}: authentication failed, data tampered "
                    f"or wrong key"
                ) from None
        return decode_text(plaintext, self.name)

    @staticmethod
    def _derive(shared: bytes, point: bytes) -> bytes:
        return HKDF(
            algorithm=hashes.SHA256(),
            length=32,
            salt=None,
            info=_HKDF_INFO + point,
        ).derive(shared)


EllipticCurve = Catalog("EllipticCurve", [
    ECAlgorithm(AlgorithmVariant("EC", "EllipticCurve")),
])

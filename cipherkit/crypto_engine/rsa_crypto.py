"""
Asymmetric family — RSA encryption/signing and DSA signing.

Keys cross the boundary as Base64 DER: SubjectPublicKeyInfo for public
keys, PKCS#8 for private keys.
"""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa, rsa
from cryptography.hazmat.primitives.asymmetric import padding as asym_padding

from ..config.settings import Settings
from .base import Algorithm, AlgorithmVariant, Catalog, KeyPair
from .coder import BASE64
from .errors import (
    EncryptionError,
    InvalidKeyError,
    UnsupportedAlgorithmError,
)
from .provider import decode_text, encode_text, from_hex, invoke, to_hex

logger = logging.getLogger("CipherKit.Asymmetric")

# name (upper case) → (key family, hash)
SIGN_ALGORITHMS = {
    "MD5WITHRSA":    ("RSA", hashes.MD5),
    "SHA1WITHRSA":   ("RSA", hashes.SHA1),
    "SHA224WITHRSA": ("RSA", hashes.SHA224),
    "SHA256WITHRSA": ("RSA", hashes.SHA256),
    "SHA384WITHRSA": ("RSA", hashes.SHA384),
    "SHA512WITHRSA": ("RSA", hashes.SHA512),
    "DSA":           ("DSA", hashes.SHA1),
    "SHA1WITHDSA":   ("DSA", hashes.SHA1),
    "SHA224WITHDSA": ("DSA", hashes.SHA224),
    "SHA256WITHDSA": ("DSA", hashes.SHA256),
}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Key serialisation shared by the key-pair families
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def export_key_pair(private_key) -> KeyPair:
    public_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    private_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return KeyPair(BASE64.encode(public_der), BASE64.encode(private_der))


def load_public_key(key: str, expected: type, algorithm: str):
    der = BASE64.decode_bytes(key)
    with invoke("load public key", algorithm, default=InvalidKeyError):
        public_key = serialization.load_der_public_key(der)
    if not isinstance(public_key, expected):
        raise InvalidKeyError(f"Not a {algorithm} public key")
    return public_key


def load_private_key(key: str, expected: type, algorithm: str):
    der = BASE64.decode_bytes(key)
    with invoke("load private key", algorithm, default=InvalidKeyError):
        private_key = serialization.load_der_private_key(der, password=None)
    if not isinstance(private_key, expected):
        raise InvalidKeyError(f"Not a {algorithm} private key")
    return private_key


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  RSA / DSA
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AsymmetricAlgorithm(Algorithm):
    """
    RSA-OAEP encryption + PKCS#1 v1.5 / DSA signing.

    Sign-only variants (DSA) reject encrypt/decrypt before any key is
    touched.
    """

    family = "Asymmetric"

    _KEY_TYPES = {
        "RSA": (rsa.RSAPublicKey, rsa.RSAPrivateKey),
        "DSA": (dsa.DSAPublicKey, dsa.DSAPrivateKey),
    }

    @property
    def default_sign_algorithm(self) -> str:
        return self.variant.default_sign_algorithm or self.name

    # ── key generation ───────────────────────────────────────────
    def generate_key_pair(self, key_size: int | None = None) -> KeyPair:
        key_size = key_size or self.variant.key_size
        with invoke("generate key pair", self.name,
                    default=UnsupportedAlgorithmError):
            if self.name == "RSA":
                private_key = rsa.generate_private_key(
                    public_exponent=Settings.RSA_PUBLIC_EXPONENT,
                    key_size=key_size,
                )
            else:
                private_key = dsa.generate_private_key(key_size=key_size)
        logger.debug("Generated %s key pair (%d bits)", self.name, key_size)
        return export_key_pair(private_key)

    # ── encrypt / decrypt ────────────────────────────────────────
    def encrypt(self, plaintext: str, public_key: str) -> str:
        if self.variant.sign_only:
            self._reject("encryption")
        key = self._public(public_key)
        with invoke("encrypt", self.name, default=EncryptionError):
            return to_hex(key.encrypt(encode_text(plaintext), self._oaep()))

    def decrypt(self, ciphertext: str, private_key: str) -> str:
        if self.variant.sign_only:
            self._reject("decryption")
        data = from_hex(ciphertext)
        key  = self._private(private_key)
        with invoke("decrypt", self.name):
            return decode_text(key.decrypt(data, self._oaep()), self.name)

    # ── sign / verify ────────────────────────────────────────────
    def sign(self, plaintext: str, private_key: str,
             sign_algorithm: str | None = None) -> str:
        hash_cls = self._sign_hash(sign_algorithm)
        key = self._private(private_key)
        with invoke("sign", self.name, default=EncryptionError):
            if self.name == "RSA":
                signature = key.sign(encode_text(plaintext),
                                     asym_padding.PKCS1v15(), hash_cls())
            else:
                signature = key.sign(encode_text(plaintext), hash_cls())
        return to_hex(signature)

    def verify(self, plaintext: str, public_key: str, signature: str,
               sign_algorithm: str | None = None) -> bool:
        """
        True if *signature* matches; False for any mismatch.

        Undecodable hex/Base64, unusable keys and unknown sign algorithms
        still raise.
        """
        hash_cls = self._sign_hash(sign_algorithm)
        raw = from_hex(signature)
        key = self._public(public_key)
        try:
            if self.name == "RSA":
                key.verify(raw, encode_text(plaintext),
                           asym_padding.PKCS1v15(), hash_cls())
            else:
                key.verify(raw, encode_text(plaintext), hash_cls())
            return True
        except InvalidSignature:
            return False

    # ── helpers ──────────────────────────────────────────────────
    def _sign_hash(self, sign_algorithm: str | None):
        name = (sign_algorithm or self.default_sign_algorithm).upper()
        entry = SIGN_ALGORITHMS.get(name)
        if entry is None or entry[0] != self.name:
            raise UnsupportedAlgorithmError(
                f"Sign algorithm {name!r} cannot be used with "
                f"{self.name}"
            )
        return entry[1]

    def _public(self, key: str):
        return load_public_key(key, self._KEY_TYPES[self.name][0], self.name)

    def _private(self, key: str):
        return load_private_key(key, self._KEY_TYPES[self.name][1], self.name)

    @staticmethod
    def _oaep() -> asym_padding.OAEP:
        return asym_padding.OAEP(
            mgf=asym_padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        )


Asymmetric = Catalog("Asymmetric", [
    AsymmetricAlgorithm(AlgorithmVariant(
        "RSA", "Asymmetric",
        default_sign_algorithm="MD5withRSA",
        key_size=Settings.ASYMMETRIC_KEY_SIZE,
    )),
    AsymmetricAlgorithm(AlgorithmVariant(
        "DSA", "Asymmetric",
        sign_only=True,
        default_sign_algorithm="SHA1withDSA",
        key_size=Settings.ASYMMETRIC_KEY_SIZE,
    )),
])

"""
Diffie-Hellman key agreement followed by symmetric encryption.

Protocol:
    1. generate_key_pairs()  party A over the default group, party B over
                             the exact domain parameters carried by A's
                             public key.
    2. encrypt(msg, B_pub, A_priv)   shared secret → HKDF → symmetric key
    3. decrypt(ct,  A_pub, B_priv)   same secret from the other side

Nothing is kept between calls; every operation recomputes the secret
from the key material it is given.
"""

import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import dh
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ..config.settings import Settings
from .base import Algorithm, AlgorithmVariant, Catalog, DHPartyKeyPairs, KeyPair
from .cipher_factory import CipherFactory, Symmetric
from .errors import InvalidKeyError
from .provider import decode_text, encode_text, from_hex, invoke, to_hex
from .rsa_crypto import export_key_pair, load_private_key, load_public_key

logger = logging.getLogger("CipherKit.KeyAgreement")

# RFC 2409 §6.2, Second Oakley Group (1024-bit MODP), generator 2
OAKLEY_GROUP_2_PRIME = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE65381"
    "FFFFFFFFFFFFFFFF",
    16,
)
OAKLEY_GROUP_2_GENERATOR = 2


def default_parameters(key_size: int) -> dh.DHParameters:
    """Well-known group for 1024 bits, freshly generated otherwise."""
    if key_size == 1024:
        return dh.DHParameterNumbers(
            OAKLEY_GROUP_2_PRIME, OAKLEY_GROUP_2_GENERATOR
        ).parameters()
    logger.info("Generating %d-bit DH parameters, this may take a while",
                key_size)
    return dh.generate_parameters(generator=2, key_size=key_size)


class DHAlgorithm(Algorithm):
    """Two-party Diffie-Hellman with a symmetric payload cipher."""

    family = "KeyAgreement"

    # ── key generation ───────────────────────────────────────────
    def generate_key_pairs(self, key_size: int | None = None) -> DHPartyKeyPairs:
        key_size = key_size or self.variant.key_size
        with invoke("generate key pair", self.name, default=InvalidKeyError):
            private_a = default_parameters(key_size).generate_private_key()
        party_a = export_key_pair(private_a)
        party_b = self.generate_party_b_key_pair(party_a.public_key)
        logger.debug("Generated %s party key pairs (%d bits)",
                     self.name, key_size)
        return DHPartyKeyPairs(party_a=party_a, party_b=party_b)

    def generate_party_b_key_pair(self, party_a_public_key: str) -> KeyPair:
        """Key pair over the domain parameters of party A's public key."""
        public_a = load_public_key(party_a_public_key, dh.DHPublicKey, self.name)
        with invoke("generate key pair", self.name, default=InvalidKeyError):
            private_b = public_a.parameters().generate_private_key()
        return export_key_pair(private_b)

    # ── encrypt / decrypt ────────────────────────────────────────
    def encrypt(self, plaintext: str, public_key: str, private_key: str,
                secret_algorithm: str | None = None) -> str:
        algorithm = self._secret_algorithm(secret_algorithm)
        key = self.derive_secret(public_key, private_key, algorithm.name)
        return to_hex(algorithm.encrypt_bytes(encode_text(plaintext), key))

    def decrypt(self, ciphertext: str, public_key: str, private_key: str,
                secret_algorithm: str | None = None) -> str:
        algorithm = self._secret_algorithm(secret_algorithm)
        data = from_hex(ciphertext)
        key  = self.derive_secret(public_key, private_key, algorithm.name)
        return decode_text(algorithm.decrypt_bytes(data, key), self.name)

    def derive_secret(self, public_key: str, private_key: str,
                      secret_algorithm: str) -> bytes:
        """
        Shared secret of (*public_key*, *private_key*) expanded to a key
        for *secret_algorithm*.

        secret(A_pub, B_priv) == secret(B_pub, A_priv).
        """
        peer = load_public_key(public_key, dh.DHPublicKey, self.name)
        own  = load_private_key(private_key, dh.DHPrivateKey, self.name)
        with invoke("agree", self.name, default=InvalidKeyError):
            if peer.parameters().parameter_numbers() != \
                    own.parameters().parameter_numbers():
                raise InvalidKeyError(
                    f"{self.name} keys belong to different groups"
                )
            shared = own.exchange(peer)
        length = CipherFactory.get_required_key_size(secret_algorithm)
        return HKDF(
            algorithm=hashes.SHA256(),
            length=length,
            salt=None,
            info=b"cipherkit-dh:" + secret_algorithm.upper().encode("ascii"),
        ).derive(shared)

    def _secret_algorithm(self, name: str | None):
        return Symmetric.get(name or self.variant.default_secret_algorithm)


KeyAgreement = Catalog("KeyAgreement", [
    DHAlgorithm(AlgorithmVariant(
        "DH", "KeyAgreement",
        default_secret_algorithm="DES",
        key_size=Settings.DH_KEY_SIZE,
    )),
])

"""Tests for Diffie-Hellman key agreement."""

import pytest
from cryptography.hazmat.primitives import serialization

from cipherkit import (
    BASE64,
    DecryptionError,
    DHPartyKeyPairs,
    InvalidKeyError,
    KeyAgreement,
    UnsupportedAlgorithmError,
)
from cipherkit.crypto_engine.dh_crypto import OAKLEY_GROUP_2_PRIME

DH = KeyAgreement.DH


def load_public(key: str):
    return serialization.load_der_public_key(BASE64.decode_bytes(key))


class TestKeyPairs:
    """Tests for party key pair generation."""

    def test_returns_both_parties(self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test that both parties receive distinct key pairs."""
        party_a, party_b = dh_key_pairs
        assert party_a.public_key != party_b.public_key
        assert party_a.private_key != party_b.private_key

    def test_party_b_shares_parameters(
            self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test that party B uses party A's exact domain parameters."""
        params_a = load_public(dh_key_pairs.party_a.public_key).parameters()
        params_b = load_public(dh_key_pairs.party_b.public_key).parameters()
        assert params_a.parameter_numbers() == params_b.parameter_numbers()
        assert params_a.parameter_numbers().p == OAKLEY_GROUP_2_PRIME
        assert params_a.parameter_numbers().g == 2

    def test_generate_party_b_key_pair(
            self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test the exposed party B step."""
        pair = DH.generate_party_b_key_pair(dh_key_pairs.party_a.public_key)
        params = load_public(pair.public_key).parameters()
        assert params.parameter_numbers().p == OAKLEY_GROUP_2_PRIME

    def test_party_b_needs_dh_key(self) -> None:
        """Test that a non-DH public key is rejected."""
        with pytest.raises(InvalidKeyError):
            DH.generate_party_b_key_pair(BASE64.encode(b"not a key"))


class TestEncryption:
    """Tests for secret-keyed encryption between the parties."""

    @pytest.mark.parametrize("message", ["", "hello party B", "Ω" * 500])
    def test_round_trip(self, dh_key_pairs: DHPartyKeyPairs,
                        message: str) -> None:
        """Test decrypt(encrypt(m, B_pub, A_priv), A_pub, B_priv) == m."""
        a, b = dh_key_pairs
        ciphertext = DH.encrypt(message, b.public_key, a.private_key)
        assert DH.decrypt(ciphertext, a.public_key, b.private_key) == message

    @pytest.mark.parametrize("secret_algorithm",
                             ["DES", "AES", "DESEDE", "BLOWFISH", "RC4"])
    def test_secret_algorithms(self, dh_key_pairs: DHPartyKeyPairs,
                               secret_algorithm: str) -> None:
        """Test that the secret can key several symmetric ciphers."""
        a, b = dh_key_pairs
        ciphertext = DH.encrypt("payload", b.public_key, a.private_key,
                                secret_algorithm)
        assert DH.decrypt(ciphertext, a.public_key, b.private_key,
                          secret_algorithm) == "payload"

    def test_secret_is_symmetric(self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test secret(A_pub, B_priv) == secret(B_pub, A_priv)."""
        a, b = dh_key_pairs
        one = DH.derive_secret(b.public_key, a.private_key, "AES")
        two = DH.derive_secret(a.public_key, b.private_key, "AES")
        assert one == two
        assert len(one) == 16

    def test_secret_bound_to_algorithm(
            self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test that each secret algorithm gets its own derived key."""
        a, b = dh_key_pairs
        aes = DH.derive_secret(b.public_key, a.private_key, "AES")
        rc4 = DH.derive_secret(b.public_key, a.private_key, "RC4")
        assert aes != rc4

    def test_third_party_cannot_decrypt(
            self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test that an outsider's key never recovers the plaintext."""
        a, b = dh_key_pairs
        outsider = DH.generate_party_b_key_pair(a.public_key)
        ciphertext = DH.encrypt("private", b.public_key, a.private_key)
        try:
            recovered = DH.decrypt(ciphertext, a.public_key,
                                   outsider.private_key)
        except DecryptionError:
            recovered = None
        assert recovered != "private"

    def test_unknown_secret_algorithm(
            self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test that an unknown secret algorithm raises."""
        a, b = dh_key_pairs
        with pytest.raises(UnsupportedAlgorithmError):
            DH.encrypt("x", b.public_key, a.private_key, "ROT13")

    def test_swapped_keys(self, dh_key_pairs: DHPartyKeyPairs) -> None:
        """Test that a private key passed as public raises InvalidKeyError."""
        a, b = dh_key_pairs
        with pytest.raises(InvalidKeyError):
            DH.encrypt("x", b.private_key, a.private_key)

"""Tests for the Symmetric family and CipherFactory."""

import re

import pytest

from cipherkit import (
    BASE64,
    CipherFactory,
    DecodingError,
    DecryptionError,
    InvalidKeyError,
    Symmetric,
    SymmetricCipher,
    UnsupportedAlgorithmError,
)

IMPLEMENTED = [n for n in CipherFactory.list_ciphers()
               if CipherFactory.is_available(n)]
UNIMPLEMENTED = ["SERPENT", "TWOFISH", "RC5"]

MESSAGES = ["", "hello world", "x" * 16, "Grüße, 世界", "A" * 10_000]


class TestRoundTrip:
    """Tests that every implemented cipher decrypts what it encrypts."""

    @pytest.mark.parametrize("name", IMPLEMENTED)
    @pytest.mark.parametrize("message", MESSAGES)
    def test_round_trip(self, name: str, message: str) -> None:
        """Test decrypt(encrypt(m, k), k) == m."""
        alg = Symmetric.get(name)
        key = alg.generate_key()
        assert alg.decrypt(alg.encrypt(message, key), key) == message

    def test_aes_scenario(self) -> None:
        """Test the AES hex ciphertext shape."""
        key = Symmetric.AES.generate_key()
        ciphertext = Symmetric.AES.encrypt("hello world", key)
        assert ciphertext
        assert len(ciphertext) % 2 == 0
        assert re.fullmatch(r"[0-9a-f]+", ciphertext)
        assert Symmetric.AES.decrypt(ciphertext, key) == "hello world"

    def test_uppercase_hex_accepted(self) -> None:
        """Test that decrypt accepts upper-case hex."""
        key = Symmetric.AES.generate_key()
        ciphertext = Symmetric.AES.encrypt("hello", key).upper()
        assert Symmetric.AES.decrypt(ciphertext, key) == "hello"

    def test_random_iv(self) -> None:
        """Test that encrypting twice yields different ciphertexts."""
        key = Symmetric.DES.generate_key()
        assert Symmetric.DES.encrypt("same", key) != \
            Symmetric.DES.encrypt("same", key)

    def test_rc4_has_no_iv(self) -> None:
        """Test that RC4 ciphertext is as long as the plaintext."""
        key = Symmetric.RC4.generate_key()
        assert len(Symmetric.RC4.encrypt("12345", key)) == 10

    def test_rijndael_matches_aes(self) -> None:
        """Test that both providers implement the same 128-bit block cipher."""
        key = Symmetric.AES.generate_key()
        ciphertext = Symmetric.RIJNDAEL.encrypt("interop", key)
        assert Symmetric.AES.decrypt(ciphertext, key) == "interop"


class TestKeys:
    """Tests for key generation and validation."""

    @pytest.mark.parametrize("name", IMPLEMENTED)
    def test_generated_key_size(self, name: str) -> None:
        """Test that generated keys match the registry default size."""
        key = Symmetric.get(name).generate_key()
        assert len(BASE64.decode_bytes(key)) == \
            CipherFactory.get_required_key_size(name)

    def test_wrong_key_length(self) -> None:
        """Test that a key of unsupported length raises InvalidKeyError."""
        with pytest.raises(InvalidKeyError):
            Symmetric.AES.encrypt("x", BASE64.encode(b"\x00" * 5))
        with pytest.raises(InvalidKeyError):
            Symmetric.DES.encrypt("x", BASE64.encode(b"\x00" * 16))

    def test_malformed_key(self) -> None:
        """Test that a key that is not Base64 raises DecodingError."""
        with pytest.raises(DecodingError):
            Symmetric.AES.encrypt("x", "%%%")

    def test_wrong_key_does_not_recover_plaintext(self) -> None:
        """Test that another key never yields the original plaintext."""
        ciphertext = Symmetric.BLOWFISH.encrypt(
            "top secret", Symmetric.BLOWFISH.generate_key()
        )
        try:
            recovered = Symmetric.BLOWFISH.decrypt(
                ciphertext, Symmetric.BLOWFISH.generate_key()
            )
        except DecryptionError:
            recovered = None
        assert recovered != "top secret"


class TestFailures:
    """Tests for malformed ciphertext and unsupported variants."""

    def test_malformed_hex(self) -> None:
        """Test that non-hex ciphertext raises DecodingError."""
        key = Symmetric.AES.generate_key()
        with pytest.raises(DecodingError):
            Symmetric.AES.decrypt("not hex", key)

    def test_shorter_than_iv(self) -> None:
        """Test that ciphertext shorter than one IV is rejected."""
        key = Symmetric.AES.generate_key()
        with pytest.raises(DecryptionError):
            Symmetric.AES.decrypt("00" * 8, key)

    def test_not_block_aligned(self) -> None:
        """Test that ciphertext not a multiple of the block size is rejected."""
        key = Symmetric.AES.generate_key()
        with pytest.raises(DecryptionError):
            Symmetric.AES.decrypt("00" * 21, key)

    @pytest.mark.parametrize("name", UNIMPLEMENTED)
    def test_unimplemented_variants(self, name: str) -> None:
        """Test that catalogued but unimplemented ciphers raise."""
        alg = Symmetric.get(name)
        assert alg.variant.requires_external_provider
        with pytest.raises(UnsupportedAlgorithmError):
            alg.generate_key()
        with pytest.raises(UnsupportedAlgorithmError):
            alg.encrypt("x", BASE64.encode(b"\x00" * 16))

    def test_unknown_cipher(self) -> None:
        """Test that unknown names raise UnsupportedAlgorithmError."""
        with pytest.raises(UnsupportedAlgorithmError):
            Symmetric.get("ROT13")
        with pytest.raises(UnsupportedAlgorithmError):
            CipherFactory.create("ROT13", b"\x00" * 16)


class TestCipherFactory:
    """Tests for the cipher registry."""

    def test_catalog_order(self) -> None:
        """Test that the catalog follows the registry order."""
        assert Symmetric.names() == CipherFactory.list_ciphers()
        assert Symmetric.names()[:3] == ["AES", "DES", "DESEDE"]

    def test_create_returns_cipher(self) -> None:
        """Test that create() builds a SymmetricCipher for raw bytes."""
        cipher = CipherFactory.create("aes", b"\x01" * 32)
        assert isinstance(cipher, SymmetricCipher)
        assert cipher.cipher_name == "AES-256-CBC"
        assert cipher.decrypt(cipher.encrypt(b"raw")) == b"raw"

    def test_cipher_info(self) -> None:
        """Test per-instance cipher metadata."""
        info = CipherFactory.create("RC4", b"\x02" * 16).info()
        assert info == {"name": "RC4-128", "key_bits": 128, "iv_bytes": 0}

    def test_get_info(self) -> None:
        """Test registry metadata lookups through the catalog."""
        info = Symmetric.get_info("desede")
        assert info["name"] == "DESEDE"
        assert info["key_bits"] == 192
        assert info["available"] is True
        assert Symmetric.get_info("TWOFISH")["available"] is False
        assert len(Symmetric.get_all_info()) == len(Symmetric)

    def test_bytes_interface(self) -> None:
        """Test encrypt_bytes/decrypt_bytes with raw keys."""
        key = b"\x03" * 8
        blob = Symmetric.DES.encrypt_bytes(b"\x00\x01\x02", key)
        assert Symmetric.DES.decrypt_bytes(blob, key) == b"\x00\x01\x02"

"""Failure taxonomy shared by every algorithm family."""

from __future__ import annotations


class CipherKitError(Exception):
    """Base exception for all CipherKit errors."""

    pass


class UnsupportedAlgorithmError(CipherKitError):
    """Unknown algorithm name, or no registered provider implements it."""

    pass


class UnsupportedOperationError(CipherKitError):
    """Operation is not valid for the selected variant.

    Raised, for example, when encrypting under a sign-only asymmetric
    variant such as DSA.
    """

    pass


class InvalidKeyError(CipherKitError):
    """Malformed, wrong-length or mismatched key material."""

    pass


class DecodingError(CipherKitError):
    """Malformed Base64 or hex input."""

    pass


class EncryptionError(CipherKitError):
    """Plaintext could not be encrypted or signed (e.g. too long for RSA)."""

    pass


class DecryptionError(CipherKitError):
    """Ciphertext cannot be decrypted under the supplied key.

    Corrupt data and wrong keys are indistinguishable from the caller's
    point of view and both surface as this error.
    """

    pass


class PaddingError(DecryptionError):
    """Block padding was invalid after decryption."""

    pass


class ProviderInitializationError(CipherKitError):
    """The external security provider failed to register."""

    pass

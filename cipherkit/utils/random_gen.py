"""
CSPRNG helpers for keys, salts, IVs and nonces.

Every random value in CipherKit is drawn here; nothing uses the
``random`` module.
"""

import secrets

from ..config.settings import Settings


class SecureRandom:
    """Operating-system randomness via :mod:`secrets`."""

    @staticmethod
    def generate_bytes(length: int) -> bytes:
        """Raw key material of *length* bytes."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return secrets.token_bytes(length)

    @staticmethod
    def generate_salt(length: int = Settings.PBE_SALT_SIZE) -> bytes:
        return secrets.token_bytes(length)

    @staticmethod
    def generate_iv(length: int) -> bytes:
        """IV of one cipher block; *length* is the block size in bytes."""
        return secrets.token_bytes(length)

    @staticmethod
    def generate_nonce(length: int = Settings.GCM_NONCE_SIZE) -> bytes:
        return secrets.token_bytes(length)

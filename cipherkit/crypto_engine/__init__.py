"""
CipherKit Crypto Engine — every algorithm family behind one façade.
"""

# ── Families ─────────────────────────────────────────────────────
from .coder          import Coder, BASE64
from .hash_crypto    import Oneway, HMAC
from .cipher_factory import Symmetric, CipherFactory
from .pbe_crypto     import PBE
from .rsa_crypto     import Asymmetric
from .dh_crypto      import KeyAgreement
from .ecc_crypto     import EllipticCurve

# ── Types ────────────────────────────────────────────────────────
from .base           import (
    Algorithm, AlgorithmVariant, Catalog,
    KeyPair, DHPartyKeyPairs, PBEResult,
)
from .symmetric_base import SymmetricCipher
from .provider       import ensure_provider_registered, is_provider_registered

# ── Errors ───────────────────────────────────────────────────────
from .errors import (
    CipherKitError,
    UnsupportedAlgorithmError,
    UnsupportedOperationError,
    InvalidKeyError,
    DecodingError,
    EncryptionError,
    DecryptionError,
    PaddingError,
    ProviderInitializationError,
)

__all__ = [
    # Families
    "Coder", "BASE64", "Oneway", "HMAC", "Symmetric", "CipherFactory",
    "PBE", "Asymmetric", "KeyAgreement", "EllipticCurve",
    # Types
    "Algorithm", "AlgorithmVariant", "Catalog",
    "KeyPair", "DHPartyKeyPairs", "PBEResult", "SymmetricCipher",
    "ensure_provider_registered", "is_provider_registered",
    # Errors
    "CipherKitError", "UnsupportedAlgorithmError",
    "UnsupportedOperationError", "InvalidKeyError", "DecodingError",
    "EncryptionError", "DecryptionError", "PaddingError",
    "ProviderInitializationError",
]

"""
Primitive-invocation layer shared by every algorithm family.

Two providers back the façade:

    default   — the ``cryptography`` package, always available.
    external  — ``pycryptodome``, registered lazily the first time a
                variant flagged ``requires_external_provider`` is used.
                It supplies MD2, MD4, DES, RC2, Rijndael and PBKDF1.

Library exceptions raised while calling into either provider are
translated here into the CipherKit failure taxonomy, and ciphertext is
framed as hex text.
"""

import binascii
import logging
import threading
from contextlib import contextmanager

from cryptography.exceptions import (
    InvalidKey,
    InvalidSignature,
    InvalidTag,
    UnsupportedAlgorithm,
)

from ..config.settings import Settings
from .errors import (
    CipherKitError,
    DecodingError,
    DecryptionError,
    ProviderInitializationError,
    UnsupportedAlgorithmError,
)

logger = logging.getLogger("CipherKit.Provider")

_provider_lock = threading.Lock()
_provider_registered = False
_external: dict = {}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  External provider registration
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def ensure_provider_registered() -> None:
    """
    Register the external provider exactly once.

    Safe to call from any number of threads; concurrent first calls
    are serialised on a module lock and later calls return at once.
    """
    global _provider_registered
    if _provider_registered:
        return
    with _provider_lock:
        if _provider_registered:
            return
        try:
            import Crypto
            from Crypto.Cipher import AES, ARC2, DES
            from Crypto.Hash import MD2, MD4, MD5, SHA1
            from Crypto.Protocol.KDF import PBKDF1
        except ImportError as exc:
            raise ProviderInitializationError(
                f"External provider (pycryptodome) could not be loaded: {exc}"
            ) from exc

        _external.update({
            "MD2":      MD2,
            "MD4":      MD4,
            "MD5":      MD5,
            "SHA1":     SHA1,
            "DES":      DES,
            "RC2":      ARC2,
            "RIJNDAEL": AES,
            "PBKDF1":   PBKDF1,
        })
        _provider_registered = True
        logger.info(
            "External provider pycryptodome %s registered (%d primitives)",
            Crypto.__version__, len(_external),
        )


def is_provider_registered() -> bool:
    return _provider_registered


def external(name: str):
    """Return a primitive of the external provider, registering it first."""
    ensure_provider_registered()
    try:
        return _external[name.upper()]
    except KeyError:
        raise UnsupportedAlgorithmError(
            f"{name} is not implemented by any registered provider"
        ) from None


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Exception translation
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@contextmanager
def invoke(action: str, algorithm: str,
           default: type[CipherKitError] = DecryptionError):
    """
    Run a provider call, converting its failures into CipherKit errors.

    Parameters
    ----------
    action : str
        Short description used in the error message ("decrypt", ...).
    algorithm : str
        Variant name for the error message.
    default : type
        Error raised for ``ValueError`` / ``TypeError`` coming out of the
        provider, whose meaning depends on the call site.
    """
    try:
        yield
    except CipherKitError:
        raise
    except UnsupportedAlgorithm as exc:
        raise UnsupportedAlgorithmError(
            f"{algorithm}: {action} not supported by provider: {exc}"
        ) from exc
    except (InvalidTag, InvalidSignature, InvalidKey) as exc:
        raise DecryptionError(
            f"{algorithm}: {action} failed, data corrupt or wrong key"
        ) from exc
    except UnicodeDecodeError as exc:
        raise DecryptionError(
            f"{algorithm}: {action} produced undecodable text, "
            f"data corrupt or wrong key"
        ) from exc
    except binascii.Error as exc:
        raise DecodingError(f"{algorithm}: malformed input: {exc}") from exc
    except (ValueError, TypeError) as exc:
        raise default(f"{algorithm}: {action} failed: {exc}") from exc


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Text framing
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def to_hex(data: bytes, strip_leading_zeros: bool = False) -> str:
    """
    Lowercase hex rendering of *data*.

    With *strip_leading_zeros* the value is rendered the way a
    non-negative big integer prints, dropping leading zero nibbles
    ("0" for an all-zero input).
    """
    text = data.hex()
    if strip_leading_zeros:
        return text.lstrip("0") or "0"
    return text


def from_hex(text: str) -> bytes:
    if not isinstance(text, str):
        raise DecodingError(f"Hex input must be str, got {type(text).__name__}")
    try:
        return bytes.fromhex(text.strip())
    except ValueError as exc:
        raise DecodingError(f"Malformed hex input: {exc}") from exc


def encode_text(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    return text.encode(Settings.TEXT_ENCODING)


def decode_text(data: bytes, algorithm: str) -> str:
    with invoke("decode plaintext", algorithm):
        return data.decode(Settings.TEXT_ENCODING)

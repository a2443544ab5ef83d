"""
Variant identities, the family base class and the closed catalogs that
expose them (``Symmetric.AES``, ``Asymmetric.RSA`` ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import UnsupportedAlgorithmError, UnsupportedOperationError
from .provider import ensure_provider_registered


@dataclass(frozen=True)
class AlgorithmVariant:
    """
    Immutable identity of one named algorithm within a family.

    Attributes:
        name: Catalog name, upper case (e.g. ``"AES"``, ``"HMACSHA256"``).
        family: Owning family name.
        requires_external_provider: Needs the external provider registered.
        sign_only: Asymmetric variant without encrypt/decrypt support.
        default_sign_algorithm: Signature scheme used when none is given.
        default_secret_algorithm: Symmetric algorithm fed by a DH secret.
        key_size: Default key size; bytes for secret keys, bits for pairs.
    """

    name: str
    family: str
    requires_external_provider: bool = False
    sign_only: bool = False
    default_sign_algorithm: str | None = None
    default_secret_algorithm: str | None = None
    key_size: int | None = None


@dataclass(frozen=True)
class KeyPair:
    """Base64 DER public key (SubjectPublicKeyInfo) and private key (PKCS#8)."""

    public_key: str
    private_key: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.public_key, self.private_key))


@dataclass(frozen=True)
class DHPartyKeyPairs:
    """Key pairs of both Diffie-Hellman parties; B shares A's domain parameters."""

    party_a: KeyPair
    party_b: KeyPair

    def __iter__(self) -> Iterator[KeyPair]:
        return iter((self.party_a, self.party_b))


@dataclass(frozen=True)
class PBEResult:
    """Base64 salt and hex ciphertext; both are needed to decrypt."""

    salt: str
    ciphertext: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.salt, self.ciphertext))


class Algorithm:
    """A variant bound to its family's operations."""

    family = ""

    def __init__(self, variant: AlgorithmVariant):
        self.variant = variant

    @property
    def name(self) -> str:
        return self.variant.name

    def _prepare(self) -> None:
        if self.variant.requires_external_provider:
            ensure_provider_registered()

    def _reject(self, operation: str):
        raise UnsupportedOperationError(
            f"{self.name} does not support {operation}"
        )

    def __repr__(self) -> str:
        return f"<{self.family}.{self.name}>"


class Catalog:
    """
    Closed, case-insensitive catalog of one family's algorithms.

    Usage:
        Symmetric.AES
        Symmetric.get("aes")
        "DES" in Symmetric
    """

    def __init__(self, family: str, algorithms: Iterable[Algorithm]):
        self._family  = family
        self._entries = {a.name.upper(): a for a in algorithms}

    def get(self, name: str) -> Algorithm:
        try:
            return self._entries[name.upper()]
        except (KeyError, AttributeError):
            raise UnsupportedAlgorithmError(
                f"Unknown {self._family} algorithm: {name!r}. "
                f"Available: {self.names()}"
            ) from None

    def names(self) -> list[str]:
        return list(self._entries)

    def __getattr__(self, name: str) -> Algorithm:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._entries[name.upper()]
        except KeyError:
            raise AttributeError(
                f"{self._family} has no algorithm {name!r}"
            ) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._entries

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<Catalog {self._family}: {', '.join(self.names())}>"

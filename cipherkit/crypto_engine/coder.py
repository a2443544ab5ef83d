"""
Base64 codec used to carry keys and salts through string interfaces.
"""

import base64
import binascii

from ..config.settings import Settings
from .base import Algorithm, AlgorithmVariant, Catalog
from .errors import DecodingError


class Base64Coder(Algorithm):
    """Standard-alphabet Base64 with padding; whitespace ignored on decode."""

    family = "Coder"

    def encode(self, data: str | bytes) -> str:
        if isinstance(data, str):
            data = data.encode(Settings.TEXT_ENCODING)
        return base64.b64encode(data).decode("ascii")

    def decode_bytes(self, text: str) -> bytes:
        if not isinstance(text, str):
            raise DecodingError(
                f"Base64 input must be str, got {type(text).__name__}"
            )
        # legacy encoders wrap lines at 76 characters
        compact = "".join(text.split())
        try:
            return base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodingError(f"Malformed Base64 input: {exc}") from exc

    def decode(self, text: str) -> str:
        data = self.decode_bytes(text)
        try:
            return data.decode(Settings.TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            raise DecodingError(
                "Base64 payload is not valid UTF-8 text"
            ) from exc


BASE64 = Base64Coder(AlgorithmVariant("BASE64", "Coder"))

Coder = Catalog("Coder", [BASE64])

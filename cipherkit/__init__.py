"""
CipherKit — named cryptographic algorithm families with text-in/text-out
operations.

    from cipherkit import Symmetric

    key = Symmetric.AES.generate_key()
    ct  = Symmetric.AES.encrypt("hello", key)
    assert Symmetric.AES.decrypt(ct, key) == "hello"
"""

from .config.settings import Settings
from .crypto_engine import *  # noqa: F401,F403
from .crypto_engine import __all__ as _engine_all

__version__ = Settings.APP_VERSION

__all__ = ["Settings", "__version__", *_engine_all]

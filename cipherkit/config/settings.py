import os


class Settings:
    """Centralised library configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "CipherKit"
    APP_VERSION = "1.0.0"

    # ── text framing ─────────────────────────────────────────────
    TEXT_ENCODING = "utf-8"
    # Reproduce the legacy digest rendering that drops leading zero
    # nibbles (signed big-integer to hex) instead of fixed-width hex.
    HEX_STRIP_LEADING_ZEROS = False

    # ── crypto defaults ──────────────────────────────────────────
    ASYMMETRIC_KEY_SIZE = 1024   # bits, RSA / DSA
    RSA_PUBLIC_EXPONENT = 65537
    DH_KEY_SIZE         = 1024   # bits
    ECC_CURVE           = "SECP256R1"
    PBE_SALT_SIZE       = 8      # bytes, fixed by PKCS#5 v1.5
    PBE_ITERATIONS      = 100
    GCM_NONCE_SIZE      = 12

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL = os.environ.get("CIPHERKIT_LOG_LEVEL", "INFO")

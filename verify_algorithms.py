"""
CipherKit — Algorithm Verification Script

Run this to verify every catalogued algorithm works correctly:
    python verify_algorithms.py
"""

import logging
import time

from cipherkit import (
    Asymmetric,
    CipherFactory,
    CipherKitError,
    EllipticCurve,
    HMAC,
    KeyAgreement,
    Oneway,
    PBE,
    Settings,
    Symmetric,
    UnsupportedAlgorithmError,
)


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, Settings.LOG_LEVEL.upper(), logging.INFO),
        format="[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def tamper(hex_text: str) -> str:
    """Flip one byte in the middle of a hex ciphertext."""
    data = bytearray.fromhex(hex_text)
    data[len(data) // 2] ^= 0xFF
    return data.hex()


def main():
    setup_logging()
    print("╔══════════════════════════════════════════════════╗")
    print("║     CipherKit — Algorithm Verification Suite     ║")
    print("╚══════════════════════════════════════════════════╝")
    print()

    test_messages = [
        "Hello, World!",
        "",                                     # empty
        "\x00" * 100,                            # null characters
        "Grüße, 世界",                            # multi-byte UTF-8
        "A" * 10_000,                            # 10 KB
    ]
    all_pass = True

    # ── Test 1: Digests ──────────────────────────────────────────
    print("━━━ Test 1: One-way Digests ━━━━━━━━━━━━━━━━━━━━━━━")
    for alg in Oneway:
        digest = alg.encrypt("abc")
        ok = digest == alg.encrypt("abc") and len(digest) == alg.digest_size * 2
        all_pass &= ok
        print(f"  {'✅' if ok else '❌'} {alg.name:<20s}  {digest[:32]}…")
    for alg in HMAC:
        key = alg.generate_key()
        mac = alg.encrypt("abc", key)
        ok = alg.verify("abc", key, mac) and not alg.verify("abd", key, mac)
        all_pass &= ok
        print(f"  {'✅' if ok else '❌'} {alg.name:<20s}  {mac[:32]}…")
    print()

    # ── Test 2: Symmetric round-trip ─────────────────────────────
    print("━━━ Test 2: Encrypt → Decrypt Round-Trip ━━━━━━━━━━")
    for alg in Symmetric:
        try:
            key = alg.generate_key()
        except UnsupportedAlgorithmError:
            print(f"  ➖ {alg.name:<20s}  no provider implementation")
            continue
        ok = True
        for msg in test_messages:
            try:
                if alg.decrypt(alg.encrypt(msg, key), key) != msg:
                    ok = False
                    break
            except CipherKitError as exc:
                print(f"  ❌ {alg.name:<20s} ERROR: {exc}")
                ok = False
                break
        all_pass &= ok
        info = Symmetric.get_info(alg.name)
        print(
            f"  {'✅' if ok else '❌'} {alg.name:<20s}  "
            f"key={info['key_bits']:>3d}bit  "
            f"{info['category']:<12s} {info['security']}"
        )
    print()

    # ── Test 3: Wrong key rejection ──────────────────────────────
    print("━━━ Test 3: Wrong Key Rejection ━━━━━━━━━━━━━━━━━━━")
    for alg in Symmetric:
        if not CipherFactory.is_available(alg.name):
            continue
        key1, key2 = alg.generate_key(), alg.generate_key()
        ct = alg.encrypt("Secret message", key1)
        try:
            recovered = alg.decrypt(ct, key2)
        except CipherKitError:
            recovered = None
        if recovered == "Secret message":
            print(f"  ⚠️  {alg.name:<20s}  Decrypted with wrong key!")
            all_pass = False
        else:
            print(f"  ✅ {alg.name:<20s}  Wrong key rejected")
    print()

    # ── Test 4: Password-based encryption ────────────────────────
    print("━━━ Test 4: Password-Based Encryption ━━━━━━━━━━━━━")
    for alg in PBE:
        salt, ct = alg.encrypt("PBE message", "correct horse")
        ok = alg.decrypt(ct, "correct horse", salt) == "PBE message"
        all_pass &= ok
        print(f"  {'✅' if ok else '❌'} {alg.name:<20s}  salt={salt}")
    print()

    # ── Test 5: Public-key families ──────────────────────────────
    print("━━━ Test 5: Public-Key Families ━━━━━━━━━━━━━━━━━━━")
    t0 = time.perf_counter()
    rsa_pub, rsa_priv = Asymmetric.RSA.generate_key_pair()
    ok = Asymmetric.RSA.decrypt(
        Asymmetric.RSA.encrypt("RSA message", rsa_pub), rsa_priv
    ) == "RSA message"
    sig = Asymmetric.RSA.sign("RSA message", rsa_priv)
    ok &= Asymmetric.RSA.verify("RSA message", rsa_pub, sig)
    ok &= not Asymmetric.RSA.verify("RSA massage", rsa_pub, sig)
    all_pass &= ok
    print(f"  {'✅' if ok else '❌'} {'RSA':<20s}  encrypt + sign")

    dsa_pub, dsa_priv = Asymmetric.DSA.generate_key_pair()
    sig = Asymmetric.DSA.sign("DSA message", dsa_priv)
    ok = Asymmetric.DSA.verify("DSA message", dsa_pub, sig)
    all_pass &= ok
    print(f"  {'✅' if ok else '❌'} {'DSA':<20s}  sign only")

    party_a, party_b = KeyAgreement.DH.generate_key_pairs()
    ct = KeyAgreement.DH.encrypt("DH message",
                                 party_b.public_key, party_a.private_key)
    ok = KeyAgreement.DH.decrypt(ct, party_a.public_key,
                                 party_b.private_key) == "DH message"
    all_pass &= ok
    print(f"  {'✅' if ok else '❌'} {'DH':<20s}  secret → DES")

    ec_pub, ec_priv = EllipticCurve.EC.generate_key_pair()
    ct = EllipticCurve.EC.encrypt("EC message", ec_pub)
    ok = EllipticCurve.EC.decrypt(ct, ec_priv) == "EC message"
    try:
        EllipticCurve.EC.decrypt(tamper(ct), ec_priv)
        ok = False
    except CipherKitError:
        pass
    all_pass &= ok
    print(f"  {'✅' if ok else '❌'} {'EC':<20s}  ECIES + tamper check")
    print(f"  elapsed: {(time.perf_counter() - t0) * 1000:.1f}ms")
    print()

    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    if all_pass:
        print("  Result:               🎉 ALL TESTS PASSED")
    else:
        print("  Result:               ⚠️  SOME TESTS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    raise SystemExit(main())

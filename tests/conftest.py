"""Shared fixtures: key pairs are slow to generate, so build them once."""

import pytest

from cipherkit import Asymmetric, EllipticCurve, KeyAgreement


@pytest.fixture(scope="module")
def rsa_key_pair():
    return Asymmetric.RSA.generate_key_pair()


@pytest.fixture(scope="module")
def dsa_key_pair():
    return Asymmetric.DSA.generate_key_pair()


@pytest.fixture(scope="module")
def dh_key_pairs():
    return KeyAgreement.DH.generate_key_pairs()


@pytest.fixture(scope="module")
def ec_key_pair():
    return EllipticCurve.EC.generate_key_pair()

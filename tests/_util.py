from os.path import dirname, realpath
from pathlib import Path
import itertools
import unittest

import pytest

from cryptography.exceptions import UnsupportedAlgorithm, _Reasons
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

tests_dir = dirname(realpath(__file__))


def _support(filename):
    base = Path(tests_dir)
    top = base / filename
    deeper = base / "_support" / filename
    return str(deeper if deeper.exists() else top)


def _read(filename):
    with open(_support(filename), "rb") as fd:
        return fd.read()


slow = pytest.mark.slow


def counting_randbytes(start=0):
    """
    Deterministic stand-in for ``os.urandom``: successive calls return
    consecutive byte values, so tests can predict salts and check values.
    """
    counter = itertools.count(start)

    def randbytes(n):
        return bytes(next(counter) & 0xFF for _ in range(n))

    return randbytes


def sha1_signing_unsupported():
    """
    This is used to skip tests in environments where SHA-1 signing is
    not supported by the backend.
    """
    private_key = rsa.generate_private_key(
        public_exponent=65537, key_size=2048
    )
    message = b"Some dummy text"
    try:
        private_key.sign(
            message,
            padding.PSS(
                mgf=padding.MGF1(hashes.SHA1()),
                salt_length=padding.PSS.MAX_LENGTH,
            ),
            hashes.SHA1(),
        )
        return False
    except UnsupportedAlgorithm as e:
        return e._reason is _Reasons.UNSUPPORTED_HASH


requires_sha1_signing = unittest.skipIf(
    sha1_signing_unsupported(), "SHA-1 signing not supported"
)

import logging
import os

import pytest

from sshkeys import (
    DSSKey,
    ECDSAKey,
    Ed25519Key,
    RSAKey,
    parse_encrypted_raw_private_key,
)

from ._util import _read, counting_randbytes


# Perform logging by default; pytest will capture and thus hide it normally,
# presenting it on error/failure. (But also allow turning it off when doing
# very pinpoint debugging - e.g. using breakpoints, so you don't want output
# hiding enabled, but also don't want all the logging to gum up the terminal.)
if not os.environ.get("DISABLE_LOGGING", False):
    logging.basicConfig(
        level=logging.DEBUG,
        # Also make sure to set up timestamping for more sanity when debugging.
        format="[%(relativeCreated)s]\t%(levelname)s:%(name)s:%(message)s",
        datefmt="%H:%M:%S",
    )


ED25519_SEED = bytes(range(32))


@pytest.fixture(scope="session")
def rsa_key():
    key = parse_encrypted_raw_private_key(_read("rsa.key"))
    assert isinstance(key, RSAKey)
    return key


@pytest.fixture(scope="session")
def dss_key():
    key = parse_encrypted_raw_private_key(_read("dss.key"))
    assert isinstance(key, DSSKey)
    return key


@pytest.fixture(scope="session")
def ecdsa_key():
    key = parse_encrypted_raw_private_key(_read("ecdsa-256.key"))
    assert isinstance(key, ECDSAKey)
    return key


@pytest.fixture(scope="session")
def ed25519_key():
    return Ed25519Key.from_seed(ED25519_SEED)


@pytest.fixture(
    params=["rsa", "ed25519"], ids=lambda x: x
)
def openssh_key(request):
    """
    Yield each key type that ``openssh-key-v1`` files can hold.
    """
    return request.getfixturevalue("{}_key".format(request.param))


@pytest.fixture(
    params=["rsa", "dss", "ecdsa"], ids=lambda x: x
)
def pem_key(request):
    """
    Yield each key type that classic PEM files can hold.
    """
    return request.getfixturevalue("{}_key".format(request.param))


@pytest.fixture
def randbytes():
    return counting_randbytes()

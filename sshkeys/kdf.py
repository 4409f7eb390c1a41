# This file is part of sshkeys.
#
# sshkeys is free software; you can redistribute it and/or modify it under the
# terms of the GNU Lesser General Public License as published by the Free
# Software Foundation; either version 2.1 of the License, or (at your option)
# any later version.
#
# sshkeys is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with sshkeys; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301 USA.

"""
bcrypt_pbkdf, the password-based key derivation used by OpenSSH to protect
``openssh-key-v1`` private keys.

The construction (OpenBSD ``bcrypt_pbkdf(3)``):

* ``sha2pass = SHA512(password)``
* for each 32-byte output block ``n`` (counting from 1), hash
  ``salt || uint32_be(n)`` with SHA-512, feed both digests through the
  bcrypt core hash, then repeat ``rounds - 1`` times on the SHA-512 of the
  previous output, XOR-ing every round into the block's accumulator
* interleave the blocks byte by byte, so byte ``i`` of block ``n`` lands at
  ``i * num_blocks + (n - 1)``, and truncate to the requested length

pyca/bcrypt ships that exact construction but stops at 512 bytes of
output. Longer requests run the same loop here, with the bcrypt core hash
built on PyCryptodome's expensive-key-schedule Blowfish.
"""

from hashlib import sha512
import struct

import bcrypt
from Cryptodome.Cipher import _EKSBlowfish

from sshkeys.common import (
    KDF_BACKEND_MAX_KEY_LENGTH,
    KDF_MAX_KEY_LENGTH,
    KDF_MAX_SALT_SIZE,
)
from sshkeys.ssh_exception import (
    EmptyPassword,
    InvalidSaltLength,
    KDFError,
    KeyLengthTooLarge,
    RoundsTooSmall,
)
from sshkeys.util import b

_BCRYPT_HASH_MAGIC = b"OxychromaticBlowfishSwatDynamite"
_BCRYPT_HASH_SIZE = len(_BCRYPT_HASH_MAGIC)
# 2**6 = 64 key expansions per core hash
_BCRYPT_HASH_COST = 6


def _bcrypt_hash(sha2pass, sha2salt):
    # expand over the salt first, then the key
    cipher = _EKSBlowfish.new(
        sha2pass, _EKSBlowfish.MODE_ECB, sha2salt, _BCRYPT_HASH_COST, False
    )
    data = _BCRYPT_HASH_MAGIC
    for _ in range(64):
        data = cipher.encrypt(data)
    # the result is stored as little-endian 32-bit words
    return b"".join(data[i : i + 4][::-1] for i in range(0, len(data), 4))


def _bcrypt_pbkdf_blocks(password, salt, rounds, key_length):
    sha2pass = sha512(password).digest()
    stride = (key_length + _BCRYPT_HASH_SIZE - 1) // _BCRYPT_HASH_SIZE
    key = bytearray(key_length)
    for count in range(1, stride + 1):
        sha2salt = sha512(salt + struct.pack(">I", count)).digest()
        tmp = _bcrypt_hash(sha2pass, sha2salt)
        out = bytearray(tmp)
        for _ in range(rounds - 1):
            tmp = _bcrypt_hash(sha2pass, sha512(tmp).digest())
            for i in range(len(out)):
                out[i] ^= tmp[i]
        for i, value in enumerate(out):
            dest = i * stride + count - 1
            if dest >= key_length:
                break
            key[dest] = value
    return bytes(key)


def bcrypt_pbkdf(password, salt, rounds, key_length):
    """
    Derive ``key_length`` bytes from ``password`` and ``salt``.

    :param password: the passphrase, as `bytes` or `str` (UTF-8 encoded).
    :param bytes salt: 1 to 2**20 bytes of salt.
    :param int rounds: number of rounds, at least 1.
    :param int key_length: number of bytes wanted, 1 to 1024.
    :returns: `bytes` of length ``key_length``.

    :raises: `.EmptyPassword`, `.InvalidSaltLength`, `.RoundsTooSmall`,
        `.KeyLengthTooLarge`
    """
    if rounds < 1:
        raise RoundsTooSmall(
            "number of rounds is too small: {}".format(rounds)
        )
    if password is None or len(password) == 0:
        raise EmptyPassword("empty password")
    if len(salt) == 0 or len(salt) > KDF_MAX_SALT_SIZE:
        raise InvalidSaltLength("bad salt length: {}".format(len(salt)))
    if key_length > KDF_MAX_KEY_LENGTH:
        raise KeyLengthTooLarge(
            "key length {} is too large (max {})".format(
                key_length, KDF_MAX_KEY_LENGTH
            )
        )
    if key_length < 1:
        raise KDFError("key length must be positive: {}".format(key_length))
    if key_length > KDF_BACKEND_MAX_KEY_LENGTH:
        return _bcrypt_pbkdf_blocks(
            b(password), bytes(salt), rounds, key_length
        )
    return bcrypt.kdf(
        password=b(password),
        salt=bytes(salt),
        desired_key_bytes=key_length,
        rounds=rounds,
        # We can't control how many rounds are on disk, so no sense
        # warning about it.
        ignore_few_rounds=True,
    )

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
OpenSSH's own private key container, ``openssh-key-v1``, as described in
OpenSSH's ``PROTOCOL.key``::

    "openssh-key-v1" 0x00
    string  ciphername
    string  kdfname
    string  kdfoptions
    uint32  number of keys N (always 1 here)
    string  public key blob
    string  encrypted private key block

The private key block, once decrypted, is::

    uint32  checkint
    uint32  checkint
    string  key type
    ...     type-specific fields
    string  comment
    byte    padding 1, 2, 3, ...
"""

import os
from types import MappingProxyType

from sshkeys import util
from sshkeys.cipher import OPENSSH_CIPHERS
from sshkeys.common import (
    DEFAULT_CIPHER,
    DEFAULT_KDF_ROUNDS,
    OPENSSH_AUTH_MAGIC,
    OPENSSH_PEM_TYPE,
    SALT_SIZE,
)
from sshkeys.ed25519key import Ed25519Key
from sshkeys.kdf import bcrypt_pbkdf
from sshkeys.message import Message
from sshkeys.padding import check_padding, pad
from sshkeys.pem import PEMBlock
from sshkeys.rsakey import RSAKey
from sshkeys.ssh_exception import (
    IncorrectPassphrase,
    InvalidContainer,
    InvalidKey,
    PassphraseRequired,
    UnsupportedKeyType,
    WireFormatError,
)

_log = util.get_logger("sshkeys.opensshkey")

#: key classes by SSH key type, for the inner record
OPENSSH_KEY_TYPES = MappingProxyType(
    {cls.name: cls for cls in (RSAKey, Ed25519Key)}
)


class OpenSSHContainer:
    """
    The outer ``openssh-key-v1`` structure, before any decryption.
    """

    def __init__(
        self,
        cipher_name,
        kdf_name,
        kdf_options,
        public_blob,
        private_block,
        num_keys=1,
    ):
        self.cipher_name = cipher_name
        self.kdf_name = kdf_name
        self.kdf_options = kdf_options
        self.num_keys = num_keys
        self.public_blob = public_blob
        self.private_block = private_block

    def __repr__(self):
        return "OpenSSHContainer(cipher={!r}, kdf={!r})".format(
            self.cipher_name, self.kdf_name
        )

    def asbytes(self):
        m = Message()
        m.add_bytes(OPENSSH_AUTH_MAGIC)
        m.add_string(self.cipher_name)
        m.add_string(self.kdf_name)
        m.add_string(self.kdf_options)
        m.add_int(self.num_keys)
        m.add_string(self.public_blob)
        m.add_string(self.private_block)
        return m.asbytes()

    def __bytes__(self):
        return self.asbytes()

    @classmethod
    def from_bytes(cls, data):
        """
        Parse a container.

        :raises: `.InvalidContainer` -- on a bad magic, a key count other
            than one, or truncated or trailing data.
        """
        if data[: len(OPENSSH_AUTH_MAGIC)] != OPENSSH_AUTH_MAGIC:
            raise InvalidContainer("unexpected OpenSSH key header encountered")
        msg = Message(data[len(OPENSSH_AUTH_MAGIC) :])
        cipher_name = msg.get_text()
        kdf_name = msg.get_text()
        kdf_options = msg.get_binary()
        num_keys = msg.get_int()
        # Only single-key files exist in the wild.
        if num_keys != 1:
            raise InvalidContainer(
                "unsupported: private keyfile has {} keys".format(num_keys)
            )
        public_blob = msg.get_binary()
        private_block = msg.get_binary()
        if not msg.at_end():
            raise InvalidContainer("trailing data after private key block")
        return cls(
            cipher_name, kdf_name, kdf_options, public_blob, private_block
        )


def _encode_kdf_options(salt, rounds):
    return Message().add(salt, rounds).asbytes()


def _decode_kdf_options(data):
    msg = Message(data)
    salt = msg.get_binary()
    rounds = msg.get_int()
    if not msg.at_end():
        raise InvalidContainer("trailing data in kdf options")
    return salt, rounds


def encode_openssh_private_key(
    key,
    passphrase=None,
    comment="",
    cipher_name=DEFAULT_CIPHER,
    rounds=DEFAULT_KDF_ROUNDS,
    randbytes=None,
    ciphers=OPENSSH_CIPHERS,
):
    """
    Write ``key`` as an ``OPENSSH PRIVATE KEY`` PEM file and return its
    `bytes`.

    Without a passphrase the container uses the ``none`` cipher and KDF and
    the inner record is stored as is, unpadded. With one, a fresh salt is
    drawn from ``randbytes``, ``bcrypt_pbkdf`` derives the cipher key and
    IV, and the record is padded and encrypted with ``cipher_name``.

    :raises: `.UnsupportedKeyType` -- for key types with no
        ``openssh-key-v1`` layout.
    :raises: ``ValueError`` -- if ``cipher_name`` is not a known cipher.
    """
    if randbytes is None:
        randbytes = os.urandom

    fields = Message()
    fields.add_string(key.get_name())
    key._write_openssh_fields(fields)
    fields.add_string(comment)

    if passphrase:
        if ("bcrypt", cipher_name) not in ciphers:
            raise ValueError(
                "unsupported cipher {!r}, expected one of {}".format(
                    cipher_name, ", ".join(ciphers.names())
                )
            )
        cipher = ciphers.lookup("bcrypt", cipher_name)
        salt = randbytes(SALT_SIZE)
        kdf_options = _encode_kdf_options(salt, rounds)
    else:
        cipher = ciphers.lookup("none", "none")
        kdf_options = bytes()

    checkint = randbytes(4)
    inner = Message()
    inner.add_bytes(checkint)
    inner.add_bytes(checkint)
    inner.add_bytes(fields.asbytes())
    record = pad(inner.asbytes(), cipher.block_size)

    _log.debug(
        "writing %s key, cipher=%s kdf=%s rounds=%s",
        key.get_name(),
        cipher.name,
        cipher.kdf_name,
        rounds if kdf_options else None,
    )
    if not cipher.is_identity:
        key_iv = bcrypt_pbkdf(
            passphrase, salt, rounds, cipher.key_size + cipher.iv_size
        )
        record = cipher.encrypt(
            key_iv[: cipher.key_size], key_iv[cipher.key_size :], record
        )

    container = OpenSSHContainer(
        cipher.name, cipher.kdf_name, kdf_options, key.asbytes(), record
    )
    return PEMBlock(OPENSSH_PEM_TYPE, container.asbytes()).asbytes()


def _decrypt_private_block(container, cipher, passphrase):
    if cipher.is_identity:
        # kdfname of "none" must have an empty kdfoptions
        if container.kdf_options:
            raise InvalidContainer("kdf options given for unencrypted key")
        return container.private_block

    # Encrypted private key.
    # If no password was passed in, raise an exception pointing
    # out that we need one
    if not passphrase:
        raise PassphraseRequired("private key file is encrypted")
    salt, rounds = _decode_kdf_options(container.kdf_options)
    if len(container.private_block) % cipher.block_size:
        raise InvalidContainer(
            "private key block is not a multiple of the cipher block size"
        )
    _log.debug(
        "decrypting with cipher=%s kdf=%s rounds=%s",
        cipher.name,
        cipher.kdf_name,
        rounds,
    )
    key_iv = bcrypt_pbkdf(
        passphrase, salt, rounds, cipher.key_size + cipher.iv_size
    )
    return cipher.decrypt(
        key_iv[: cipher.key_size],
        key_iv[cipher.key_size :],
        container.private_block,
    )


def decode_openssh_private_key(
    block, passphrase=None, key_types=OPENSSH_KEY_TYPES,
    ciphers=OPENSSH_CIPHERS,
):
    """
    Rebuild the key held in an ``OPENSSH PRIVATE KEY`` `.PEMBlock`.

    :raises: `.IncorrectPassphrase` -- if the check values disagree after
        decryption (`.PassphraseRequired` when no passphrase was given).
    :raises: `.UnknownCipherOrKdf`, `.InvalidContainer`,
        `.UnsupportedKeyType`, `.InvalidPadding`, `.InvalidKey`
    """
    container = OpenSSHContainer.from_bytes(block.body)
    cipher = ciphers.lookup(container.kdf_name, container.cipher_name)
    encrypted = not cipher.is_identity
    msg = Message(_decrypt_private_block(container, cipher, passphrase))

    # Unpack private key and verify checkints
    try:
        check1 = msg.get_int()
        check2 = msg.get_int()
        key_type = msg.get_text()
    except WireFormatError as e:
        if encrypted:
            raise IncorrectPassphrase(
                "unable to decode decrypted private key"
            ) from e
        raise
    if check1 != check2:
        if encrypted:
            raise IncorrectPassphrase(
                "OpenSSH private key file checkints do not match"
            )
        raise InvalidContainer(
            "OpenSSH private key file checkints do not match"
        )
    try:
        key_class = key_types[key_type]
    except KeyError:
        raise UnsupportedKeyType(
            "unsupported key type {!r} in OpenSSH private key".format(
                key_type
            ),
            key_type=key_type,
        ) from None
    _log.debug("reading %s key", key_type)

    key = key_class._read_openssh_fields(msg)
    key.comment = msg.get_text()
    check_padding(msg.get_remainder())
    if not util.constant_time_bytes_eq(container.public_blob, key.asbytes()):
        raise InvalidKey("public key does not match private key")
    return key

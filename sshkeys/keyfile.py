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
Public entry points: write a key in either file format, and read one back.
"""

import os

from sshkeys import util
from sshkeys.common import (
    DEFAULT_CIPHER,
    DEFAULT_KDF_ROUNDS,
    FORMAT_CLASSIC_PEM,
    FORMAT_OPENSSH_V1,
    OPENSSH_PEM_TYPE,
)
from sshkeys.opensshkey import (
    decode_openssh_private_key,
    encode_openssh_private_key,
)
from sshkeys.pem import (
    PEMBlock,
    decode_pem_private_key,
    encode_pem_private_key,
)

_log = util.get_logger("sshkeys.keyfile")

_FORMAT_NAMES = {
    FORMAT_OPENSSH_V1: "openssh-key-v1",
    FORMAT_CLASSIC_PEM: "classic PEM",
}


class MarshalOptions:
    """
    How `marshal` should write a key.

    :param passphrase:
        `str` or `bytes` to encrypt the key with; empty or ``None`` writes
        the key unencrypted.
    :param int format: `.FORMAT_OPENSSH_V1` or `.FORMAT_CLASSIC_PEM`.
    :param str comment: stored alongside the key (``openssh-key-v1`` only).
    :param str cipher:
        ``"aes256-cbc"`` or ``"aes256-ctr"`` for encrypted
        ``openssh-key-v1`` output.
    :param int rounds: ``bcrypt_pbkdf`` rounds for ``openssh-key-v1``.
    :param randbytes:
        callable returning ``n`` cryptographically secure random bytes; it
        supplies salts, check values and IVs. Defaults to ``os.urandom``.
    """

    def __init__(
        self,
        passphrase=None,
        format=FORMAT_OPENSSH_V1,
        comment="",
        cipher=DEFAULT_CIPHER,
        rounds=DEFAULT_KDF_ROUNDS,
        randbytes=None,
    ):
        if format not in _FORMAT_NAMES:
            raise ValueError("unknown private key format {!r}".format(format))
        self.passphrase = passphrase
        self.format = format
        self.comment = comment
        self.cipher = cipher
        self.rounds = rounds
        self.randbytes = randbytes or os.urandom

    def __repr__(self):
        return "MarshalOptions(format={}, encrypted={})".format(
            _FORMAT_NAMES[self.format], self.encrypted
        )

    @property
    def encrypted(self):
        return bool(self.passphrase)


def marshal(key, options=None):
    """
    Serialize ``key`` (a `.PKey`) to the `bytes` of a private key file.

    :raises: `.UnsupportedKeyType` -- if ``key`` can't be written in the
        requested format (e.g. Ed25519 as classic PEM, or DSS/ECDSA as
        ``openssh-key-v1``).
    """
    if options is None:
        options = MarshalOptions()
    _log.debug(
        "marshalling %s key as %s (encrypted=%s)",
        key.get_name(),
        _FORMAT_NAMES.get(options.format, options.format),
        options.encrypted,
    )
    if options.format == FORMAT_CLASSIC_PEM:
        return encode_pem_private_key(
            key, passphrase=options.passphrase, randbytes=options.randbytes
        )
    elif options.format == FORMAT_OPENSSH_V1:
        return encode_openssh_private_key(
            key,
            passphrase=options.passphrase,
            comment=options.comment,
            cipher_name=options.cipher,
            rounds=options.rounds,
            randbytes=options.randbytes,
        )
    raise ValueError("unknown private key format {!r}".format(options.format))


def parse_encrypted_raw_private_key(data, passphrase=None):
    """
    Read a private key file in either format and return its `.PKey`.

    :param data: the file contents, as `bytes` or `str`.
    :param passphrase: needed only if the file is encrypted.

    :raises: `.IncorrectPassphrase` -- the key is encrypted and
        ``passphrase`` is wrong (or, as `.PassphraseRequired`, missing).
    :raises: `.UnsupportedKeyType` -- for PEM block types or key types
        with no decoder.
    :raises: `.InvalidContainer`, `.UnknownCipherOrKdf`,
        `.InvalidPadding`, `.InvalidKey`
    """
    block = PEMBlock.from_bytes(data)
    _log.debug("parsing %s block", block.type)
    if block.type == OPENSSH_PEM_TYPE:
        return decode_openssh_private_key(block, passphrase)
    return decode_pem_private_key(block, passphrase)


def parse_encrypted_private_key(data, passphrase=None):
    """
    Like `parse_encrypted_raw_private_key`, but also makes sure the key's
    numbers produce a working signer before returning it.
    """
    key = parse_encrypted_raw_private_key(data, passphrase)
    key.signer()
    return key

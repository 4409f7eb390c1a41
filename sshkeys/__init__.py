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

# flake8: noqa
from sshkeys._version import __version__, __version_info__
from sshkeys.common import FORMAT_CLASSIC_PEM, FORMAT_OPENSSH_V1
from sshkeys.ssh_exception import (
    EmptyPassword,
    FormatNotSupported,
    IncorrectPassphrase,
    InvalidContainer,
    InvalidKey,
    InvalidKeyLength,
    InvalidPadding,
    InvalidPEMBlock,
    InvalidSaltLength,
    KDFError,
    KeyLengthTooLarge,
    PassphraseRequired,
    RoundsTooSmall,
    SSHKeyError,
    UnknownCipherOrKdf,
    UnsupportedKeyType,
    WireFormatError,
)
from sshkeys.message import Message
from sshkeys.kdf import bcrypt_pbkdf
from sshkeys.pkey import PKey
from sshkeys.rsakey import RSAKey
from sshkeys.dsskey import DSSKey
from sshkeys.ecdsakey import ECDSAKey
from sshkeys.ed25519key import Ed25519Key
from sshkeys.keyfile import (
    MarshalOptions,
    marshal,
    parse_encrypted_private_key,
    parse_encrypted_raw_private_key,
)


key_classes = [DSSKey, RSAKey, Ed25519Key, ECDSAKey]


__license__ = "GNU Lesser General Public License (LGPL)"

__all__ = [
    "DSSKey",
    "ECDSAKey",
    "Ed25519Key",
    "EmptyPassword",
    "FORMAT_CLASSIC_PEM",
    "FORMAT_OPENSSH_V1",
    "FormatNotSupported",
    "IncorrectPassphrase",
    "InvalidContainer",
    "InvalidKey",
    "InvalidKeyLength",
    "InvalidPadding",
    "InvalidPEMBlock",
    "InvalidSaltLength",
    "KDFError",
    "KeyLengthTooLarge",
    "MarshalOptions",
    "Message",
    "PassphraseRequired",
    "PKey",
    "RSAKey",
    "RoundsTooSmall",
    "SSHKeyError",
    "UnknownCipherOrKdf",
    "UnsupportedKeyType",
    "WireFormatError",
    "bcrypt_pbkdf",
    "marshal",
    "parse_encrypted_private_key",
    "parse_encrypted_raw_private_key",
]

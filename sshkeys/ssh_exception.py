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
Exceptions raised while encoding or decoding private key files.
"""


class SSHKeyError(Exception):
    """
    Base class for every failure raised by this package.
    """

    pass


class IncorrectPassphrase(SSHKeyError):
    """
    The passphrase given does not decrypt the private key.

    For OpenSSH containers this is reliable (the check values disagree). For
    legacy PEM files it is a best guess: the cipher has no integrity check,
    so garbage structure after decryption is reported here too.
    """

    pass


class PassphraseRequired(IncorrectPassphrase):
    """
    An encrypted private key was decoded without any passphrase.
    """

    pass


class UnsupportedKeyType(SSHKeyError):
    """
    No adapter exists for this key type in the requested format.
    """

    def __init__(self, message, key_type=None):
        SSHKeyError.__init__(self, message)
        self.key_type = key_type


class FormatNotSupported(UnsupportedKeyType):
    """
    The key type is known, but cannot be written in the requested format
    (e.g. Ed25519 keys as classic PEM).
    """

    pass


class UnknownCipherOrKdf(SSHKeyError):
    """
    An OpenSSH container names a cipher/KDF pair we don't know.
    """

    def __init__(self, cipher_name, kdf_name):
        SSHKeyError.__init__(self, cipher_name, kdf_name)
        self.cipher_name = cipher_name
        self.kdf_name = kdf_name

    def __str__(self):
        return "unknown cipher/kdf: {}:{}".format(
            self.cipher_name, self.kdf_name
        )


class InvalidContainer(SSHKeyError):
    """
    The outer structure is malformed: bad magic, more than one key, or
    broken wire encoding.
    """

    pass


class WireFormatError(InvalidContainer):
    """
    SSH wire data was truncated or had bytes left over.
    """

    pass


class InvalidPEMBlock(InvalidContainer):
    """
    No usable PEM block: missing armor, bad base64 or bad encryption headers.
    """

    pass


class InvalidPadding(SSHKeyError):
    """
    The padding after the inner key record is not 1, 2, 3, ...
    """

    pass


class InvalidKey(SSHKeyError):
    """
    Key numbers were decoded but do not form a usable key.
    """

    pass


class InvalidKeyLength(InvalidKey):
    """
    A fixed-size key field has the wrong length.
    """

    pass


class KDFError(SSHKeyError):
    """
    Base class for bcrypt_pbkdf input validation failures.
    """

    pass


class EmptyPassword(KDFError):
    pass


class InvalidSaltLength(KDFError):
    pass


class RoundsTooSmall(KDFError):
    pass


class KeyLengthTooLarge(KDFError):
    pass

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
Symmetric ciphers protecting private key bodies.

Two immutable tables are built at import time and handed to the codecs by
reference: `OPENSSH_CIPHERS`, keyed by the ``(kdfname, ciphername)`` pair
found in an ``openssh-key-v1`` container, and `PEM_CIPHERS`, keyed by the
algorithm named in a legacy PEM ``DEK-Info`` header.  Supporting a new
cipher means adding a row, not a branch.
"""

from types import MappingProxyType

from cryptography.hazmat.primitives.ciphers import algorithms, modes, Cipher

from sshkeys.ssh_exception import UnknownCipherOrKdf

# TripleDES is moving from `cryptography.hazmat.primitives.ciphers.algorithms`
# in cryptography>=43.0.0 to `cryptography.hazmat.decrepit.ciphers.algorithms`
# It will be removed from `cryptography.hazmat.primitives.ciphers.algorithms`
# in cryptography==48.0.0.
try:
    from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
except ImportError:
    from cryptography.hazmat.primitives.ciphers.algorithms import TripleDES


class CipherSpec:
    """
    One named cipher: its key and block sizes plus how to run it.

    A `CipherSpec` without an ``algorithm`` is the identity cipher
    (``"none"``), whose block size is 1 so that nothing ever needs padding.
    """

    def __init__(
        self, name, kdf_name, key_size=0, block_size=1, algorithm=None,
        mode=None,
    ):
        self.name = name
        self.kdf_name = kdf_name
        self.key_size = key_size
        self.block_size = block_size
        self.algorithm = algorithm
        self.mode = mode

    def __repr__(self):
        return "CipherSpec({!r}, kdf={!r})".format(self.name, self.kdf_name)

    @property
    def iv_size(self):
        if self.algorithm is None:
            return 0
        return self.block_size

    @property
    def is_identity(self):
        return self.algorithm is None

    def _cipher(self, key, iv):
        return Cipher(self.algorithm(key), self.mode(iv))

    def encrypt(self, key, iv, data):
        if self.is_identity:
            return data
        encryptor = self._cipher(key, iv).encryptor()
        return encryptor.update(data) + encryptor.finalize()

    def decrypt(self, key, iv, data):
        if self.is_identity:
            return data
        decryptor = self._cipher(key, iv).decryptor()
        return decryptor.update(data) + decryptor.finalize()


class CipherTable:
    """
    Read-only lookup of `CipherSpec` rows by ``(kdf_name, cipher_name)``.
    """

    def __init__(self, specs):
        self._specs = MappingProxyType(
            {(entry.kdf_name, entry.name): entry for entry in specs}
        )

    def __contains__(self, pair):
        return pair in self._specs

    def __iter__(self):
        return iter(self._specs.values())

    def lookup(self, kdf_name, cipher_name):
        """
        Return the `CipherSpec` for a container's cipher/KDF pair.

        :raises: `.UnknownCipherOrKdf` -- if the pair is not in the table.
        """
        try:
            return self._specs[(kdf_name, cipher_name)]
        except KeyError:
            raise UnknownCipherOrKdf(cipher_name, kdf_name) from None

    def names(self):
        return sorted(entry.name for entry in self if not entry.is_identity)


OPENSSH_CIPHERS = CipherTable(
    [
        CipherSpec("none", "none"),
        CipherSpec(
            "aes256-cbc",
            "bcrypt",
            key_size=32,
            block_size=16,
            algorithm=algorithms.AES,
            mode=modes.CBC,
        ),
        CipherSpec(
            "aes256-ctr",
            "bcrypt",
            key_size=32,
            block_size=16,
            algorithm=algorithms.AES,
            mode=modes.CTR,
        ),
    ]
)

# known encryption types for legacy PEM private key files; the key is always
# derived with MD5 (see `.util.generate_key_bytes`)
PEM_CIPHERS = MappingProxyType(
    {
        entry.name: entry
        for entry in (
            CipherSpec(
                "AES-128-CBC", "md5", 16, 16, algorithms.AES, modes.CBC
            ),
            CipherSpec(
                "AES-192-CBC", "md5", 24, 16, algorithms.AES, modes.CBC
            ),
            CipherSpec(
                "AES-256-CBC", "md5", 32, 16, algorithms.AES, modes.CBC
            ),
            CipherSpec("DES-EDE3-CBC", "md5", 24, 8, TripleDES, modes.CBC),
        )
    }
)

PEM_DEFAULT_CIPHER = "AES-128-CBC"

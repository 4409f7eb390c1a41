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

import nacl.signing
from nacl.exceptions import BadSignatureError

from sshkeys.message import Message
from sshkeys.pkey import PKey
from sshkeys.ssh_exception import (
    FormatNotSupported,
    InvalidKey,
    InvalidKeyLength,
)
from sshkeys.util import constant_time_bytes_eq


class Ed25519Key(PKey):
    """
    Representation of an `Ed25519 <https://ed25519.cr.yp.to/>`_ key.

    ``public`` is the 32-byte public point and ``private`` the 64-byte
    concatenation of the seed and the public point, as OpenSSH stores it.

    .. note::
        Ed25519 keys only exist in ``openssh-key-v1`` files; there is no
        classic PEM layout for them.
    """

    name = "ssh-ed25519"

    def __init__(self, public, private, comment=""):
        self.public = bytes(public)
        self.private = bytes(private)
        self.comment = comment

    @classmethod
    def from_seed(cls, seed, comment=""):
        """
        Build the key belonging to a 32-byte seed.
        """
        if len(seed) != 32:
            raise InvalidKeyLength(
                "ed25519 seed must be 32 bytes, got {}".format(len(seed))
            )
        public = bytes(nacl.signing.SigningKey(bytes(seed)).verify_key)
        return cls(public, bytes(seed) + public, comment=comment)

    @property
    def _fields(self):
        return (self.get_name(), self.public, self.private)

    def validate(self):
        if len(self.public) != 32:
            raise InvalidKeyLength(
                "ed25519 public key must be 32 bytes, got {}".format(
                    len(self.public)
                )
            )
        if len(self.private) != 64:
            raise InvalidKeyLength(
                "ed25519 private key must be 64 bytes, got {}".format(
                    len(self.private)
                )
            )
        # The second half of the private key is yet another copy of the
        # public key, and both must match what the seed derives.
        derived = bytes(self.signer().verify_key)
        if not (
            constant_time_bytes_eq(self.private[32:], self.public)
            and constant_time_bytes_eq(derived, self.public)
        ):
            raise InvalidKey("ed25519 public key does not match private key")

    def asbytes(self):
        m = Message()
        m.add_string(self.name)
        m.add_string(self.public)
        return m.asbytes()

    def get_bits(self):
        return 256

    def signer(self):
        return nacl.signing.SigningKey(self.private[:32])

    def sign_ssh_data(self, data, algorithm=None):
        return self._signature(self.name, self.signer().sign(data).signature)

    def verify_ssh_sig(self, data, msg):
        if msg.get_text() != self.name:
            return False
        try:
            nacl.signing.VerifyKey(self.public).verify(data, msg.get_binary())
        except (BadSignatureError, ValueError):
            return False
        else:
            return True

    def _write_openssh_fields(self, msg):
        msg.add_string(self.public)
        msg.add_string(self.private)

    @classmethod
    def _read_openssh_fields(cls, msg):
        key = cls(public=msg.get_binary(), private=msg.get_binary())
        key.validate()
        return key

    def _to_der(self):
        raise FormatNotSupported(
            "ed25519 keys must use OpenSSHv1", key_type=self.name
        )

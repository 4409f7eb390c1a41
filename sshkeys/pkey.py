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
Common API for all private keys.
"""

from base64 import encodebytes
from hashlib import sha256

from sshkeys.message import Message
from sshkeys.ssh_exception import FormatNotSupported, UnsupportedKeyType
from sshkeys.util import u


class PKey:
    """
    Base class for private keys.

    Every supported algorithm is one subclass holding that algorithm's
    numbers.  Besides signing, each subclass knows how to lay its numbers
    out for the two key file formats:

    * ``_write_openssh_fields`` / ``_read_openssh_fields`` for the
      ``openssh-key-v1`` inner record;
    * ``_to_der`` / ``_from_der`` for the body of a classic PEM file.

    The base implementations refuse, so a subclass only opts into the
    formats it can actually represent.
    """

    #: SSH key type, e.g. ``"ssh-rsa"``.
    name = None
    #: PEM label for classic PEM files, or ``None`` if not representable.
    pem_type = None

    comment = ""

    def __repr__(self):
        extra = f", comment={self.comment!r}" if self.comment else ""
        return "PKey(alg={}, bits={}, fp={}{})".format(
            self.algorithm_name, self.get_bits(), self.fingerprint, extra
        )

    def asbytes(self):
        """
        The SSH public key blob for this key (key type, then the public
        numbers), as written in ``authorized_keys`` and in the header of an
        ``openssh-key-v1`` file.
        """
        return bytes()

    def __bytes__(self):
        return self.asbytes()

    def __eq__(self, other):
        return isinstance(other, PKey) and self._fields == other._fields

    def __hash__(self):
        return hash(self._fields)

    @property
    def _fields(self):
        raise NotImplementedError

    def get_name(self):
        """
        SSH key type of this key as a `str`, e.g. ``"ssh-ed25519"``.
        """
        return self.name

    @property
    def algorithm_name(self):
        """
        Short upper-case algorithm label (``"RSA"``, ``"ED25519"``...).
        """
        label = self.get_name().replace("ssh-", "")
        return label.split("-")[0].upper()

    def get_bits(self):
        raise NotImplementedError

    @property
    def fingerprint(self):
        """
        ``SHA256:<unpadded base64>`` of the public blob, as printed by
        ``ssh-keygen -l``.
        """
        digest = sha256(self.asbytes())
        # OpenSSH drops the base64 padding
        encoded = u(encodebytes(digest.digest())).strip().rstrip("=")
        return "{}:{}".format(digest.name.upper(), encoded)

    def get_base64(self):
        """
        The public blob in base64, on one line.
        """
        return u(encodebytes(self.asbytes())).replace("\n", "")

    def signer(self):
        """
        Return the backend private key object used to sign with this key.

        :raises: `.InvalidKey` -- if the numbers don't form a usable key.
        """
        raise NotImplementedError

    def sign_ssh_data(self, data, algorithm=None):
        """
        Sign ``data`` and return the SSH signature encoding (signature
        algorithm name, then the raw signature) as a `.Message`.

        :param bytes data: the data to sign.
        :param str algorithm:
            signature algorithm name; only RSA keys offer a choice
            (``"rsa-sha2-256"`` etc.). ``None`` means the key type's default.
        """
        raise NotImplementedError

    def verify_ssh_sig(self, data, msg):
        """
        Check an SSH signature `.Message` over ``data``.

        :return: `bool`; a wrong algorithm name is simply ``False``.
        """
        raise NotImplementedError

    # key file adapters

    def _write_openssh_fields(self, msg):
        raise UnsupportedKeyType(
            "{} keys are not supported in openssh-key-v1 files".format(
                self.get_name()
            ),
            key_type=self.get_name(),
        )

    @classmethod
    def _read_openssh_fields(cls, msg):
        raise UnsupportedKeyType(
            "{} keys are not supported in openssh-key-v1 files".format(
                cls.name
            ),
            key_type=cls.name,
        )

    def _to_der(self):
        raise FormatNotSupported(
            "{} keys cannot be written as classic PEM".format(self.get_name()),
            key_type=self.get_name(),
        )

    @classmethod
    def _from_der(cls, data):
        raise FormatNotSupported(
            "{} keys cannot be read from classic PEM".format(cls.name),
            key_type=cls.name,
        )

    @staticmethod
    def _signature(key_type, blob):
        m = Message()
        m.add_string(key_type)
        m.add_string(blob)
        return m

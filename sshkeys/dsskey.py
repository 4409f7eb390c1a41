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
DSS keys.
"""

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import dsa
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from sshkeys import util
from sshkeys.ber import BER, BERException
from sshkeys.common import zero_byte
from sshkeys.message import Message
from sshkeys.pkey import PKey
from sshkeys.ssh_exception import InvalidKey


class DSSKey(PKey):
    """
    Representation of a DSS key which can be used to sign an verify SSH2
    data.

    DSS keys have no ``openssh-key-v1`` adapter here; they are read and
    written as classic ``DSA PRIVATE KEY`` PEM files only.
    """

    name = "ssh-dss"
    pem_type = "DSA PRIVATE KEY"

    def __init__(self, p, q, g, y, x, comment=""):
        self.p = p
        self.q = q
        self.g = g
        self.y = y
        self.x = x
        self.comment = comment
        self._key = None

    @classmethod
    def from_key_object(cls, key, comment=""):
        numbers = key.private_numbers()
        pub = numbers.public_numbers
        params = pub.parameter_numbers
        obj = cls(
            p=params.p,
            q=params.q,
            g=params.g,
            y=pub.y,
            x=numbers.x,
            comment=comment,
        )
        obj._key = key
        return obj

    @property
    def _fields(self):
        return (self.get_name(), self.p, self.q, self.g, self.y, self.x)

    def validate(self):
        if not (1 < self.g < self.p) or not (0 < self.x < self.q):
            raise InvalidKey("invalid DSS parameters")
        if pow(self.g, self.x, self.p) != self.y:
            raise InvalidKey("DSS public value does not match private value")

    def asbytes(self):
        m = Message()
        m.add_string(self.name)
        m.add_mpint(self.p)
        m.add_mpint(self.q)
        m.add_mpint(self.g)
        m.add_mpint(self.y)
        return m.asbytes()

    def get_bits(self):
        return self.p.bit_length()

    def signer(self):
        if self._key is None:
            numbers = dsa.DSAPrivateNumbers(
                x=self.x,
                public_numbers=dsa.DSAPublicNumbers(
                    y=self.y,
                    parameter_numbers=dsa.DSAParameterNumbers(
                        p=self.p, q=self.q, g=self.g
                    ),
                ),
            )
            try:
                self._key = numbers.private_key()
            except (ValueError, UnsupportedAlgorithm) as e:
                raise InvalidKey(str(e)) from e
        return self._key

    def sign_ssh_data(self, data, algorithm=None):
        sig = self.signer().sign(data, hashes.SHA1())
        r, s = decode_dss_signature(sig)

        # apparently, in rare cases, r or s may be shorter than 20 bytes!
        rstr = util.deflate_long(r, 0)
        sstr = util.deflate_long(s, 0)
        if len(rstr) < 20:
            rstr = zero_byte * (20 - len(rstr)) + rstr
        if len(sstr) < 20:
            sstr = zero_byte * (20 - len(sstr)) + sstr
        return self._signature(self.name, rstr + sstr)

    def verify_ssh_sig(self, data, msg):
        if msg.get_text() != self.name:
            return False
        sig = msg.get_binary()
        if len(sig) != 40:
            return False

        # pull out (r, s) which are NOT encoded as mpints
        sigR = util.inflate_long(sig[:20], 1)
        sigS = util.inflate_long(sig[20:], 1)
        signature = encode_dss_signature(sigR, sigS)
        try:
            self.signer().public_key().verify(signature, data, hashes.SHA1())
        except InvalidSignature:
            return False
        else:
            return True

    def _to_der(self):
        keylist = [0, self.p, self.q, self.g, self.y, self.x]
        try:
            b = BER()
            b.encode(keylist)
        except BERException as e:
            raise InvalidKey("unable to create DSS key: {}".format(e)) from e
        return b.asbytes()

    @classmethod
    def _from_der(cls, data):
        # private key file contains:
        # DSAPrivateKey = { version = 0, p, q, g, y, x }
        try:
            keylist = BER(data).decode()
        except BERException as e:
            raise InvalidKey("Unable to parse key file: {}".format(e)) from e
        if (
            type(keylist) is not list
            or len(keylist) < 6
            or not all(isinstance(v, int) for v in keylist[:6])
            or keylist[0] != 0
        ):
            raise InvalidKey(
                "not a valid DSA private key file (bad ber encoding)"
            )
        key = cls(*keylist[1:6])
        key.validate()
        return key

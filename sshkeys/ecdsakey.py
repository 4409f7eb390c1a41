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
ECDSA keys
"""

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from sshkeys.common import four_byte
from sshkeys.message import Message
from sshkeys.pkey import PKey
from sshkeys.ssh_exception import InvalidKey, UnsupportedKeyType


class _ECDSACurve:
    """
    Represents a specific ECDSA Curve (nistp256, nistp384, etc).

    Handles the generation of the key format identifier and the selection of
    the proper hash function. Also grabs the proper curve from the
    ``cryptography`` package.
    """

    def __init__(self, curve_class, nist_name):
        self.nist_name = nist_name
        self.key_length = curve_class.key_size

        # Defined in RFC 5656 6.2
        self.key_format_identifier = "ecdsa-sha2-" + self.nist_name

        # Defined in RFC 5656 6.2.1
        if self.key_length <= 256:
            self.hash_object = hashes.SHA256
        elif self.key_length <= 384:
            self.hash_object = hashes.SHA384
        else:
            self.hash_object = hashes.SHA512

        self.curve_class = curve_class

    @property
    def point_size(self):
        return (self.key_length + 7) // 8


class _ECDSACurveSet:
    """
    A collection to hold the ECDSA curves. Allows querying by NIST name, by
    key format identifier and by the ``cryptography`` curve name.
    """

    def __init__(self, ecdsa_curves):
        self.ecdsa_curves = ecdsa_curves

    def get_key_format_identifier_list(self):
        return [curve.key_format_identifier for curve in self.ecdsa_curves]

    def get_by_nist_name(self, nist_name):
        for curve in self.ecdsa_curves:
            if curve.nist_name == nist_name:
                return curve

    def get_by_curve_class(self, curve_class):
        for curve in self.ecdsa_curves:
            if curve.curve_class == curve_class:
                return curve

    def get_by_curve_name(self, curve_name):
        for curve in self.ecdsa_curves:
            if curve.curve_class.name == curve_name:
                return curve


class ECDSAKey(PKey):
    """
    Representation of an ECDSA key which can be used to sign and verify SSH2
    data.

    Like DSS keys, ECDSA keys are only read and written as classic
    ``EC PRIVATE KEY`` PEM files.
    """

    _ECDSA_CURVES = _ECDSACurveSet(
        [
            _ECDSACurve(ec.SECP256R1, "nistp256"),
            _ECDSACurve(ec.SECP384R1, "nistp384"),
            _ECDSACurve(ec.SECP521R1, "nistp521"),
        ]
    )

    pem_type = "EC PRIVATE KEY"

    def __init__(self, curve_name, private_value, x, y, comment=""):
        self.ecdsa_curve = self._ECDSA_CURVES.get_by_nist_name(curve_name)
        if self.ecdsa_curve is None:
            raise UnsupportedKeyType(
                "Can't handle curve of type {}".format(curve_name),
                key_type=curve_name,
            )
        self.curve_name = curve_name
        self.private_value = private_value
        self.x = x
        self.y = y
        self.comment = comment
        self._key = None

    @classmethod
    def from_key_object(cls, key, comment=""):
        curve = cls._ECDSA_CURVES.get_by_curve_name(key.curve.name)
        if curve is None:
            raise UnsupportedKeyType(
                "Can't handle curve of type {}".format(key.curve.name),
                key_type=key.curve.name,
            )
        numbers = key.private_numbers()
        obj = cls(
            curve_name=curve.nist_name,
            private_value=numbers.private_value,
            x=numbers.public_numbers.x,
            y=numbers.public_numbers.y,
            comment=comment,
        )
        obj._key = key
        return obj

    @classmethod
    def supported_key_format_identifiers(cls):
        return cls._ECDSA_CURVES.get_key_format_identifier_list()

    @property
    def name(self):
        return self.ecdsa_curve.key_format_identifier

    @property
    def _fields(self):
        return (self.get_name(), self.private_value, self.x, self.y)

    def validate(self):
        """
        Check that the public point is the one the private value derives.

        :raises: `.InvalidKey`
        """
        try:
            derived = ec.derive_private_key(
                self.private_value, self.ecdsa_curve.curve_class()
            ).public_key().public_numbers()
        except (ValueError, TypeError) as e:
            raise InvalidKey(str(e)) from e
        if (derived.x, derived.y) != (self.x, self.y):
            raise InvalidKey("EC public point does not match private value")

    def asbytes(self):
        size = self.ecdsa_curve.point_size
        point = (
            four_byte
            + self.x.to_bytes(size, "big")
            + self.y.to_bytes(size, "big")
        )
        m = Message()
        m.add_string(self.ecdsa_curve.key_format_identifier)
        m.add_string(self.ecdsa_curve.nist_name)
        m.add_string(point)
        return m.asbytes()

    def get_bits(self):
        return self.ecdsa_curve.key_length

    def signer(self):
        if self._key is None:
            numbers = ec.EllipticCurvePrivateNumbers(
                private_value=self.private_value,
                public_numbers=ec.EllipticCurvePublicNumbers(
                    x=self.x, y=self.y, curve=self.ecdsa_curve.curve_class()
                ),
            )
            try:
                self._key = numbers.private_key()
            except (ValueError, UnsupportedAlgorithm) as e:
                raise InvalidKey(str(e)) from e
        return self._key

    def sign_ssh_data(self, data, algorithm=None):
        ecdsa = ec.ECDSA(self.ecdsa_curve.hash_object())
        sig = self.signer().sign(data, ecdsa)
        r, s = decode_dss_signature(sig)

        m = Message()
        m.add_mpint(r)
        m.add_mpint(s)
        return self._signature(self.name, m.asbytes())

    def verify_ssh_sig(self, data, msg):
        if msg.get_text() != self.ecdsa_curve.key_format_identifier:
            return False
        sig = Message(msg.get_binary())
        sigR, sigS = sig.get_mpint(), sig.get_mpint()
        signature = encode_dss_signature(sigR, sigS)

        try:
            self.signer().public_key().verify(
                signature, data, ec.ECDSA(self.ecdsa_curve.hash_object())
            )
        except InvalidSignature:
            return False
        else:
            return True

    def _to_der(self):
        return self.signer().private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )

    @classmethod
    def _from_der(cls, data):
        try:
            key = serialization.load_der_private_key(data, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise InvalidKey(str(e)) from e
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise InvalidKey("not an EC private key")
        return cls.from_key_object(key)

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
RSA keys.
"""

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa, padding

from sshkeys.message import Message
from sshkeys.pkey import PKey
from sshkeys.ssh_exception import InvalidKey


class RSAKey(PKey):
    """
    Representation of an RSA private key which can be used to sign and
    verify SSH2 data.

    The numbers are kept in OpenSSH's order: modulus ``n``, public exponent
    ``e``, private exponent ``d``, CRT coefficient ``iqmp`` (``q^-1 mod p``)
    and the primes ``p`` and ``q``.
    """

    name = "ssh-rsa"
    pem_type = "RSA PRIVATE KEY"

    HASHES = {
        "ssh-rsa": hashes.SHA1,
        "rsa-sha2-256": hashes.SHA256,
        "rsa-sha2-512": hashes.SHA512,
    }

    def __init__(self, n, e, d, iqmp, p, q, comment=""):
        self.n = n
        self.e = e
        self.d = d
        self.iqmp = iqmp
        self.p = p
        self.q = q
        self.comment = comment
        self._key = None

    @classmethod
    def from_key_object(cls, key, comment=""):
        """
        Build an `RSAKey` from a ``cryptography`` RSA private key.
        """
        numbers = key.private_numbers()
        pub = numbers.public_numbers
        obj = cls(
            n=pub.n,
            e=pub.e,
            d=numbers.d,
            iqmp=numbers.iqmp,
            p=numbers.p,
            q=numbers.q,
            comment=comment,
        )
        obj._key = key
        return obj

    @property
    def _fields(self):
        return (self.get_name(), self.e, self.n, self.d, self.p, self.q)

    def validate(self):
        """
        Check that the numbers describe a consistent RSA key: ``n == p * q``
        and ``d`` inverts ``e`` modulo ``p - 1`` and ``q - 1``.

        :raises: `.InvalidKey`
        """
        if self.e < 3 or not self.e & 1:
            raise InvalidKey("invalid RSA public exponent")
        for prime in (self.p, self.q):
            if prime <= 1:
                raise InvalidKey("invalid RSA prime")
        if self.p * self.q != self.n:
            raise InvalidKey("invalid RSA modulus: n != p * q")
        for prime in (self.p, self.q):
            if (self.d * self.e) % (prime - 1) != 1:
                raise InvalidKey("invalid RSA exponents")

    def asbytes(self):
        m = Message()
        m.add_string(self.name)
        m.add_mpint(self.e)
        m.add_mpint(self.n)
        return m.asbytes()

    def get_bits(self):
        return self.n.bit_length()

    def signer(self):
        if self._key is None:
            numbers = rsa.RSAPrivateNumbers(
                p=self.p,
                q=self.q,
                d=self.d,
                dmp1=rsa.rsa_crt_dmp1(self.d, self.p),
                dmq1=rsa.rsa_crt_dmq1(self.d, self.q),
                iqmp=self.iqmp,
                public_numbers=rsa.RSAPublicNumbers(e=self.e, n=self.n),
            )
            try:
                self._key = numbers.private_key()
            except (ValueError, UnsupportedAlgorithm) as e:
                raise InvalidKey(str(e)) from e
        return self._key

    def sign_ssh_data(self, data, algorithm=None):
        if algorithm is None:
            algorithm = self.name
        sig = self.signer().sign(
            data,
            padding=padding.PKCS1v15(),
            # HASHES being just a map from ['ssh-rsa', 'rsa-sha2-256', ...]
            # to cryptography hash classes.
            algorithm=self.HASHES[algorithm](),
        )
        return self._signature(algorithm, sig)

    def verify_ssh_sig(self, data, msg):
        sig_algorithm = msg.get_text()
        if sig_algorithm not in self.HASHES:
            return False
        try:
            self.signer().public_key().verify(
                msg.get_binary(),
                data,
                padding.PKCS1v15(),
                self.HASHES[sig_algorithm](),
            )
        except InvalidSignature:
            return False
        else:
            return True

    # key file adapters

    def _write_openssh_fields(self, msg):
        msg.add_mpint(self.n)
        msg.add_mpint(self.e)
        msg.add_mpint(self.d)
        msg.add_mpint(self.iqmp)
        msg.add_mpint(self.p)
        msg.add_mpint(self.q)

    @classmethod
    def _read_openssh_fields(cls, msg):
        n = msg.get_mpint()
        e = msg.get_mpint()
        d = msg.get_mpint()
        iqmp = msg.get_mpint()
        p = msg.get_mpint()
        q = msg.get_mpint()
        key = cls(n=n, e=e, d=d, iqmp=iqmp, p=p, q=q)
        key.validate()
        return key

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
        if not isinstance(key, rsa.RSAPrivateKey):
            raise InvalidKey("not an RSA private key")
        obj = cls.from_key_object(key)
        obj.validate()
        return obj

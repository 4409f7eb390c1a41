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
Implementation of the SSH wire encoding used inside key files.
"""

import struct
from io import BytesIO

from sshkeys import util
from sshkeys.ssh_exception import WireFormatError
from sshkeys.util import u


class Message:
    """
    An SSH2 message is a stream of bytes that encodes some combination of
    strings, integers, bools, and infinite-precision integers.  This class
    builds or breaks down such a byte stream.

    Unlike a network packet, a key file is never padded out by a peer, so
    reading past the end of the data is an error (`.WireFormatError`) rather
    than a run of zero bytes.
    """

    def __init__(self, content=None):
        """
        Create a new SSH2 message.

        :param bytes content:
            the byte stream to use as the message content (passed in only when
            decomposing a message).
        """
        if content is not None:
            self.packet = BytesIO(content)
        else:
            self.packet = BytesIO()

    def __bytes__(self):
        return self.asbytes()

    def __repr__(self):
        """
        Returns a string representation of this object, for debugging.
        """
        return "sshkeys.Message(" + repr(self.packet.getvalue()) + ")"

    __str__ = __repr__

    def asbytes(self):
        """
        Return the byte stream content of this Message, as a `bytes`.
        """
        return self.packet.getvalue()

    def rewind(self):
        """
        Rewind the message to the beginning as if no items had been parsed
        out of it yet.
        """
        self.packet.seek(0)

    def get_remainder(self):
        """
        Return the `bytes` of this message that haven't already been parsed
        and returned.
        """
        position = self.packet.tell()
        remainder = self.packet.read()
        self.packet.seek(position)
        return remainder

    def at_end(self):
        return self.packet.tell() == len(self.packet.getvalue())

    def get_bytes(self, n):
        """
        Return the next ``n`` bytes of the message.

        :raises: `.WireFormatError` -- if fewer than ``n`` bytes remain.
        """
        b = self.packet.read(n)
        if len(b) < n:
            raise WireFormatError(
                "truncated data: wanted {} bytes, got {}".format(n, len(b))
            )
        return b

    def get_int(self):
        """
        Fetch a 32-bit unsigned int from the stream.
        """
        return struct.unpack(">I", self.get_bytes(4))[0]

    def get_mpint(self):
        """
        Fetch a long int (mpint) from the stream.
        """
        return util.inflate_long(self.get_binary())

    def get_string(self):
        """
        Fetch a length-prefixed `bytes` from the stream.
        """
        return self.get_bytes(self.get_int())

    def get_text(self):
        """
        Fetch a UTF-8 string from the stream.
        """
        data = self.get_string()
        try:
            return u(data)
        except UnicodeDecodeError as e:
            raise WireFormatError("invalid text field: {}".format(e)) from e

    def get_binary(self):
        """
        Alias for `get_string`, for readability at call sites that expect
        binary data.
        """
        return self.get_string()

    def add_bytes(self, b):
        """
        Write bytes to the stream, without any formatting.
        """
        self.packet.write(b)
        return self

    def add_int(self, n):
        """
        Add a 32-bit unsigned int to the stream.
        """
        self.packet.write(struct.pack(">I", n))
        return self

    def add_mpint(self, z):
        """
        Add a long int to the stream, encoded as an infinite-precision
        integer.  This method only works on positive numbers.
        """
        self.add_string(util.deflate_long(z))
        return self

    def add_string(self, s):
        """
        Add a bytestring (or text, encoded as UTF-8) to the stream.
        """
        s = util.b(s)
        self.add_int(len(s))
        self.packet.write(s)
        return self

    def _add(self, i):
        if type(i) is bool:
            raise TypeError("booleans have no place in key files")
        elif isinstance(i, int):
            if i > 0xFFFFFFFF or i < 0:
                return self.add_mpint(i)
            return self.add_int(i)
        elif isinstance(i, (str, bytes)):
            return self.add_string(i)
        else:
            raise TypeError("Unknown type {!r}".format(type(i)))

    def add(self, *seq):
        """
        Add a sequence of items to the stream.  The values are encoded based
        on their type: bytes or str, int.  Ints above 32 bits become mpints.

        :param seq: the sequence of items
        """
        for item in seq:
            self._add(item)
        return self

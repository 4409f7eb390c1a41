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
Deterministic padding of the inner key record: bytes 1, 2, 3, ... up to the
next cipher block boundary.
"""

from sshkeys.ssh_exception import InvalidPadding


def padding_length(length, block_size):
    if block_size <= 1:
        return 0
    return -length % block_size


def pad(data, block_size):
    """
    Extend ``data`` to a multiple of ``block_size`` with ``1, 2, 3, ...``.
    A block size of 1 (no cipher) adds nothing.
    """
    return data + bytes(range(1, padding_length(len(data), block_size) + 1))


def check_padding(padding):
    """
    Verify that ``padding`` reads ``1, 2, 3, ...`` from left to right.

    :raises: `.InvalidPadding`
    """
    for i, value in enumerate(padding):
        if value != i + 1:
            raise InvalidPadding("padding not as expected")

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
Common constants and global variables.
"""

import logging

DEBUG = logging.DEBUG

zero_byte = b"\x00"
four_byte = b"\x04"
max_byte = b"\xff"

# output formats for private keys
FORMAT_OPENSSH_V1 = 1
FORMAT_CLASSIC_PEM = 2

# PROTOCOL.key container
OPENSSH_AUTH_MAGIC = b"openssh-key-v1" + zero_byte
OPENSSH_PEM_TYPE = "OPENSSH PRIVATE KEY"
DEFAULT_KDF_ROUNDS = 16
DEFAULT_CIPHER = "aes256-cbc"
SALT_SIZE = 16

# bcrypt_pbkdf input limits
KDF_MAX_SALT_SIZE = 1 << 20
KDF_MAX_KEY_LENGTH = 1024
# longest output pyca/bcrypt produces; kdf.py derives longer keys itself
KDF_BACKEND_MAX_KEY_LENGTH = 512

PEM_LINE_WIDTH = 64

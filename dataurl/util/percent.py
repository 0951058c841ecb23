# -*- coding: utf-8 -*-
#
# dataurl, RFC 2397 data URL parsing and serialization
#
# Copyright (C) 2024-2025 Philipp Wolfer
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.

"""Percent encoding of raw bytes.

Unlike `urllib.parse.quote` these helpers also escape ``+``, so base64
payloads never get mistaken for form encoded spaces.
"""

import re
import string

from dataurl.config import DataURLConfig
from dataurl.errors import (
    ErrorKind,
    ParseError,
)
from dataurl.util.scanner import Scanner


_UNRESERVED = frozenset(
    (string.ascii_letters + string.digits + DataURLConfig.UNRESERVED_CHARS).encode('ascii')
)

_re_plain = re.compile(r'[^%]+')
_re_escape = re.compile(r'%([0-9A-Fa-f]{2})')


def escape(data: bytes | str) -> str:
    """Percent-escape every byte of ``data`` outside the unreserved set.

    Strings are encoded as UTF-8 first. Escapes use uppercase hex digits.
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return ''.join(chr(byte) if byte in _UNRESERVED else f'%{byte:02X}' for byte in data)


def unescape(text: str) -> bytes:
    """Decode ``%XX`` escapes in ``text`` and return the resulting bytes.

    Raises
    ------
    ParseError
        If a ``%`` is not followed by two hexadecimal digits. The error
        position points at the offending ``%``.
    """
    buffer = bytearray()
    scanner = Scanner(text)
    while not scanner.eos():
        match = scanner.scan(_re_plain)
        if match:
            buffer += match.group().encode('utf-8')
            continue
        match = scanner.scan(_re_escape)
        if match:
            buffer.append(int(match.group(1), 16))
            continue
        raise ParseError(ErrorKind.MALFORMED_PERCENT_ESCAPE, scanner.pos, text)
    return bytes(buffer)

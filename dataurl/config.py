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


class DataURLConfig:
    """Constants shared by the parser, serializer and command line.

    Attributes
    ----------
    SCHEME
        Literal prefix every data URL starts with.
    BASE64_MARKER
        Header marker selecting base64 payload encoding.
    UNRESERVED_CHARS
        Characters the percent codec never escapes besides ASCII letters
        and digits.
    REPR_MAX_CHARS
        Maximum number of characters of the serialized URL shown by ``repr()``.
    LOG_FORMAT
        Format used for log records written to stderr by the command line.
    """

    SCHEME: str = 'data:'
    BASE64_MARKER: str = ';base64'
    UNRESERVED_CHARS: str = "-_.!~*'()"
    REPR_MAX_CHARS: int = 100
    LOG_FORMAT: str = '%(levelname)s: %(message)s'

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

from enum import Enum


class ErrorKind(Enum):
    MALFORMED_PREFIX = 'malformed prefix'
    INVALID_TOKEN = 'invalid token'
    MISSING_SEPARATOR = 'missing separator'
    INVALID_PAYLOAD = 'invalid payload'
    MALFORMED_PERCENT_ESCAPE = 'malformed percent escape'
    MALFORMED_BASE64 = 'malformed base64'


class DataURLError(ValueError):
    """Base error for data URL handling.

    Attributes
    ----------
    kind
        The `ErrorKind` describing what went wrong.
    position
        Offset into ``text`` where the failing rule was attempted.
    text
        The complete input that was being processed.
    """

    def __init__(self, kind: ErrorKind, position: int, text: str):
        self.kind = kind
        self.position = position
        self.text = text
        super().__init__(f"Cannot parse at position {position} in {text!r}: {kind.value}")


class ParseError(DataURLError):
    """Raised when the input does not follow the data URL grammar."""


class DecodeError(DataURLError):
    """Raised when a base64 marked payload is not valid base64."""

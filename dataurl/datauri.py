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

"""Parses and serializes data URLs as defined in RFC 2397.

See https://datatracker.ietf.org/doc/html/rfc2397
"""

from base64 import (
    b64decode,
    b64encode,
)
import binascii
from collections.abc import Mapping
from dataclasses import (
    dataclass,
    field,
)
import re
from types import MappingProxyType

from dataurl import log
from dataurl.config import DataURLConfig
from dataurl.errors import (
    DecodeError,
    ErrorKind,
    ParseError,
)
from dataurl.util.percent import (
    escape,
    unescape,
)
from dataurl.util.scanner import Scanner


# https://datatracker.ietf.org/doc/html/rfc2045#section-5.1
_re_rfc2045_token = re.compile(rb'[^\x00-\x20\x7f-\xff()<>@,;:\\"/\[\]?=]+')
_re_rfc2045_token_with_tspecials = re.compile(rb'[\x20-\x7e]+')

_re_mediatype = re.compile(r'([^;,/]+)/([^;,]+)')
_re_parameter = re.compile(r';([^=;,]+)=([^;,]+)')
_re_payload = re.compile(r'[\x20-\x7e]*')


@dataclass(frozen=True, repr=False, eq=False)
class DataURL:
    """A decoded data URL.

    Attributes
    ----------
    data
        The decoded payload.
    content_type
        ``type/subtype`` or None if the URL had no mediatype.
    parameters
        Read-only, ordered mapping of mediatype parameters.
    is_base64
        Whether the payload is base64 encoded in the textual form.
    """

    data: bytes
    content_type: str | None = None
    parameters: Mapping[str, str] = field(default_factory=dict)
    is_base64: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'data', memoryview(self.data).tobytes())
        object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters or {})))

    def _key(self):
        return (self.data, self.content_type, tuple(self.parameters.items()), self.is_base64)

    def __eq__(self, other):
        if not isinstance(other, DataURL):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    @classmethod
    def from_text(cls, text: str) -> 'DataURL':
        return parse(text)

    def to_text(self) -> str:
        return to_text(self)

    def __str__(self):
        return to_text(self)

    def __repr__(self):
        text = to_text(self)
        if len(text) > DataURLConfig.REPR_MAX_CHARS:
            text = text[:DataURLConfig.REPR_MAX_CHARS] + '...'
        return f'{self.__class__.__name__}({text!r})'


def parse(text: str) -> DataURL:
    """Parse ``text`` into a `DataURL`.

    Raises
    ------
    ParseError
        If ``text`` does not follow the data URL grammar.
    DecodeError
        If the payload is marked as base64 but cannot be decoded.
    """
    scanner = Scanner(text)
    if not scanner.scan_literal(DataURLConfig.SCHEME):
        raise ParseError(ErrorKind.MALFORMED_PREFIX, 0, text)

    content_type = None
    match = scanner.scan(_re_mediatype)
    if match:
        mediatype_type = _unescape_token(match, 1, _re_rfc2045_token)
        mediatype_subtype = _unescape_token(match, 2, _re_rfc2045_token)
        content_type = f'{mediatype_type}/{mediatype_subtype}'

    parameters = {}
    while True:
        match = scanner.scan(_re_parameter)
        if not match:
            break
        attribute = _unescape_token(match, 1, _re_rfc2045_token)
        # Re-assigning an attribute keeps its original position
        parameters[attribute] = _unescape_token(match, 2, _re_rfc2045_token_with_tspecials)

    is_base64 = scanner.scan_literal(DataURLConfig.BASE64_MARKER)

    if not scanner.scan_literal(','):
        raise ParseError(ErrorKind.MISSING_SEPARATOR, scanner.pos, text)

    match = scanner.scan(_re_payload)
    payload_start = match.start()
    payload = _unescape_at(text, match.group(), payload_start)
    if not scanner.eos():
        raise ParseError(ErrorKind.INVALID_PAYLOAD, scanner.pos, text)

    data = _decode_data(text, payload, payload_start) if is_base64 else payload
    log.debug(
        'Parsed data URL with content type %s, %d parameter(s), %d byte(s) of data',
        content_type,
        len(parameters),
        len(data),
    )
    return DataURL(data, content_type=content_type, parameters=parameters, is_base64=is_base64)


def to_text(url: DataURL) -> str:
    """Render ``url`` as a data URL string.

    The result always parses back to an equal `DataURL` as long as the
    content type and parameters follow the RFC 2045 token rules.
    """
    parts = [DataURLConfig.SCHEME]
    if url.content_type is not None:
        parts.append('/'.join(escape(s) for s in url.content_type.split('/', 1)))
    for attribute, value in url.parameters.items():
        parts.append(f';{escape(attribute)}={escape(value)}')
    if url.is_base64:
        parts.append(DataURLConfig.BASE64_MARKER + ',')
        parts.append(b64encode(url.data).decode('ascii'))
    else:
        parts.append(',')
        parts.append(escape(url.data))
    return ''.join(parts)


def _unescape_at(text: str, value: str, offset: int) -> bytes:
    try:
        return unescape(value)
    except ParseError as e:
        raise ParseError(e.kind, offset + e.position, text) from e


def _unescape_token(match: re.Match, group: int, token: re.Pattern) -> str:
    text = match.string
    start = match.start(group)
    value = _unescape_at(text, match.group(group), start)
    if not token.fullmatch(value):
        raise ParseError(ErrorKind.INVALID_TOKEN, start, text)
    return value.decode('ascii')


def _decode_data(text: str, payload: bytes, offset: int) -> bytes:
    # Missing "=" padding is tolerated
    payload += b'=' * (-len(payload) % 4)
    try:
        return b64decode(payload, validate=True)
    except binascii.Error as e:
        raise DecodeError(ErrorKind.MALFORMED_BASE64, offset, text) from e

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

from dataurl.datauri import (
    DataURL,
    parse,
    to_text,
)
from dataurl.errors import (
    DataURLError,
    DecodeError,
    ErrorKind,
    ParseError,
)
from dataurl.util.percent import (
    escape,
    unescape,
)


DATAURL_VERSION = (1, 0, 0, 'final', 0)
__version__ = '1.0.0'

__all__ = (
    'DataURL',
    'DataURLError',
    'DecodeError',
    'ErrorKind',
    'ParseError',
    'escape',
    'parse',
    'to_text',
    'unescape',
)

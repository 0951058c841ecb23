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

import logging
import sys

from dataurl.config import DataURLConfig


main_logger = logging.getLogger('dataurl')
main_logger.addHandler(logging.NullHandler())

debug = main_logger.debug
info = main_logger.info
error = main_logger.error


def setup_logging(debug_mode: bool = False, stream=None) -> logging.Handler:
    """Send log records of the package logger to ``stream`` (stderr by default).

    Returns the installed handler so callers can remove it again.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DataURLConfig.LOG_FORMAT))
    main_logger.addHandler(handler)
    main_logger.setLevel(logging.DEBUG if debug_mode else logging.WARNING)
    return handler

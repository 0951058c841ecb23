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

from __future__ import annotations

from collections.abc import Iterator
import logging

from dataurl import log

import pytest


@pytest.fixture(autouse=True)
def restore_main_logger() -> Iterator[None]:
    """Undo level and handler changes the command line makes to the package logger."""
    handlers = list(log.main_logger.handlers)
    level = log.main_logger.level
    yield
    for handler in list(log.main_logger.handlers):
        if handler not in handlers:
            log.main_logger.removeHandler(handler)
    log.main_logger.setLevel(level)


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger=log.main_logger.name)
    return caplog

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

import re


class Scanner:
    """Cursor over a string that only ever moves forward.

    Every successful match advances `pos` past the matched text; a failed
    match leaves the cursor where it was.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def scan(self, pattern: re.Pattern) -> re.Match | None:
        """Match ``pattern`` at the current position and advance past it."""
        match = pattern.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match

    def scan_literal(self, literal: str) -> bool:
        if not self.text.startswith(literal, self.pos):
            return False
        self.pos += len(literal)
        return True

    def eos(self) -> bool:
        return self.pos >= len(self.text)

    def __repr__(self):
        return f'{self.__class__.__name__}(pos={self.pos}, text={self.text!r})'

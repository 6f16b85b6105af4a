######################## BEGIN LICENSE BLOCK ########################
# The Original Code is Mozilla Universal charset detector code.
#
# The Initial Developer of the Original Code is
# Netscape Communications Corporation.
# Portions created by the Initial Developer are Copyright (C) 2001
# the Initial Developer. All Rights Reserved.
#
# Contributor(s):
#   Mark Pilgrim - port to Python
#   Shy Shalom - original C code
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <https://www.gnu.org/licenses/>.
######################### END LICENSE BLOCK #########################

from typing import Union

from .charsetprober import CharSetProber
from .enums import ProbingState


class UTF8Prober(CharSetProber):
    """
    Incremental UTF-8 validator.

    Multi-byte sequences may be split across chunks.  Overlong forms,
    UTF-16 surrogates and code points above U+10FFFF are invalid.
    """

    ONE_CHAR_PROB = 0.5

    def __init__(self) -> None:
        super().__init__()
        self._num_mb_chars = 0
        self._remaining = 0
        self._lower = 0x80
        self._upper = 0xBF
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._num_mb_chars = 0
        self._remaining = 0
        self._lower = 0x80
        self._upper = 0xBF

    @property
    def charset_name(self) -> str:
        return "UTF-8"

    @property
    def language(self) -> str:
        return ""

    def feed(self, byte_str: Union[bytes, bytearray]) -> ProbingState:
        if self.state != ProbingState.DETECTING:
            return self.state

        for c in byte_str:
            if self._remaining:
                if not self._lower <= c <= self._upper:
                    self._state = ProbingState.NOT_ME
                    break
                self._lower = 0x80
                self._upper = 0xBF
                self._remaining -= 1
                if not self._remaining:
                    self._num_mb_chars += 1
            elif c < 0x80:
                continue
            elif 0xC2 <= c <= 0xDF:
                self._remaining = 1
            elif 0xE0 <= c <= 0xEF:
                self._remaining = 2
                if c == 0xE0:
                    self._lower = 0xA0
                elif c == 0xED:
                    self._upper = 0x9F
            elif 0xF0 <= c <= 0xF4:
                self._remaining = 3
                if c == 0xF0:
                    self._lower = 0x90
                elif c == 0xF4:
                    self._upper = 0x8F
            else:
                # Continuation byte without a lead, 0xC0-0xC1 or 0xF5-0xFF
                self._state = ProbingState.NOT_ME
                break

        if self.state == ProbingState.DETECTING:
            if self.get_confidence() > self.SHORTCUT_THRESHOLD:
                self._state = ProbingState.FOUND_IT

        return self.state

    def get_confidence(self) -> float:
        unlike = 0.99
        if self._num_mb_chars < 6:
            unlike *= self.ONE_CHAR_PROB**self._num_mb_chars
            return 1.0 - unlike
        return unlike

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

from typing import Dict, List, Optional, Tuple, Union

from .charsetprober import CharSetProber
from .enums import LanguageFilter, ProbingState

ESC = 0x1B
TILDE = 0x7E

# Designator sequences (everything after ESC) and what they announce.
ISO2022JP_SEQUENCES = (b"$B", b"$@", b"(J", b"$(D")
ISO2022KR_SEQUENCES = (b"$)C",)
ISO2022CN_SEQUENCES = (b"$)A", b"$)G", b"$*H")

ESC_CHARSETS: Tuple[Tuple[str, str, LanguageFilter, Tuple[bytes, ...]], ...] = (
    (
        "ISO-2022-CN",
        "Chinese",
        LanguageFilter.CHINESE_SIMPLIFIED,
        ISO2022CN_SEQUENCES,
    ),
    ("ISO-2022-JP", "Japanese", LanguageFilter.JAPANESE, ISO2022JP_SEQUENCES),
    ("ISO-2022-KR", "Korean", LanguageFilter.KOREAN, ISO2022KR_SEQUENCES),
)

# HZ scanner states
HZ_OUT = 0
HZ_OUT_TILDE = 1
HZ_IN = 2
HZ_IN_TILDE = 3


class EscCharSetProber(CharSetProber):
    """
    This CharSetProber uses a "code scheme" approach for detecting encodings,
    whereby easily recognizable escape or shift sequences are relied on to
    identify these encodings.

    ISO-2022 variants are recognized by their designator sequences.  HZ-GB-2312
    is recognized by a ``~{ ... ~}`` region holding a non-empty, even-length
    run of GB2312 bytes (0x21-0x7E).  Every one of these encodings is 7-bit,
    so any high byte rules the whole family out.
    """

    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        super().__init__(lang_filter=lang_filter)
        self._sequences: Dict[bytes, Tuple[str, str]] = {}
        for charset_name, language, lang_flag, sequences in ESC_CHARSETS:
            if self.lang_filter & lang_flag:
                for sequence in sequences:
                    self._sequences[sequence] = (charset_name, language)
        self._prefixes = frozenset(
            sequence[:end]
            for sequence in self._sequences
            for end in range(1, len(sequence))
        )
        self._hz_enabled = bool(self.lang_filter & LanguageFilter.CHINESE_SIMPLIFIED)
        self._pending: List[int] = []
        self._in_escape = False
        self._hz_state = HZ_OUT
        self._hz_region_len = 0
        self._hz_region_ok = True
        self._detected_charset: Optional[str] = None
        self._detected_language: Optional[str] = None
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._pending = []
        self._in_escape = False
        self._hz_state = HZ_OUT
        self._hz_region_len = 0
        self._hz_region_ok = True
        self._detected_charset = None
        self._detected_language = None

    @property
    def charset_name(self) -> Optional[str]:
        return self._detected_charset

    @property
    def language(self) -> Optional[str]:
        return self._detected_language

    def get_confidence(self) -> float:
        return 0.99 if self._detected_charset else 0.00

    def feed(self, byte_str: Union[bytes, bytearray]) -> ProbingState:
        if self.state != ProbingState.DETECTING:
            return self.state

        for c in byte_str:
            if c & 0x80:
                self._state = ProbingState.NOT_ME
                self.logger.debug("high byte seen, no escape encoding applies")
                return self.state
            hz_found = self._hz_enabled and self._next_hz_byte(c)
            if self._next_escape_byte(c) or hz_found:
                self._state = ProbingState.FOUND_IT
                self.logger.debug("%s escape sequence found", self._detected_charset)
                return self.state

        return self.state

    def _next_escape_byte(self, c: int) -> bool:
        if c == ESC:
            self._in_escape = True
            self._pending = []
            return False
        if not self._in_escape:
            return False

        self._pending.append(c)
        sequence = bytes(self._pending)
        if sequence in self._sequences:
            self._detected_charset, self._detected_language = self._sequences[sequence]
            return True
        if sequence not in self._prefixes:
            self._in_escape = False
            self._pending = []
        return False

    def _next_hz_byte(self, c: int) -> bool:
        state = self._hz_state
        if state == HZ_OUT:
            if c == TILDE:
                self._hz_state = HZ_OUT_TILDE
        elif state == HZ_OUT_TILDE:
            if c == ord("{"):
                self._hz_state = HZ_IN
                self._hz_region_len = 0
                self._hz_region_ok = True
            else:
                # "~~" is a literal tilde, "~\n" a line continuation
                self._hz_state = HZ_OUT
        elif state == HZ_IN:
            if c == TILDE:
                self._hz_state = HZ_IN_TILDE
            else:
                self._add_hz_region_byte(c)
        else:
            if c == ord("}"):
                if (
                    self._hz_region_ok
                    and self._hz_region_len >= 2
                    and self._hz_region_len % 2 == 0
                ):
                    self._detected_charset = "HZ-GB-2312"
                    self._detected_language = "Chinese"
                    return True
                self._hz_state = HZ_OUT
            else:
                # The tilde was half of a GB2312 byte pair
                self._add_hz_region_byte(TILDE)
                if c == TILDE:
                    self._hz_state = HZ_IN_TILDE
                else:
                    self._add_hz_region_byte(c)
                    self._hz_state = HZ_IN
        return False

    def _add_hz_region_byte(self, c: int) -> None:
        self._hz_region_len += 1
        if not 0x21 <= c <= 0x7E:
            self._hz_region_ok = False

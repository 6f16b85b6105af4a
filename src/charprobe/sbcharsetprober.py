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

import functools
import string
from typing import FrozenSet, NamedTuple, Optional, Tuple, Union

from .charsetprober import CharSetProber
from .enums import ProbingState

ASCII_LETTERS = frozenset(string.ascii_letters.encode("ascii"))


class SingleByteCharSetModel(NamedTuple):
    charset_name: str
    language: str
    codec: str
    frequent_letters: FrozenSet[str]
    typical_frequent_ratio: float


@functools.lru_cache(maxsize=None)
def build_char_map(codec: str) -> Tuple[Optional[str], ...]:
    """Map every byte value to its character in *codec*, or ``None`` if undefined."""
    char_map = []
    for byte in range(256):
        try:
            char_map.append(bytes([byte]).decode(codec))
        except UnicodeDecodeError:
            char_map.append(None)
    return tuple(char_map)


class SingleByteCharSetProber(CharSetProber):
    """
    Prober for one (code page, language) pair.

    A byte that the code page leaves undefined rules it out.  Otherwise the
    prober measures how many of the high bytes decode to the language's most
    frequent letters.  A letter glued to an ASCII letter never counts, since
    in real text of a non-Latin script the high bytes form whole words.
    """

    SB_ENOUGH_REL_THRESHOLD = 1024
    POSITIVE_SHORTCUT_THRESHOLD = 0.95
    NEGATIVE_SHORTCUT_THRESHOLD = 0.05
    MINIMUM_DATA_THRESHOLD = 3
    SURE_YES = 0.99
    SURE_NO = 0.01

    def __init__(self, model: SingleByteCharSetModel) -> None:
        super().__init__()
        self._model = model
        self._char_map = build_char_map(model.codec)
        self._last_byte = 0x20
        self._total_chars = 0
        self._freq_chars = 0
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._last_byte = 0x20
        self._total_chars = 0
        self._freq_chars = 0

    @property
    def charset_name(self) -> str:
        return self._model.charset_name

    @property
    def language(self) -> str:
        return self._model.language

    def feed(self, byte_str: Union[bytes, bytearray]) -> ProbingState:
        if self.state != ProbingState.DETECTING:
            return self.state

        char_map = self._char_map
        frequent_letters = self._model.frequent_letters
        last_byte = self._last_byte
        for byte in byte_str:
            if byte >= 0x80:
                char = char_map[byte]
                if char is None:
                    self.logger.debug(
                        "%s has no character for byte 0x%02X", self.charset_name, byte
                    )
                    self._state = ProbingState.NOT_ME
                    return self.state
                self._total_chars += 1
                if char in frequent_letters and last_byte not in ASCII_LETTERS:
                    self._freq_chars += 1
            last_byte = byte
        self._last_byte = last_byte

        if self._total_chars > self.SB_ENOUGH_REL_THRESHOLD:
            confidence = self.get_confidence()
            if confidence > self.POSITIVE_SHORTCUT_THRESHOLD:
                self.logger.debug(
                    "%s confidence = %s, we have a winner", self.charset_name, confidence
                )
                self._state = ProbingState.FOUND_IT
            elif confidence < self.NEGATIVE_SHORTCUT_THRESHOLD:
                self.logger.debug(
                    "%s confidence = %s, below negative shortcut threshold %s",
                    self.charset_name,
                    confidence,
                    self.NEGATIVE_SHORTCUT_THRESHOLD,
                )
                self._state = ProbingState.NOT_ME

        return self.state

    def get_confidence(self) -> float:
        if self.state == ProbingState.NOT_ME:
            return self.SURE_NO
        if self._freq_chars <= self.MINIMUM_DATA_THRESHOLD:
            return self.SURE_NO
        ratio = self._freq_chars / self._total_chars
        return min(ratio / self._model.typical_frequent_ratio, self.SURE_YES)

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

import codecs
from typing import FrozenSet, NamedTuple, Union

from .charsetprober import CharSetProber
from .enums import LanguageFilter, ProbingState


class MultiByteCharSetModel(NamedTuple):
    charset_name: str
    language: str
    codec: str
    lang_filter: LanguageFilter
    frequent_chars: FrozenSet[str]
    typical_distribution_ratio: float


class MultiByteCharSetProber(CharSetProber):
    """
    Prober for one multi-byte CJK encoding.

    The bytes are run through a strict incremental decoder, so any sequence
    that is illegal in the encoding rules it out.  Decoded characters are then
    scored the way a character distribution analysis does: the ratio of
    characters from the language's most frequent set to all other non-ASCII
    characters, relative to the ratio typical for real text.
    """

    ENOUGH_DATA_THRESHOLD = 1024
    MINIMUM_DATA_THRESHOLD = 3
    SURE_YES = 0.99
    SURE_NO = 0.01

    def __init__(self, model: MultiByteCharSetModel) -> None:
        super().__init__(lang_filter=model.lang_filter)
        self._model = model
        self._decoder = codecs.getincrementaldecoder(model.codec)(errors="strict")
        self._total_chars = 0
        self._freq_chars = 0
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._decoder.reset()
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

        try:
            text = self._decoder.decode(bytes(byte_str))
        except UnicodeDecodeError as e:
            self.logger.debug(
                "%s %s prober hit error at byte %s",
                self.charset_name,
                self.language,
                e.start,
            )
            self._state = ProbingState.NOT_ME
            return self.state

        frequent_chars = self._model.frequent_chars
        for char in text:
            if char < "\x80":
                continue
            self._total_chars += 1
            if char in frequent_chars:
                self._freq_chars += 1

        if (
            self._total_chars > self.ENOUGH_DATA_THRESHOLD
            and self.get_confidence() > self.SHORTCUT_THRESHOLD
        ):
            self._state = ProbingState.FOUND_IT

        return self.state

    def get_confidence(self) -> float:
        if self.state == ProbingState.NOT_ME:
            return self.SURE_NO
        if self._total_chars <= 0 or self._freq_chars <= self.MINIMUM_DATA_THRESHOLD:
            return self.SURE_NO
        if self._total_chars != self._freq_chars:
            r = self._freq_chars / (
                (self._total_chars - self._freq_chars)
                * self._model.typical_distribution_ratio
            )
            if r < self.SURE_YES:
                return r
        return self.SURE_YES


def char_range(first: int, last: int) -> FrozenSet[str]:
    """Return the characters from *first* to *last*, inclusive."""
    return frozenset(chr(code_point) for code_point in range(first, last + 1))

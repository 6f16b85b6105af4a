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

import logging
from typing import Optional, Union

from .enums import LanguageFilter, ProbingState


class CharSetProber:
    """
    Base class for every probing strategy.

    A prober consumes successive chunks through :meth:`feed`, reports a
    :class:`ProbingState`, and exposes its current guess through
    :attr:`charset_name` and :meth:`get_confidence`.  Probers accept any byte
    value and never raise on malformed input.
    """

    SHORTCUT_THRESHOLD = 0.95

    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        self._state = ProbingState.DETECTING
        self.active = True
        self.lang_filter = lang_filter
        self.logger = logging.getLogger(__name__)

    def reset(self) -> None:
        self._state = ProbingState.DETECTING

    @property
    def charset_name(self) -> Optional[str]:
        return None

    @property
    def language(self) -> Optional[str]:
        return None

    def feed(self, byte_str: Union[bytes, bytearray]) -> ProbingState:
        raise NotImplementedError

    @property
    def state(self) -> ProbingState:
        return self._state

    def get_confidence(self) -> float:
        return 0.0

    @staticmethod
    def remove_xml_tags(buf: Union[bytes, bytearray]) -> bytearray:
        """
        Returns a copy of ``buf`` that retains only the sequences of English
        alphabet and high byte characters that are not between <> characters.
        This filter is used by ``Latin1Prober``, whose class model would
        otherwise be swamped by markup.
        """
        filtered = bytearray()
        in_tag = False
        prev = 0
        buf_view = memoryview(buf).cast("c")

        for curr, buf_char in enumerate(buf_view):
            # Check if we're coming out of or entering an XML tag

            # https://github.com/python/typeshed/issues/8182
            if buf_char == b">":  # type: ignore[comparison-overlap]
                prev = curr + 1
                in_tag = False
            # https://github.com/python/typeshed/issues/8182
            elif buf_char == b"<":  # type: ignore[comparison-overlap]
                if curr > prev and not in_tag:
                    # Keep everything after last non-extended-ASCII,
                    # non-alphabetic character
                    filtered.extend(buf[prev:curr])
                    # Output a space to delimit stretch we kept
                    filtered.extend(b" ")
                in_tag = True

        # If we're not in a tag...
        if not in_tag:
            # Keep everything after last non-extended-ASCII, non-alphabetic
            # character
            filtered.extend(buf[prev:])

        return filtered

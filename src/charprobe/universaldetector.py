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
"""
Module containing the UniversalDetector detector class, which is the primary
class a user of ``charprobe`` should use.

:author: Mark Pilgrim (initial port to Python)
:author: Shy Shalom (original C code)
"""

import logging
from typing import Callable, Optional, Tuple, Union

from . import _utils
from .bom import sniff_bom
from .charsetprober import CharSetProber
from .classifier import InputClassifier
from .enums import InputState, LanguageFilter, ProbingState
from .escprober import EscCharSetProber
from .latin1prober import Latin1Prober
from .mbcsgroupprober import MBCSGroupProber
from .result import DetectionResult
from .sbcsgroupprober import SBCSGroupProber

ProberFactory = Callable[..., CharSetProber]
ReportCallback = Callable[[str, float], None]


class UniversalDetector:
    """
    The ``UniversalDetector`` class underlies the ``charprobe.detect``
    function and coordinates all of the different charset probers.

    Feed it successive chunks of a document, then call :meth:`finish`:

    .. code::

            u = UniversalDetector()
            for chunk in chunks:
                u.feed(chunk)
                if u.done:
                    break
            result = u.finish()

    ``finish`` returns a :class:`~charprobe.result.DetectionResult`, or
    ``None`` when no encoding could be determined.  Each completed detection
    is also passed once to :meth:`report`, which by default calls the
    ``callback`` given to the constructor.

    The probers are created lazily, one per role: an escape-sequence prober
    while the input looks like 7-bit text with escapes, and a multi-byte
    group, a single-byte group and a Latin-1 prober once a high byte shows
    up.  The ``*_prober_factory`` arguments replace the default class for a
    role; the escape, multi-byte and single-byte factories are called with
    ``lang_filter=``, the Latin-1 factory with no arguments.
    """

    MINIMUM_THRESHOLD = _utils.MINIMUM_THRESHOLD
    SHORTCUT_THRESHOLD = _utils.SHORTCUT_THRESHOLD

    def __init__(
        self,
        callback: Optional[ReportCallback] = None,
        *,
        lang_filter: LanguageFilter = LanguageFilter.ALL,
        esc_prober_factory: Optional[ProberFactory] = None,
        mbcs_prober_factory: Optional[ProberFactory] = None,
        sbcs_prober_factory: Optional[ProberFactory] = None,
        latin1_prober_factory: Optional[ProberFactory] = None,
    ) -> None:
        self.callback = callback
        self.lang_filter = lang_filter
        self._esc_prober_factory = esc_prober_factory or EscCharSetProber
        self._mbcs_prober_factory = mbcs_prober_factory or MBCSGroupProber
        self._sbcs_prober_factory = sbcs_prober_factory or SBCSGroupProber
        self._latin1_prober_factory = latin1_prober_factory or Latin1Prober
        self._esc_charset_prober: Optional[CharSetProber] = None
        self._mbcs_prober: Optional[CharSetProber] = None
        self._sbcs_prober: Optional[CharSetProber] = None
        self._latin1_prober: Optional[CharSetProber] = None
        self._classifier = InputClassifier()
        self._detected_charset: Optional[str] = None
        self._detected_language: Optional[str] = None
        self._result: Optional[DetectionResult] = None
        self._finished = False
        self._got_data = False
        self.done = False
        self.logger = logging.getLogger(__name__)

    @property
    def input_state(self) -> InputState:
        return self._classifier.state

    @property
    def got_data(self) -> bool:
        return self._got_data

    @property
    def detected_charset(self) -> Optional[str]:
        """The label confirmed by a BOM or a prober, if any."""
        return self._detected_charset

    @property
    def esc_charset_prober(self) -> Optional[CharSetProber]:
        return self._esc_charset_prober

    @property
    def charset_probers(self) -> Tuple[CharSetProber, ...]:
        """The high-byte probers created so far, in the order they are fed."""
        return tuple(
            prober
            for prober in (self._mbcs_prober, self._sbcs_prober, self._latin1_prober)
            if prober is not None
        )

    def reset(self) -> None:
        """
        Reset the UniversalDetector and all of its probers back to their
        initial states, so the same instance can analyze another document.
        Probers that were already created are reset in place; none are
        created here.
        """
        self._classifier.reset()
        self._detected_charset = None
        self._detected_language = None
        self._result = None
        self._finished = False
        self._got_data = False
        self.done = False
        if self._esc_charset_prober is not None:
            self._esc_charset_prober.reset()
        for prober in self.charset_probers:
            prober.reset()

    def feed(self, byte_str: Union[bytes, bytearray, memoryview]) -> None:
        """
        Takes a chunk of a document and feeds it through all of the relevant
        charset probers.

        After calling ``feed``, you can check the value of the ``done``
        attribute to see if you need to continue feeding the
        ``UniversalDetector`` more data, or if it has made a prediction.

        .. note::
           You should always call ``finish`` when you're done feeding in your
           document, even if ``done`` is already ``True``.

        :raises TypeError: if ``byte_str`` is not bytes-like.
        """
        byte_str = _utils._validate_chunk(byte_str)

        if self.done:
            return

        if not byte_str:
            return

        # First check for known BOMs, since these are guaranteed to be correct
        if not self._got_data:
            self._got_data = True
            charset = sniff_bom(byte_str)
            if charset is not None:
                self.logger.debug("BOM found: %s", charset)
                self._detected_charset = charset
                self._detected_language = ""
                self.done = True
                return

        previous_state = self._classifier.state
        state = self._classifier.feed(byte_str)
        if state == InputState.HIGH_BYTE and previous_state != InputState.HIGH_BYTE:
            self._start_high_byte_probers()

        # If we've seen escape sequences, use the escape prober, which uses a
        # simple state machine to check for known escape sequences in HZ and
        # ISO-2022 encodings, since those are the only encodings that use
        # such sequences.
        if state == InputState.ESC_ASCII:
            if self._esc_charset_prober is None:
                self._esc_charset_prober = self._esc_prober_factory(
                    lang_filter=self.lang_filter
                )
            if self._esc_charset_prober.feed(byte_str) == ProbingState.FOUND_IT:
                self._confirm(self._esc_charset_prober)
        # If we've seen high bytes, all of the multi-byte and single-byte
        # probers get the chunk; the first one to confirm wins.
        elif state == InputState.HIGH_BYTE:
            for prober in self.charset_probers:
                if prober.feed(byte_str) == ProbingState.FOUND_IT:
                    self._confirm(prober)
                    break

    def _start_high_byte_probers(self) -> None:
        # Escape sequences mean nothing once we've seen 8-bit data
        self._esc_charset_prober = None
        if self._mbcs_prober is None:
            self._mbcs_prober = self._mbcs_prober_factory(lang_filter=self.lang_filter)
        if self._sbcs_prober is None:
            self._sbcs_prober = self._sbcs_prober_factory(lang_filter=self.lang_filter)
        if self._latin1_prober is None:
            self._latin1_prober = self._latin1_prober_factory()

    def _confirm(self, prober: CharSetProber) -> None:
        self.logger.debug(
            "%s prober confirmed %s", type(prober).__name__, prober.charset_name
        )
        self._detected_charset = prober.charset_name
        self._detected_language = prober.language
        self.done = True

    def finish(self) -> Optional[DetectionResult]:
        """
        Stop analyzing the current document and come up with a final
        prediction.

        Calling ``finish`` again before :meth:`reset` returns the same value
        without notifying anyone a second time.  Before any data has been fed
        it does nothing, and the session stays open for more data.

        :returns: The :class:`~charprobe.result.DetectionResult`, or ``None``
                  if no encoding could be determined.
        """
        if not self._got_data:
            self.logger.debug("no data received!")
            return None

        if self._finished:
            return self._result
        self._finished = True
        self.done = True

        if self._detected_charset is not None:
            self._result = DetectionResult(
                self._detected_charset, 1.0, self._detected_language
            )
        elif self.input_state == InputState.HIGH_BYTE:
            self._result = self._best_guess()
        elif self.input_state == InputState.PURE_ASCII:
            self._result = DetectionResult("ASCII", 1.0, "")
        else:
            self.logger.debug("escape sequences seen but no encoding confirmed")

        if self._result is not None:
            self.report(self._result.encoding, self._result.confidence)
        return self._result

    def _best_guess(self) -> Optional[DetectionResult]:
        max_prober: Optional[CharSetProber] = None
        max_prober_confidence = 0.0
        for prober in self.charset_probers:
            prober_confidence = prober.get_confidence()
            if prober_confidence > max_prober_confidence:
                max_prober_confidence = prober_confidence
                max_prober = prober

        if max_prober is not None and max_prober_confidence > self.MINIMUM_THRESHOLD:
            charset_name = max_prober.charset_name
            if charset_name is not None:
                return DetectionResult(
                    charset_name, max_prober_confidence, max_prober.language
                )

        if self.logger.getEffectiveLevel() <= logging.DEBUG:
            self.logger.debug("no probers hit minimum threshold")
            for prober in self.charset_probers:
                self.logger.debug(
                    "%s %s confidence = %s",
                    prober.charset_name,
                    prober.language,
                    prober.get_confidence(),
                )
        return None

    def report(self, charset: str, confidence: float) -> None:
        """
        Called once per completed detection with the winning label and its
        confidence.  Override it in a subclass, or pass ``callback`` to the
        constructor, to be notified.
        """
        if self.callback is not None:
            self.callback(charset, confidence)

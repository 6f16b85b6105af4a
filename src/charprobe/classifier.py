"""
Input classification for :class:`~charprobe.universaldetector.UniversalDetector`.

The classifier decides which family of probers applies to a stream by
looking for escape sequences and high-bit bytes.
"""

from __future__ import annotations

import logging
import re

from charprobe.enums import InputState

# Any byte with the high bit set except 0xA0, which shows up too often in
# otherwise 7-bit Latin-1 text (non-breaking space) to mean anything.
HIGH_BYTE_DETECTOR = re.compile(b"[\x80-\x9f\xa1-\xff]")
ESC_DETECTOR = re.compile(b"(\033|~{)")

logger = logging.getLogger(__name__)


class InputClassifier:
    """Byte-stream state machine tracking the current :class:`InputState`."""

    def __init__(self) -> None:
        self._state = InputState.PURE_ASCII
        self._last_char = b""

    @property
    def state(self) -> InputState:
        return self._state

    @property
    def last_char(self) -> bytes:
        """The last non-high byte seen, used to catch ``~{`` across chunks."""
        return self._last_char

    def reset(self) -> None:
        self._state = InputState.PURE_ASCII
        self._last_char = b""

    def feed(self, byte_str: bytes | bytearray) -> InputState:
        """Classify every byte of *byte_str* and return the resulting state."""
        if self._state == InputState.HIGH_BYTE:
            return self._state

        high_byte = HIGH_BYTE_DETECTOR.search(byte_str)
        seven_bit = byte_str if high_byte is None else byte_str[: high_byte.start()]

        if seven_bit:
            if self._state == InputState.PURE_ASCII and ESC_DETECTOR.search(
                self._last_char + bytes(seven_bit)
            ):
                self._transition(InputState.ESC_ASCII)
            self._last_char = bytes(seven_bit[-1:])

        if high_byte is not None:
            self._transition(InputState.HIGH_BYTE)

        return self._state

    def _transition(self, state: InputState) -> None:
        logger.debug("input state %s -> %s", self._state.name, state.name)
        self._state = state

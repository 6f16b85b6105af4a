"""Streaming character encoding detection."""

from __future__ import annotations

from charprobe._utils import _validate_chunk
from charprobe.enums import InputState, LanguageFilter, ProbingState
from charprobe.result import DetectionResult
from charprobe.universaldetector import UniversalDetector

__version__ = "1.0.0"
__all__ = [
    "DetectionResult",
    "InputState",
    "LanguageFilter",
    "ProbingState",
    "UniversalDetector",
    "detect",
]


def detect(
    byte_str: bytes | bytearray | memoryview,
    lang_filter: LanguageFilter = LanguageFilter.ALL,
) -> dict[str, str | float | None]:
    """Detect the encoding of the given byte string.

    :param byte_str: The complete document.
    :param lang_filter: The language families to consider.
    :returns: A dict with ``'encoding'``, ``'confidence'``, and ``'language'``
        keys.  ``encoding`` is ``None`` if no encoding could be determined.
    :raises TypeError: if *byte_str* is not bytes-like.
    """
    data = _validate_chunk(byte_str)
    detector = UniversalDetector(lang_filter=lang_filter)
    detector.feed(data)
    result = detector.finish()
    if result is None:
        return {"encoding": None, "confidence": 0.0, "language": None}
    return result.to_dict()

"""
All of the Enums that are used throughout the charprobe package.
"""

from enum import Flag, IntEnum, auto


class InputState(IntEnum):
    """
    This enum represents the different states a universal detector can be in.

    States only ever advance: ``PURE_ASCII`` may become ``ESC_ASCII`` or
    ``HIGH_BYTE``, ``ESC_ASCII`` may become ``HIGH_BYTE``, and ``HIGH_BYTE``
    is terminal.
    """

    PURE_ASCII = 0
    ESC_ASCII = 1
    HIGH_BYTE = 2


class LanguageFilter(Flag):
    """
    This enum represents the different language filters we can apply to a
    ``UniversalDetector``.
    """

    CHINESE_SIMPLIFIED = auto()
    CHINESE_TRADITIONAL = auto()
    JAPANESE = auto()
    KOREAN = auto()
    NON_CJK = auto()
    CHINESE = CHINESE_SIMPLIFIED | CHINESE_TRADITIONAL
    CJK = CHINESE | JAPANESE | KOREAN
    ALL = NON_CJK | CJK


class ProbingState(IntEnum):
    """
    This enum represents the different states a prober can be in.
    """

    DETECTING = 0
    FOUND_IT = 1
    NOT_ME = 2

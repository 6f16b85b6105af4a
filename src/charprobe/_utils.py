"""Internal shared constants and helpers for charprobe."""

from __future__ import annotations

#: Guesses at or below this confidence are never reported.
MINIMUM_THRESHOLD: float = 0.20

#: Confidence above which a prober may confirm its own guess early.
SHORTCUT_THRESHOLD: float = 0.95

#: Chunk size used when streaming files through the detector.
DEFAULT_CHUNK_SIZE: int = 65_536


def _validate_chunk(byte_str: object) -> bytes | bytearray:
    """Return *byte_str* as ``bytes``/``bytearray`` or raise ``TypeError``.

    ``memoryview`` chunks are copied so that no reference to the caller's
    buffer outlives the call.
    """
    if isinstance(byte_str, (bytes, bytearray)):
        return byte_str
    if isinstance(byte_str, memoryview):
        return byte_str.tobytes()
    msg = f"expected a bytes-like chunk, got {type(byte_str).__name__}"
    raise TypeError(msg)

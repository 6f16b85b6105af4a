"""Byte Order Mark detection."""

from __future__ import annotations

# Each group of overlapping prefixes is ordered longest-first, so the
# UCS-4/UTF-32 marks are tried before the UTF-16 mark they start with.
BOM_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xef\xbb\xbf", "UTF-8"),
    # FE FF 00 00  UCS-4, unusual octet order (3412)
    (b"\xfe\xff\x00\x00", "X-ISO-10646-UCS-4-3412"),
    (b"\xfe\xff", "UTF-16BE"),
    (b"\x00\x00\xfe\xff", "UTF-32BE"),
    # 00 00 FF FE  UCS-4, unusual octet order (2143)
    (b"\x00\x00\xff\xfe", "X-ISO-10646-UCS-4-2143"),
    (b"\xff\xfe\x00\x00", "UTF-32LE"),
    (b"\xff\xfe", "UTF-16LE"),
)

#: A chunk must be longer than this before its BOM is examined.
BOM_MIN_CHUNK: int = 3


def sniff_bom(data: bytes | bytearray) -> str | None:
    """Return the encoding label announced by a BOM at the start of *data*.

    Only the first four bytes are examined, and only when *data* holds more
    than :data:`BOM_MIN_CHUNK` bytes.

    :param data: The first chunk of a stream.
    :returns: The encoding label, or ``None`` if no BOM matches.
    """
    if len(data) <= BOM_MIN_CHUNK:
        return None
    head = bytes(data[:4])
    for signature, encoding in BOM_SIGNATURES:
        if head.startswith(signature):
            return encoding
    return None

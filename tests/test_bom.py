# tests/test_bom.py
from __future__ import annotations

import pytest

from charprobe.bom import BOM_SIGNATURES, sniff_bom


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xef\xbb\xbfHello", "UTF-8"),
        (b"\xfe\xff\x00\x00", "X-ISO-10646-UCS-4-3412"),
        (b"\xfe\xff\x00H\x00i", "UTF-16BE"),
        (b"\x00\x00\xfe\xff\x00\x00\x00H", "UTF-32BE"),
        (b"\x00\x00\xff\xfe\x00\x00H\x00", "X-ISO-10646-UCS-4-2143"),
        (b"\xff\xfe\x00\x00H\x00\x00\x00", "UTF-32LE"),
        (b"\xff\xfeH\x00i\x00", "UTF-16LE"),
    ],
)
def test_known_boms(data, expected):
    assert sniff_bom(data) == expected


def test_utf16le_is_not_utf32le():
    assert sniff_bom(b"\xff\xfeA\x00") == "UTF-16LE"


def test_no_bom():
    assert sniff_bom(b"Hello, world!") is None
    assert sniff_bom(b"\x00\x00\x00H") is None


@pytest.mark.parametrize("data", [b"", b"\xef", b"\xef\xbb", b"\xef\xbb\xbf"])
def test_too_short_for_bom(data):
    assert sniff_bom(data) is None


def test_bytearray_input():
    assert sniff_bom(bytearray(b"\xef\xbb\xbfabc")) == "UTF-8"


def test_no_mark_shadows_a_later_one():
    for i, (signature, _) in enumerate(BOM_SIGNATURES):
        for later, _ in BOM_SIGNATURES[i + 1 :]:
            assert not later.startswith(signature)

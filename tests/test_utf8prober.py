# tests/test_utf8prober.py
from __future__ import annotations

import pytest

from charprobe.enums import ProbingState
from charprobe.utf8prober import UTF8Prober


def test_ascii_only():
    prober = UTF8Prober()
    assert prober.feed(b"Hello world") == ProbingState.DETECTING
    assert prober.get_confidence() == pytest.approx(0.01)


def test_confidence_grows_with_multibyte_chars():
    prober = UTF8Prober()
    prober.feed("Héllo wörld café".encode())
    assert prober.state == ProbingState.DETECTING
    assert prober.get_confidence() == pytest.approx(1 - 0.99 * 0.5**3)


def test_found_after_enough_multibyte_chars():
    prober = UTF8Prober()
    assert prober.feed("éééé".encode()) == ProbingState.DETECTING
    assert prober.feed("é".encode()) == ProbingState.FOUND_IT
    assert prober.charset_name == "UTF-8"


def test_sequence_split_across_chunks():
    prober = UTF8Prober()
    assert prober.feed(b"caf\xc3") == ProbingState.DETECTING
    assert prober.feed(b"\xa9") == ProbingState.DETECTING
    assert prober.get_confidence() == pytest.approx(0.505)


@pytest.mark.parametrize(
    "data",
    [
        "日本".encode(),
        "Hello 🌍".encode(),
        b"\xf4\x8f\xbf\xbf",
        b"\xed\x9f\xbf",
    ],
)
def test_valid_sequences(data):
    prober = UTF8Prober()
    assert prober.feed(data) != ProbingState.NOT_ME


@pytest.mark.parametrize(
    "data",
    [
        b"\x80",
        b"\xc0\xaf",
        b"\xc3A",
        b"\xe0\x80\x80",
        b"\xed\xa0\x80",
        b"\xf0\x80\x80\x80",
        b"\xf4\x90\x80\x80",
        b"\xf5\x80\x80\x80",
        b"caf\xe9 ",
    ],
)
def test_invalid_sequences(data):
    prober = UTF8Prober()
    assert prober.feed(data) == ProbingState.NOT_ME
    assert prober.feed("é".encode()) == ProbingState.NOT_ME


def test_reset():
    prober = UTF8Prober()
    prober.feed(b"\xc3")
    prober.reset()
    assert prober.feed(b"A") == ProbingState.DETECTING
    assert prober.get_confidence() == pytest.approx(0.01)

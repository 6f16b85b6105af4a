# tests/test_latin1prober.py
from __future__ import annotations

import pytest

from charprobe.charsetprober import CharSetProber
from charprobe.enums import ProbingState
from charprobe.latin1prober import Latin1Prober

FRENCH = "Le café est très bon. Voilà, l'été arrive à Paris. Ça commence!"


def test_western_text():
    prober = Latin1Prober()
    assert prober.feed(FRENCH.encode("latin-1")) == ProbingState.DETECTING
    assert prober.get_confidence() == pytest.approx(0.73)
    assert prober.charset_name == "windows-1252"


def test_undefined_byte_rules_out():
    prober = Latin1Prober()
    assert prober.feed(b"abc\x81") == ProbingState.NOT_ME
    assert prober.get_confidence() == 0.01


def test_unlikely_transition_drops_confidence():
    prober = Latin1Prober()
    prober.feed(b"abc\xc9")
    assert prober.get_confidence() == 0.0


def test_empty_input():
    assert Latin1Prober().get_confidence() == 0.0


def test_markup_is_ignored():
    prober = Latin1Prober()
    prober.feed(b"<p class='x'>caf\xe9</p>")
    assert prober.get_confidence() == pytest.approx(0.73)


def test_remove_xml_tags():
    assert CharSetProber.remove_xml_tags(b"<p>caf\xe9</p>") == b"caf\xe9 "
    assert CharSetProber.remove_xml_tags(b"no tags") == b"no tags"


def test_reset():
    prober = Latin1Prober()
    prober.feed(b"\x81")
    prober.reset()
    assert prober.state == ProbingState.DETECTING
    prober.feed(b"caf\xe9")
    assert prober.get_confidence() == pytest.approx(0.73)

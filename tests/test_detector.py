# tests/test_detector.py
from __future__ import annotations

import pytest

from charprobe import DetectionResult, InputState, LanguageFilter, ProbingState
from charprobe.charsetprober import CharSetProber
from charprobe.mbcsgroupprober import MBCSGroupProber
from charprobe.sbcsgroupprober import SBCSGroupProber
from charprobe.universaldetector import UniversalDetector


class ScriptedProber(CharSetProber):
    """Prober that answers with a fixed state and confidence."""

    def __init__(
        self,
        name: str,
        confidence: float = 0.0,
        state: ProbingState = ProbingState.DETECTING,
    ) -> None:
        super().__init__()
        self.name = name
        self.confidence = confidence
        self.next_state = state
        self.chunks: list[bytes] = []
        self.resets = 0

    @property
    def charset_name(self) -> str:
        return self.name

    @property
    def language(self) -> str:
        return "Test"

    def reset(self) -> None:
        super().reset()
        self.resets += 1
        self.chunks = []

    def feed(self, byte_str):
        self.chunks.append(bytes(byte_str))
        self._state = self.next_state
        return self._state

    def get_confidence(self) -> float:
        return self.confidence


def scripted_detector(
    mbcs: float = 0.0,
    sbcs: float = 0.0,
    latin1: float = 0.0,
    callback=None,
) -> tuple[UniversalDetector, dict[str, ScriptedProber]]:
    probers = {
        "esc": ScriptedProber("ESC"),
        "mbcs": ScriptedProber("MB", mbcs),
        "sbcs": ScriptedProber("SB", sbcs),
        "latin1": ScriptedProber("L1", latin1),
    }
    detector = UniversalDetector(
        callback,
        esc_prober_factory=lambda **kwargs: probers["esc"],
        mbcs_prober_factory=lambda **kwargs: probers["mbcs"],
        sbcs_prober_factory=lambda **kwargs: probers["sbcs"],
        latin1_prober_factory=lambda: probers["latin1"],
    )
    return detector, probers


def test_initial_state():
    detector = UniversalDetector()
    assert detector.done is False
    assert detector.got_data is False
    assert detector.input_state == InputState.PURE_ASCII
    assert detector.charset_probers == ()
    assert detector.esc_charset_prober is None


def test_thresholds_exposed():
    assert UniversalDetector.MINIMUM_THRESHOLD == 0.20
    assert UniversalDetector.SHORTCUT_THRESHOLD == 0.95


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xef\xbb\xbfHello", "UTF-8"),
        (b"\xff\xfeH\x00e\x00", "UTF-16LE"),
        (b"\xfe\xff\x00H\x00e", "UTF-16BE"),
        (b"\xff\xfe\x00\x00H\x00\x00\x00", "UTF-32LE"),
        (b"\x00\x00\xfe\xff\x00\x00\x00H", "UTF-32BE"),
        (b"\xfe\xff\x00\x00", "X-ISO-10646-UCS-4-3412"),
        (b"\x00\x00\xff\xfe", "X-ISO-10646-UCS-4-2143"),
    ],
)
def test_bom_finishes_detection(data, expected):
    detector = UniversalDetector()
    detector.feed(data)
    assert detector.done is True
    assert detector.detected_charset == expected
    assert detector.finish() == DetectionResult(expected, 1.0, "")


def test_bom_chunk_is_not_classified():
    detector, probers = scripted_detector()
    detector.feed(b"\xef\xbb\xbf\xe9\xe9")
    assert detector.input_state == InputState.PURE_ASCII
    assert detector.charset_probers == ()


def test_short_first_chunk_skips_bom_check():
    detector = UniversalDetector()
    detector.feed(b"\xef\xbb\xbf")
    assert detector.detected_charset is None
    assert detector.done is False
    assert detector.input_state == InputState.HIGH_BYTE


def test_bom_only_checked_on_first_chunk():
    detector = UniversalDetector()
    detector.feed(b"abcd")
    detector.feed(b"\xef\xbb\xbfabcd")
    assert detector.detected_charset is None
    assert detector.input_state == InputState.HIGH_BYTE


def test_empty_chunk_does_not_count_as_data():
    detector = UniversalDetector()
    detector.feed(b"")
    assert detector.got_data is False
    detector.feed(b"\xff\xfeH\x00")
    assert detector.finish() == DetectionResult("UTF-16LE", 1.0, "")


def test_pure_ascii_is_ascii():
    detector = UniversalDetector()
    detector.feed(b"Hello, ")
    detector.feed(b"world!\n")
    assert detector.finish() == DetectionResult("ASCII", 1.0, "")


def test_nbsp_is_not_a_high_byte():
    detector = UniversalDetector()
    detector.feed(b"Hello\xa0world")
    assert detector.input_state == InputState.PURE_ASCII
    assert detector.finish() == DetectionResult("ASCII", 1.0, "")


def test_finish_without_data():
    calls = []
    detector = UniversalDetector(lambda charset, conf: calls.append((charset, conf)))
    assert detector.finish() is None
    assert detector.done is False
    assert calls == []


def test_finish_without_data_keeps_session_open():
    calls = []
    detector = UniversalDetector(lambda charset, conf: calls.append((charset, conf)))
    detector.finish()
    detector.feed(b"Hello world")
    assert detector.finish() == DetectionResult("ASCII", 1.0, "")
    assert calls == [("ASCII", 1.0)]


def test_finish_after_empty_chunk_keeps_bom_check():
    detector = UniversalDetector()
    detector.feed(b"")
    assert detector.finish() is None
    detector.feed(b"\xef\xbb\xbfabc")
    assert detector.finish() == DetectionResult("UTF-8", 1.0, "")


def test_feed_after_done_is_ignored():
    detector = UniversalDetector()
    detector.feed(b"\xef\xbb\xbfabc")
    assert detector.done is True
    detector.feed(b"\x1b$B\xe9\xe9")
    assert detector.input_state == InputState.PURE_ASCII
    assert detector.finish() == DetectionResult("UTF-8", 1.0, "")


def test_feed_after_finish_is_ignored():
    detector = UniversalDetector()
    detector.feed(b"Hello")
    result = detector.finish()
    detector.feed(b"caf\xe9")
    assert detector.input_state == InputState.PURE_ASCII
    assert detector.finish() == result


@pytest.mark.parametrize("chunk", ["text", 42, None, [0x41]])
def test_feed_rejects_non_bytes(chunk):
    detector = UniversalDetector()
    with pytest.raises(TypeError):
        detector.feed(chunk)


def test_feed_accepts_bytearray_and_memoryview():
    detector = UniversalDetector()
    detector.feed(bytearray(b"Hello "))
    detector.feed(memoryview(b"world"))
    assert detector.finish() == DetectionResult("ASCII", 1.0, "")


def test_high_byte_is_permanent():
    detector = UniversalDetector()
    detector.feed(b"caf\xe9 ")
    detector.feed(b"plain ascii with \x1b escape")
    assert detector.input_state == InputState.HIGH_BYTE


def test_tilde_brace_spans_chunks():
    detector = UniversalDetector()
    detector.feed(b"abc~")
    assert detector.input_state == InputState.PURE_ASCII
    detector.feed(b"{def")
    assert detector.input_state == InputState.ESC_ASCII


def test_unconfirmed_escape_gives_no_verdict():
    detector = UniversalDetector()
    detector.feed(b"a\x1bb plain text")
    assert detector.input_state == InputState.ESC_ASCII
    assert detector.finish() is None


def test_escape_prober_confirms():
    detector = UniversalDetector()
    detector.feed(b"Hello \x1b$B$3$s$K$A$O\x1b(B World")
    assert detector.done is True
    assert detector.finish() == DetectionResult("ISO-2022-JP", 1.0, "Japanese")


def test_escape_prober_discarded_on_high_byte():
    detector, probers = scripted_detector()
    detector.feed(b"abc\x1b(")
    assert detector.esc_charset_prober is probers["esc"]
    detector.feed(b"\xe9\xe9")
    assert detector.input_state == InputState.HIGH_BYTE
    assert detector.esc_charset_prober is None
    assert detector.charset_probers == (
        probers["mbcs"],
        probers["sbcs"],
        probers["latin1"],
    )


def test_whole_chunk_is_fed_after_classification():
    detector, probers = scripted_detector()
    detector.feed(b"abc\xe9def")
    for role in ("mbcs", "sbcs", "latin1"):
        assert probers[role].chunks == [b"abc\xe9def"]

    detector, probers = scripted_detector()
    detector.feed(b"abc\x1b$Bdef")
    assert probers["esc"].chunks == [b"abc\x1b$Bdef"]


def test_pure_ascii_feeds_nothing():
    detector, probers = scripted_detector()
    detector.feed(b"nothing special")
    assert detector.esc_charset_prober is None
    assert detector.charset_probers == ()
    assert probers["esc"].chunks == []


def test_first_confirmation_in_order_wins():
    detector, probers = scripted_detector(mbcs=0.9, sbcs=0.1, latin1=0.5)
    probers["sbcs"].next_state = ProbingState.FOUND_IT
    probers["latin1"].next_state = ProbingState.FOUND_IT
    detector.feed(b"caf\xe9")
    assert detector.done is True
    assert detector.detected_charset == "SB"
    assert probers["latin1"].chunks == []
    assert detector.finish() == DetectionResult("SB", 1.0, "Test")


@pytest.mark.parametrize(
    ("confidences", "expected"),
    [
        ((0.2, 0.1, 0.0), None),
        ((0.0, 0.0, 0.0), None),
        ((0.21, 0.1, 0.0), DetectionResult("MB", 0.21, "Test")),
        ((0.1, 0.6, 0.3), DetectionResult("SB", 0.6, "Test")),
        ((0.1, 0.2, 0.73), DetectionResult("L1", 0.73, "Test")),
        ((0.5, 0.5, 0.5), DetectionResult("MB", 0.5, "Test")),
        ((0.1, 0.5, 0.5), DetectionResult("SB", 0.5, "Test")),
    ],
)
def test_best_confidence_above_minimum_wins(confidences, expected):
    detector, _ = scripted_detector(*confidences)
    detector.feed(b"caf\xe9")
    assert detector.finish() == expected


def test_lang_filter_passed_to_factories():
    seen = {}

    def factory(role):
        def create(**kwargs):
            seen[role] = kwargs
            return ScriptedProber(role)

        return create

    detector = UniversalDetector(
        lang_filter=LanguageFilter.JAPANESE,
        esc_prober_factory=factory("esc"),
        mbcs_prober_factory=factory("mbcs"),
        sbcs_prober_factory=factory("sbcs"),
    )
    detector.feed(b"\x1b")
    detector.feed(b"\xe9")
    assert seen == {
        "esc": {"lang_filter": LanguageFilter.JAPANESE},
        "mbcs": {"lang_filter": LanguageFilter.JAPANESE},
        "sbcs": {"lang_filter": LanguageFilter.JAPANESE},
    }


def test_default_probers_created_lazily():
    detector = UniversalDetector()
    detector.feed(b"caf\xe9")
    mbcs, sbcs, latin1 = detector.charset_probers
    assert isinstance(mbcs, MBCSGroupProber)
    assert isinstance(sbcs, SBCSGroupProber)
    assert latin1.charset_name == "windows-1252"


def test_finish_is_idempotent_and_reports_once():
    calls = []
    detector = UniversalDetector(lambda charset, conf: calls.append((charset, conf)))
    detector.feed(b"Hello world")
    first = detector.finish()
    second = detector.finish()
    assert first == second == DetectionResult("ASCII", 1.0, "")
    assert calls == [("ASCII", 1.0)]


def test_no_verdict_is_not_reported():
    calls = []
    detector, _ = scripted_detector(
        0.1, 0.1, 0.1, callback=lambda charset, conf: calls.append(charset)
    )
    detector.feed(b"\xe9")
    assert detector.finish() is None
    assert calls == []


def test_report_can_be_overridden():
    class Recorder(UniversalDetector):
        def __init__(self):
            super().__init__()
            self.reports = []

        def report(self, charset, confidence):
            self.reports.append((charset, confidence))

    detector = Recorder()
    detector.feed(b"\xef\xbb\xbfHello")
    detector.finish()
    assert detector.reports == [("UTF-8", 1.0)]


def test_reset_reuses_probers():
    created = []

    def factory(name):
        def create(**kwargs):
            prober = ScriptedProber(name, 0.5)
            created.append(prober)
            return prober

        return create

    detector = UniversalDetector(
        mbcs_prober_factory=factory("MB"),
        sbcs_prober_factory=factory("SB"),
        latin1_prober_factory=factory("L1"),
    )
    detector.feed(b"caf\xe9")
    first = detector.finish()
    detector.reset()
    assert detector.done is False
    assert detector.got_data is False
    assert detector.input_state == InputState.PURE_ASCII
    assert [prober.resets for prober in created] == [1, 1, 1]
    detector.feed(b"caf\xe9")
    assert detector.finish() == first
    assert len(created) == 3


def test_reset_never_creates_probers():
    detector = UniversalDetector()
    detector.reset()
    assert detector.charset_probers == ()
    assert detector.esc_charset_prober is None


def test_reset_resets_escape_prober():
    detector, probers = scripted_detector()
    detector.feed(b"\x1b")
    detector.reset()
    assert probers["esc"].resets == 1
    assert detector.esc_charset_prober is probers["esc"]


def test_reset_allows_new_report():
    calls = []
    detector = UniversalDetector(lambda charset, conf: calls.append(charset))
    detector.feed(b"Hello")
    detector.finish()
    detector.reset()
    detector.feed(b"\xff\xfeH\x00")
    detector.finish()
    assert calls == ["ASCII", "UTF-16LE"]


def test_reset_reproduces_verdict():
    data = "Le café est très bon. Voilà, l'été arrive à Paris.".encode("latin-1")
    detector = UniversalDetector()
    detector.feed(data)
    first = detector.finish()
    detector.reset()
    detector.feed(data)
    assert detector.finish() == first
    assert first is not None

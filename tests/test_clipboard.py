import pyperclip
import pytest

from cosmic_signatures.config import TrackerConfig
from cosmic_signatures.core.clipboard import ClipboardUnavailable, parse_paste, read_clipboard
from cosmic_signatures.models.candidate import CandidateRecord
from cosmic_signatures.models.signature import Gas, Relic, SignatureIdentifier, Unknown, Wormhole

SAMPLE_PASTE = """OEB-892\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t4.99 AU
YQS-184\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t2.93 AU
OVD-328\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t71 km
WIV-940\tCosmic Signature\tRelic Site\tRuined Blood Raider Temple Site\t100.0%\t8.98 AU
ROZ-580\tCosmic Signature\tRelic Site\tRuined Angel Temple Site\t100.0%\t2.07 AU
MJK-752\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t6.89 AU
ZYP-580\tCosmic Signature\t\t\t10.4%\t5.77 AU
LHB-560\tCosmic Signature\t\t\t8.8%\t2.95 AU
WYT-700\tCosmic Signature\tGas Site\t\t5.2%\t4.02 AU"""


def test_parse_blank_input():
    assert parse_paste("") == []
    assert parse_paste("   ") == []
    assert parse_paste("\n\t\n") == []


def test_parse_sample_paste():
    results = parse_paste(SAMPLE_PASTE)
    assert results == [
        CandidateRecord("OEB-892", "Wormhole", ""),
        CandidateRecord("YQS-184", "Wormhole", ""),
        CandidateRecord("OVD-328", "Wormhole", ""),
        CandidateRecord("WIV-940", "Relic", "Ruined Blood Raider Temple Site"),
        CandidateRecord("ROZ-580", "Relic", "Ruined Angel Temple Site"),
        CandidateRecord("MJK-752", "Wormhole", ""),
        CandidateRecord("ZYP-580", "", ""),
        CandidateRecord("LHB-560", "", ""),
        CandidateRecord("WYT-700", "Gas", ""),
    ]


def test_parse_slices_identifier_to_fixed_width():
    results = parse_paste("ABC1234\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t5 AU")
    assert results == [CandidateRecord("ABC1234", "Wormhole", "")]


def test_parse_relic_site_with_name():
    results = parse_paste("ABC-123\tCosmic Signature\tRelic Site\tRuined Temple\t100.0%\t1 AU")
    assert results == [CandidateRecord("ABC-123", "Relic", "Ruined Temple")]


def test_parse_site_without_name_field():
    assert parse_paste("ABC-123\tCosmic Signature\tData Site") == [
        CandidateRecord("ABC-123", "Data", "")
    ]


def test_parse_unrecognized_or_empty_category():
    assert parse_paste("ABC-123\tCosmic Signature\t") == [CandidateRecord("ABC-123", "", "")]
    assert parse_paste("ABC-123\tCosmic Signature\tOre Site\tAsteroid Belt") == [
        CandidateRecord("ABC-123", "", "")
    ]


def test_parse_skips_malformed_lines():
    assert parse_paste("some random nonsense") == []
    text = "\n".join(
        [
            "ABC-123\tCosmic Signature",
            "!!!-???\tCosmic Signature\tWormhole",
            "DEF-456\tCosmic Signature\tCombat Site\tBlood Hideaway\t100.0%\t3 AU",
        ]
    )
    assert parse_paste(text) == [CandidateRecord("DEF-456", "Combat", "Blood Hideaway")]


def test_parse_windows_line_endings_and_custom_width():
    text = "ABC-123\tCosmic Signature\tGas Site\tVital Core Reservoir\r\n"
    assert parse_paste(text) == [CandidateRecord("ABC-123", "Gas", "Vital Core Reservoir")]
    assert parse_paste("ABC-1234\tCosmic Signature\tWormhole", identifier_width=8) == [
        CandidateRecord("ABC-1234", "Wormhole", "")
    ]


def test_parse_keeps_order_and_duplicates():
    line = "ABC-123\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t5 AU"
    assert len(parse_paste(f"{line}\n{line}")) == 2


def test_candidate_derivation():
    assert CandidateRecord("ABC-123").classification() == Unknown()
    assert CandidateRecord("ABC-123", "Wormhole").classification() == Wormhole()
    assert CandidateRecord("ABC-123", "Relic", "Foobar").classification() == Relic("Foobar")
    assert CandidateRecord("ABC-123", "Gas", "").classification() == Gas(None)
    assert CandidateRecord("ABC123").signature_identifier() == SignatureIdentifier("ABC", "123")


def test_default_width_matches_config():
    line = "ABC-1234\tCosmic Signature\tWormhole"
    assert parse_paste(line) == parse_paste(line, TrackerConfig().identifier_width)
    assert parse_paste(line) == [CandidateRecord("ABC-123", "Wormhole", "")]


def test_read_clipboard(monkeypatch):
    monkeypatch.setattr(pyperclip, "paste", lambda: "ABC-123\tCosmic Signature\tWormhole")
    assert parse_paste(read_clipboard()) == [CandidateRecord("ABC-123", "Wormhole", "")]


def test_read_clipboard_unavailable(monkeypatch):
    def _broken_paste():
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "paste", _broken_paste)
    with pytest.raises(ClipboardUnavailable):
        read_clipboard()

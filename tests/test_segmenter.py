"""Tests for greedy longest-match segmentation (segmenter.py)."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from ajemi.dictionaries import SITELEN_ENTRIES
from ajemi.schema import Unique, build
from ajemi.segmenter import AlphabetError, Segment, segment

MI = "\U000F1934"
LUKIN = "\U000F192E"
TOKI = "\U000F196C"
PONA = "\U000F1954"
A = "\U000F1900"
N = "\U000F1986"


# ── Basic matching ────────────────────────────────────────────────────────────


def test_sentence(small_schema):
    result = segment(small_schema, "milukine")
    assert result.glyphs == ("M", "L", "E")
    assert result.boundaries == (2, 7, 8)
    assert result.text == "MLE"
    assert result.dropped == ()


def test_iterates_boundary_glyph_pairs(small_schema):
    result = segment(small_schema, "milukine")
    assert list(result) == [(2, "M"), (7, "L"), (8, "E")]
    assert len(result) == 3


def test_segments_carry_spans(small_schema):
    result = segment(small_schema, "milukine")
    assert result.segments == [
        Segment("M", 0, 2, "mi"),
        Segment("L", 2, 7, "lukin"),
        Segment("E", 7, 8, "e"),
    ]


def test_abbreviations(small_schema):
    # "luk" is a unique prefix of "lukin"
    result = segment(small_schema, "miluke")
    assert result.glyphs == ("M", "L", "E")
    assert result.boundaries == (2, 5, 6)


def test_spelling_that_prefixes_a_longer_one(mama_schema):
    assert segment(mama_schema, "ma").text == "A"
    assert segment(mama_schema, "mam").text == "B"
    assert segment(mama_schema, "mama").text == "B"
    assert segment(mama_schema, "mamama").text == "BA"


def test_empty_input(small_schema):
    result = segment(small_schema, "")
    assert result.glyphs == ()
    assert result.boundaries == ()
    assert result.text == ""


# ── Ambiguity and unmatched input ─────────────────────────────────────────────


def test_ambiguous_prefix_alone_yields_nothing():
    schema = build([("anpa", "P"), ("ante", "T")])
    result = segment(schema, "an")
    assert result.glyphs == ()
    assert result.dropped == (0, 1)


def test_ambiguous_prefix_shrinks_to_shorter_match(mama_schema):
    # "m" is shared by "ma" and "mama" and never resolves on its own
    result = segment(mama_schema, "m")
    assert result.text == ""
    assert result.dropped == (0,)


def test_ambiguous_prefix_falls_back_to_shorter_words(sitelen_schema):
    # "an" prefixes anpa/ante/anu, so it splits into the words "a" and "n"
    result = segment(sitelen_schema, "an")
    assert result.glyphs == (A, N)
    assert result.boundaries == (1, 2)


def test_unmatched_character_is_dropped(small_schema):
    result = segment(small_schema, "mixe")
    assert result.glyphs == ("M", "E")
    assert result.boundaries == (2, 4)
    assert result.dropped == (2,)
    assert result.segments == [
        Segment("M", 0, 2, "mi"),
        Segment("E", 3, 4, "e"),
    ]


def test_matching_resumes_after_dropped_character(small_schema):
    result = segment(small_schema, "xxmi")
    assert result.glyphs == ("M",)
    assert result.boundaries == (4,)
    assert result.dropped == (0, 1)
    assert result.segments == [Segment("M", 2, 4, "mi")]


def test_strict_rejects_unknown_characters(small_schema):
    with pytest.raises(AlphabetError) as exc_info:
        segment(small_schema, "miXe", strict=True)
    assert exc_info.value.offsets == [2]
    assert exc_info.value.letters == "miXe"
    assert "X" in str(exc_info.value)


def test_strict_accepts_alphabet_even_when_unmatched():
    schema = build([("anpa", "P"), ("ante", "T")])
    assert segment(schema, "an", strict=True).glyphs == ()


def test_alphabet_error_is_value_error(small_schema):
    with pytest.raises(ValueError):
        segment(small_schema, "?", strict=True)


# ── Dictionary-wide properties ────────────────────────────────────────────────


def test_every_spelling_segments_to_its_glyph(sitelen_schema):
    for spelling, glyph in SITELEN_ENTRIES:
        result = segment(sitelen_schema, spelling)
        assert result.glyphs == (glyph,), spelling
        assert result.boundaries == (len(spelling),)


def test_every_unique_prefix_segments_to_its_word(sitelen_schema):
    for key, candidate in sitelen_schema.candidates.items():
        if isinstance(candidate, Unique):
            assert segment(sitelen_schema, key).glyphs == (candidate.glyph,), key


def test_sitelen_phrase(sitelen_schema):
    result = segment(sitelen_schema, "tokipona")
    assert result.glyphs == (TOKI, PONA)
    assert result.boundaries == (4, 8)


def test_sitelen_abbreviated_phrase(sitelen_schema):
    # "kije" abbreviates kijetesantakalu
    result = segment(sitelen_schema, "milukinkije")
    assert result.glyphs == (MI, LUKIN, "\U000F1980")
    assert result.boundaries == (2, 7, 11)


# ── Purity ────────────────────────────────────────────────────────────────────


def test_segment_does_not_modify_schema(small_schema):
    before = dict(small_schema.candidates)
    segment(small_schema, "milukinexx")
    assert dict(small_schema.candidates) == before


def test_concurrent_calls_share_schema(sitelen_schema):
    words = ["tokipona", "milukinkije", "an", "sinapona"] * 50
    expected = [segment(sitelen_schema, w) for w in words]
    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(lambda w: segment(sitelen_schema, w), words))
    assert results == expected

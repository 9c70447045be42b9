"""Tests for punctuation remapping (punctuation.py)."""

from ajemi.punctuation import remap_punct, remap_text
from ajemi.schema import build


def test_mapped_character(sitelen_schema):
    assert remap_punct(sitelen_schema, ".") == "\U000F199C"
    assert remap_punct(sitelen_schema, "<") == "「"
    assert remap_punct(sitelen_schema, " ") == "\u3000"


def test_unmapped_character_passes_through(sitelen_schema):
    for ch in "?!,;0aZ\n":
        assert remap_punct(sitelen_schema, ch) == ch


def test_empty_table():
    schema = build([("a", "A")])
    assert remap_punct(schema, ".") == "."


def test_replacement_may_be_longer():
    schema = build([("a", "A")], {"~": "〜〜"})
    assert remap_punct(schema, "~") == "〜〜"


def test_emoji_brackets(emoji_schema):
    assert remap_punct(emoji_schema, "[") == remap_punct(emoji_schema, "]") == "\U0001F58C"
    assert remap_punct(emoji_schema, ".") == "."


def test_remap_text(sitelen_schema):
    assert remap_text(sitelen_schema, "<>?") == "「」?"
    assert remap_text(sitelen_schema, "") == ""

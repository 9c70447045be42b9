"""Punctuation remapping."""

from ajemi.schema import Schema


def remap_punct(schema: Schema, ch: str) -> str:
    """Return the replacement for a punctuation character, or the character itself."""
    return schema.puncts.get(ch, ch)


def remap_text(schema: Schema, text: str) -> str:
    """Remap every character of a run of punctuation."""
    return "".join(schema.puncts.get(ch, ch) for ch in text)

"""Shared test fixtures."""

import pytest

from ajemi.dictionaries import emoji, sitelen
from ajemi.long_glyph import LongGlyphConfig
from ajemi.schema import build


@pytest.fixture
def small_schema():
    """The three-word dictionary used in the segmentation examples."""
    return build([("mi", "M"), ("lukin", "L"), ("e", "E")])


@pytest.fixture
def mama_schema():
    """A spelling that is also a prefix of a longer spelling."""
    return build([("ma", "A"), ("mama", "B")])


@pytest.fixture(scope="session")
def sitelen_schema():
    return sitelen()


@pytest.fixture(scope="session")
def emoji_schema():
    return emoji()


@pytest.fixture
def markers():
    """Long glyph config with readable markers and a single container K."""
    return LongGlyphConfig(
        wrappable=frozenset(["K"]),
        ala="ALA",
        wrap_start="(",
        wrap_end=")",
        neg_start="{",
        neg_end="}",
    )

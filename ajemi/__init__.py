"""
ajemi: toki pona input method core

Turns typed toki pona letters into sitelen pona (or sitelen emoji)
glyphs. Words can be abbreviated to any prefix no other word shares.

Basic Usage:
    import ajemi

    schema = ajemi.sitelen()
    result = ajemi.segment(schema, "tokipona")
    for seg in result.segments:
        print(f"{seg.spelling} -> {seg.glyph} [{seg.start}:{seg.end}]")

    # Or let an engine own the schema and long glyph processing
    engine = ajemi.Engine(schema, long_glyph=ajemi.SITELEN_LONG_GLYPH)
    print(engine.suggest("mipilinpona").text)
"""

from ajemi.dictionaries import emoji, load_rime_dict, sitelen
from ajemi.engine import Engine, Suggestion
from ajemi.long_glyph import (
    SITELEN_LONG_GLYPH,
    LongGlyphConfig,
    apply_long_glyph,
    process_long_glyph,
)
from ajemi.punctuation import remap_punct, remap_text
from ajemi.schema import Candidate, Duplicates, Exact, Schema, Unique, build
from ajemi.segmenter import AlphabetError, Segment, Segmentation, segment

__version__ = "0.1.0"


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Schema
    "build",
    "Schema",
    "Candidate",
    "Exact",
    "Unique",
    "Duplicates",
    # Segmentation
    "segment",
    "Segmentation",
    "Segment",
    # Punctuation
    "remap_punct",
    "remap_text",
    # Long glyphs
    "apply_long_glyph",
    "process_long_glyph",
    "LongGlyphConfig",
    "SITELEN_LONG_GLYPH",
    # Dictionaries
    "sitelen",
    "emoji",
    "load_rime_dict",
    # Engine
    "Engine",
    "Suggestion",
    # Exceptions
    "AlphabetError",
    # Version
    "get_version",
    "__version__",
]

"""
Input method engine.

The engine owns the current Schema and turns typed letters into the
text shown in the host's composition window. It holds no other state:
every call reads the schema reference once and works on that instance,
so a schema published mid-call only affects later calls.

Usage:
    from ajemi.engine import Engine

    engine = Engine.from_settings()
    engine.suggest("tokipona").text
    engine.remap_punct(".")

    # Switch dictionaries: build off the hot path, then publish
    engine.publish(emoji(), long_glyph=None)
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ajemi import settings
from ajemi.dictionaries import get_schema_factory, load_rime_dict
from ajemi.long_glyph import LongGlyphConfig, apply_long_glyph
from ajemi.punctuation import remap_punct
from ajemi.schema import Candidate, Schema, build
from ajemi.segmenter import Segmentation, segment

logger = logging.getLogger(__name__)

# publish() default: keep the engine's current long glyph config
_KEEP = object()


@dataclass(frozen=True, slots=True)
class Suggestion:
    """
    Composition text for one run of letters.

    Attributes:
        text: Final text handed to the host
        segmentation: Glyphs and offsets before long glyph processing
    """
    text: str
    segmentation: Segmentation


class Engine:
    """
    Segmenting engine over a swappable Schema.

    Reads never lock. publish() serializes writers and replaces the
    reference in a single assignment.
    """

    def __init__(
        self,
        schema: Schema,
        long_glyph: Optional[LongGlyphConfig] = None,
        strict: bool = False,
    ):
        # (schema, long glyph config), replaced as one reference
        self._state = (schema, long_glyph)
        self.strict = strict
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        schema_name: Optional[str] = None,
        dict_path: Optional[Path] = None,
        long_glyph: Optional[bool] = None,
        strict: Optional[bool] = None,
    ) -> "Engine":
        """
        Build an Engine from ajemi.settings (environment variables).

        Arguments that are not None override the matching setting.

        Raises:
            ValueError: If the schema name is unknown
            FileNotFoundError: If the Rime word table doesn't exist
        """
        factory, config = get_schema_factory(schema_name or settings.SCHEMA)
        dict_path = dict_path or settings.DICT_PATH
        if dict_path is not None:
            # Punctuation always comes from the named schema
            schema = build(load_rime_dict(dict_path), factory().puncts)
        else:
            schema = factory()
        if not (settings.LONG_GLYPH if long_glyph is None else long_glyph):
            config = None
        if strict is None:
            strict = settings.STRICT
        return cls(schema, long_glyph=config, strict=strict)

    @property
    def schema(self) -> Schema:
        return self._state[0]

    @property
    def long_glyph(self) -> Optional[LongGlyphConfig]:
        return self._state[1]

    def publish(self, schema: Schema, long_glyph=_KEEP) -> None:
        """
        Replace the schema (and long glyph config) for subsequent calls.

        Build the new schema before calling this; publishing itself does
        no work beyond swapping references. The current long glyph
        config is kept unless one is passed; pass None to turn it off.
        """
        with self._lock:
            if long_glyph is _KEEP:
                long_glyph = self._state[1]
            self._state = (schema, long_glyph)
        logger.info(f"Published schema with {len(schema)} keys")

    def suggest(self, letters: str) -> Suggestion:
        """
        Segment letters and apply long glyph processing.

        Raises:
            AlphabetError: If the engine is strict and letters contain
                characters outside the alphabet
        """
        schema, long_glyph = self._state
        result = segment(schema, letters, strict=self.strict)
        if long_glyph is not None:
            text = "".join(apply_long_glyph(result.glyphs, long_glyph))
        else:
            text = result.text
        return Suggestion(text=text, segmentation=result)

    def remap_punct(self, ch: str) -> str:
        return remap_punct(self.schema, ch)

    def candidates(self, key: str) -> Optional[Candidate]:
        """Raw candidate for a key, for showing alternates to the user."""
        return self.schema.lookup(key)

    def summary(self) -> str:
        lines = ["ajemi Engine"]
        lines.append(f"  Long glyph:   {'on' if self.long_glyph else 'off'}")
        lines.append(f"  Strict:       {'on' if self.strict else 'off'}")
        for sub_line in self.schema.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)

"""
Greedy longest-match segmentation of typed letters.

Offsets are Python string indices (code points) into the typed letters.
The embedded spellings are ASCII, so these indices coincide with the
UTF-16 code units of a host's composition buffer. That holds for any
table whose spellings stay in the Basic Multilingual Plane;
load_rime_dict() warns about spellings that do not.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ajemi.schema import Exact, Schema, Unique

logger = logging.getLogger(__name__)


class AlphabetError(ValueError):
    """
    Raised by strict segmentation when input contains characters that
    appear in no spelling.

    Attributes:
        letters: The rejected input
        offsets: Offsets of the offending characters
    """

    def __init__(self, letters: str, offsets: List[int]):
        self.letters = letters
        self.offsets = offsets
        chars = "".join(sorted({letters[i] for i in offsets}))
        super().__init__(f"characters outside the dictionary alphabet: {chars!r}")


@dataclass(slots=True)
class Segment:
    """A glyph and the span of typed letters that produced it."""
    glyph: str
    start: int
    end: int
    spelling: str

    def __repr__(self) -> str:
        return f"Segment({self.spelling!r} -> {self.glyph!r}, {self.start}:{self.end})"


@dataclass(frozen=True, slots=True)
class Segmentation:
    """
    Result of segmenting one run of letters.

    Attributes:
        letters: The typed letters
        glyphs: Emitted glyphs, left to right
        boundaries: End offset of the span behind each glyph
        dropped: Offsets of characters that matched nothing
    """
    letters: str
    glyphs: Tuple[str, ...]
    boundaries: Tuple[int, ...]
    dropped: Tuple[int, ...] = ()

    @property
    def text(self) -> str:
        return "".join(self.glyphs)

    @property
    def segments(self) -> List[Segment]:
        """Spans with start offsets restored, skipping dropped characters."""
        result = []
        start = 0
        dropped = set(self.dropped)
        for glyph, end in zip(self.glyphs, self.boundaries):
            while start in dropped:
                start += 1
            result.append(Segment(glyph, start, end, self.letters[start:end]))
            start = end
        return result

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(zip(self.boundaries, self.glyphs))

    def __len__(self) -> int:
        return len(self.glyphs)


def segment(schema: Schema, letters: str, strict: bool = False) -> Segmentation:
    """
    Segment letters into glyphs by greedy longest match.

    From the current offset, the longest remaining slice is tried first
    and shrunk one character at a time until it hits an Exact or Unique
    key. Duplicates never match. A character that cannot start any
    match is dropped and matching resumes after it.

    Args:
        schema: Built schema; read only
        letters: Typed letters
        strict: Reject characters outside the schema's alphabet instead
            of dropping them

    Returns:
        Segmentation with glyphs and end offsets

    Raises:
        AlphabetError: If strict and letters contain unknown characters

    Example:
        >>> schema = build([("mi", "M"), ("lukin", "L"), ("e", "E")])
        >>> segment(schema, "milukine").boundaries
        (2, 7, 8)
    """
    if strict:
        unknown = [i for i, ch in enumerate(letters) if ch not in schema.alphabet]
        if unknown:
            raise AlphabetError(letters, unknown)

    logger.debug(f"Segment {letters!r}")
    candidates = schema.candidates
    glyphs = []
    boundaries = []
    dropped = []
    start = 0
    end = len(letters)

    while start < end:
        candidate = candidates.get(letters[start:end])
        if isinstance(candidate, (Exact, Unique)):
            logger.debug(f"Found {candidate!r} for {letters[start:end]!r}")
            glyphs.append(candidate.glyph)
            boundaries.append(end)
            start = end
            end = len(letters)
        elif end - start > 1:
            end -= 1
        else:
            logger.debug(f"Dropped {letters[start]!r} at {start}")
            dropped.append(start)
            start += 1
            end = len(letters)

    return Segmentation(
        letters=letters,
        glyphs=tuple(glyphs),
        boundaries=tuple(boundaries),
        dropped=tuple(dropped),
    )

"""
Long glyph combination for sitelen pona.

Some glyphs ("containers") extend over the words that follow them. After
a container, a wrap-start marker is inserted and the region stays open
until the next negation marker (ala) or the end of the text, where the
wrap-end marker is written. A glyph followed by ala is enclosed in the
reverse long glyph markers, and when that same glyph is repeated right
after ala (the "X ala X" question form), the repeat is wrapped in plain
long glyph markers.

    K X Y       ->  K ( X Y )
    K ala       ->  { K } ala
    K ala K     ->  { K } ala ( K )

The markers, ala, and the container set are configuration; see
LongGlyphConfig and SITELEN_LONG_GLYPH.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True, slots=True)
class LongGlyphConfig:
    """
    Glyphs driving the long glyph pass.

    Attributes:
        wrappable: Glyphs that open a wrapping region
        ala: Negation marker
        wrap_start: Start of a long glyph
        wrap_end: End of a long glyph
        neg_start: Start of a reverse (negated) long glyph
        neg_end: End of a reverse long glyph
    """
    wrappable: frozenset
    ala: str
    wrap_start: str
    wrap_end: str
    neg_start: str
    neg_end: str


# sitelen pona UCSUR code points
ALA = "\U000F1902"
AWEN = "\U000F1908"
KEN = "\U000F1918"
KEPEKEN = "\U000F1919"
LON = "\U000F192C"
PI = "\U000F194D"
TAWA = "\U000F1969"

START_OF_LONG_GLYPH = "\U000F1997"
END_OF_LONG_GLYPH = "\U000F1998"
START_OF_REVERSE_LONG_GLYPH = "\U000F199A"
END_OF_REVERSE_LONG_GLYPH = "\U000F199B"

SITELEN_LONG_GLYPH = LongGlyphConfig(
    wrappable=frozenset([AWEN, KEN, KEPEKEN, LON, PI, TAWA]),
    ala=ALA,
    wrap_start=START_OF_LONG_GLYPH,
    wrap_end=END_OF_LONG_GLYPH,
    neg_start=START_OF_REVERSE_LONG_GLYPH,
    neg_end=END_OF_REVERSE_LONG_GLYPH,
)


def apply_long_glyph(
    glyphs: Sequence[str],
    config: LongGlyphConfig = SITELEN_LONG_GLYPH,
) -> List[str]:
    """
    Insert long glyph markers into a glyph sequence.

    Single left-to-right pass. The only backtracking is dropping a
    wrap-start marker that turned out to open an empty region.

    Args:
        glyphs: Glyphs produced by segmentation
        config: Markers and container set

    Returns:
        New glyph list with markers inserted
    """
    output: List[str] = []
    is_open = False
    repeat: Optional[str] = None

    for ch in glyphs:
        if ch == config.ala:
            if not output:
                output.append(ch)
                continue
            prev = output.pop()
            if prev == config.wrap_start and output:
                # The region opened right before ala is empty
                is_open = False
                prev = output.pop()
            if is_open:
                output.append(config.wrap_end)
                is_open = False
            output.append(config.neg_start)
            output.append(prev)
            output.append(config.neg_end)
            output.append(ch)
            repeat = prev
        elif repeat is not None:
            if ch == repeat:
                output.append(config.wrap_start)
                output.append(ch)
                output.append(config.wrap_end)
                repeat = None
            else:
                repeat = None
                output.append(ch)
                if ch in config.wrappable and not is_open:
                    output.append(config.wrap_start)
                    is_open = True
        else:
            output.append(ch)
            if ch in config.wrappable and not is_open:
                output.append(config.wrap_start)
                is_open = True

    if is_open:
        if output[-1] == config.wrap_start:
            output.pop()
        else:
            output.append(config.wrap_end)

    return output


def process_long_glyph(text: str, config: LongGlyphConfig = SITELEN_LONG_GLYPH) -> str:
    """Apply the long glyph pass to a string of single-character glyphs."""
    return "".join(apply_long_glyph(list(text), config))

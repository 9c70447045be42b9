"""
Embedded dictionaries.

Two tables ship with ajemi:

- sitelen: sitelen pona glyphs in the UCSUR private use block
  (U+F1900 onward), one glyph per word.
- emoji: sitelen emoji, where several words have more than one emoji
  (homophones; the first listed is the default).

Word tables in Rime's ``*.dict.yaml`` format can be read with
load_rime_dict() and passed to build() in place of these.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import yaml

from ajemi.long_glyph import SITELEN_LONG_GLYPH, LongGlyphConfig
from ajemi.schema import Schema, build

logger = logging.getLogger(__name__)


# ============================================================================
# sitelen pona
# ============================================================================

SITELEN_ENTRIES: List[Tuple[str, str]] = [
    ("a", "\U000F1900"),
    ("akesi", "\U000F1901"),
    ("ala", "\U000F1902"),
    ("alasa", "\U000F1903"),
    ("ale", "\U000F1904"),
    ("anpa", "\U000F1905"),
    ("ante", "\U000F1906"),
    ("anu", "\U000F1907"),
    ("awen", "\U000F1908"),
    ("e", "\U000F1909"),
    ("en", "\U000F190A"),
    ("esun", "\U000F190B"),
    ("ijo", "\U000F190C"),
    ("ike", "\U000F190D"),
    ("ilo", "\U000F190E"),
    ("insa", "\U000F190F"),
    ("jaki", "\U000F1910"),
    ("jan", "\U000F1911"),
    ("jelo", "\U000F1912"),
    ("jo", "\U000F1913"),
    ("kala", "\U000F1914"),
    ("kalama", "\U000F1915"),
    ("kama", "\U000F1916"),
    ("kasi", "\U000F1917"),
    ("ken", "\U000F1918"),
    ("kepeken", "\U000F1919"),
    ("kili", "\U000F191A"),
    ("kiwen", "\U000F191B"),
    ("ko", "\U000F191C"),
    ("kon", "\U000F191D"),
    ("kule", "\U000F191E"),
    ("kulupu", "\U000F191F"),
    ("kute", "\U000F1920"),
    ("la", "\U000F1921"),
    ("lape", "\U000F1922"),
    ("laso", "\U000F1923"),
    ("lawa", "\U000F1924"),
    ("len", "\U000F1925"),
    ("lete", "\U000F1926"),
    ("li", "\U000F1927"),
    ("lili", "\U000F1928"),
    ("linja", "\U000F1929"),
    ("lipu", "\U000F192A"),
    ("loje", "\U000F192B"),
    ("lon", "\U000F192C"),
    ("luka", "\U000F192D"),
    ("lukin", "\U000F192E"),
    ("lupa", "\U000F192F"),
    ("ma", "\U000F1930"),
    ("mama", "\U000F1931"),
    ("mani", "\U000F1932"),
    ("meli", "\U000F1933"),
    ("mi", "\U000F1934"),
    ("mije", "\U000F1935"),
    ("moku", "\U000F1936"),
    ("moli", "\U000F1937"),
    ("monsi", "\U000F1938"),
    ("mu", "\U000F1939"),
    ("mun", "\U000F193A"),
    ("musi", "\U000F193B"),
    ("mute", "\U000F193C"),
    ("nanpa", "\U000F193D"),
    ("nasa", "\U000F193E"),
    ("nasin", "\U000F193F"),
    ("nena", "\U000F1940"),
    ("ni", "\U000F1941"),
    ("nimi", "\U000F1942"),
    ("noka", "\U000F1943"),
    ("o", "\U000F1944"),
    ("olin", "\U000F1945"),
    ("ona", "\U000F1946"),
    ("open", "\U000F1947"),
    ("pakala", "\U000F1948"),
    ("pali", "\U000F1949"),
    ("palisa", "\U000F194A"),
    ("pan", "\U000F194B"),
    ("pana", "\U000F194C"),
    ("pi", "\U000F194D"),
    ("pilin", "\U000F194E"),
    ("pimeja", "\U000F194F"),
    ("pini", "\U000F1950"),
    ("pipi", "\U000F1951"),
    ("poka", "\U000F1952"),
    ("poki", "\U000F1953"),
    ("pona", "\U000F1954"),
    ("pu", "\U000F1955"),
    ("sama", "\U000F1956"),
    ("seli", "\U000F1957"),
    ("selo", "\U000F1958"),
    ("seme", "\U000F1959"),
    ("sewi", "\U000F195A"),
    ("sijelo", "\U000F195B"),
    ("sike", "\U000F195C"),
    ("sin", "\U000F195D"),
    ("sina", "\U000F195E"),
    ("sinpin", "\U000F195F"),
    ("sitelen", "\U000F1960"),
    ("sona", "\U000F1961"),
    ("soweli", "\U000F1962"),
    ("suli", "\U000F1963"),
    ("suno", "\U000F1964"),
    ("supa", "\U000F1965"),
    ("suwi", "\U000F1966"),
    ("tan", "\U000F1967"),
    ("taso", "\U000F1968"),
    ("tawa", "\U000F1969"),
    ("telo", "\U000F196A"),
    ("tenpo", "\U000F196B"),
    ("toki", "\U000F196C"),
    ("tomo", "\U000F196D"),
    ("tu", "\U000F196E"),
    ("unpa", "\U000F196F"),
    ("uta", "\U000F1970"),
    ("utala", "\U000F1971"),
    ("walo", "\U000F1972"),
    ("wan", "\U000F1973"),
    ("waso", "\U000F1974"),
    ("wawa", "\U000F1975"),
    ("weka", "\U000F1976"),
    ("wile", "\U000F1977"),
    ("namako", "\U000F1978"),
    ("kin", "\U000F1979"),
    ("oko", "\U000F197A"),
    ("kipisi", "\U000F197B"),
    ("leko", "\U000F197C"),
    ("monsuta", "\U000F197D"),
    ("tonsi", "\U000F197E"),
    ("jasima", "\U000F197F"),
    ("kijetesantakalu", "\U000F1980"),
    ("soko", "\U000F1981"),
    ("meso", "\U000F1982"),
    ("epiku", "\U000F1983"),
    ("kokosila", "\U000F1984"),
    ("lanpan", "\U000F1985"),
    ("n", "\U000F1986"),
    ("misikeke", "\U000F1987"),
    ("ku", "\U000F1988"),
    ("pake", "\U000F19A0"),
    ("apeja", "\U000F19A1"),
    ("majuna", "\U000F19A2"),
    ("powe", "\U000F19A3"),
]

SITELEN_PUNCTS: List[Tuple[str, str]] = [
    ("[", "\U000F1990"),
    ("]", "\U000F1991"),
    ("^", "\U000F1995"),
    ("*", "\U000F1996"),
    ("(", "\U000F1997"),
    (")", "\U000F1998"),
    ("{", "\U000F199A"),
    ("}", "\U000F199B"),
    (".", "\U000F199C"),
    (":", "\U000F199D"),
    ("<", "「"),
    (">", "」"),
    ("-", "\u200d"),  # ZWJ
    (" ", "\u3000"),  # ideographic space
]


# ============================================================================
# sitelen emoji
# ============================================================================

EMOJI_ENTRIES: List[Tuple[str, str]] = [
    ("a", "🅰️"),
    ("akesi", "🦎"),
    ("akesi", "🐸"),
    ("ala", "❌"),
    ("alasa", "🏹"),
    ("ale", "🌌"),
    ("anpa", "🧎"),
    ("anpa", "🙇"),
    ("ante", "🔀"),
    ("anu", "🤷"),
    ("awen", "⚓"),
    ("e", "⏩"),
    ("en", "🤝"),
    ("esun", "🛒"),
    ("ijo", "🐚"),
    ("ike", "😔"),
    ("ike", "👎"),
    ("ilo", "🔦"),
    ("insa", "🗳️"),
    ("jaki", "💩"),
    ("jan", "🧑"),
    ("jelo", "🍋"),
    ("jo", "👜"),
    ("kala", "🐟"),
    ("kala", "🐙"),
    ("kalama", "👏"),
    ("kama", "🛬"),
    ("kasi", "🌱"),
    ("ken", "💪"),
    ("kepeken", "✍️"),
    ("kili", "🍎"),
    ("kiwen", "💎"),
    ("ko", "🍦"),
    ("kon", "💨"),
    ("kule", "🌈"),
    ("kulupu", "👥"),
    ("kute", "👂"),
    ("la", "ℹ️"),
    ("la", "💁"),
    ("lape", "😴"),
    ("laso", "☘️"),
    ("lawa", "👑"),
    ("len", "🧣"),
    ("lete", "❄️"),
    ("li", "▶️"),
    ("lili", "🐁"),
    ("linja", "🧶"),
    ("lipu", "🍁"),
    ("loje", "👅"),
    ("lon", "⏺️"),
    ("lon", "✅"),
    ("lon", "🫴"),
    ("luka", "🖐️"),
    ("lukin", "👀"),
    ("lupa", "🚪"),
    ("ma", "🏝️"),
    ("mama", "🍼"),
    ("mani", "🐮"),
    ("meli", "👩"),
    ("meli", "🚺"),
    ("mi", "👇"),
    ("mi", "🅿️"),
    ("mije", "👨"),
    ("mije", "🚹"),
    ("moku", "🍜"),
    ("moli", "😵"),
    ("monsi", "🍑"),
    ("mu", "🐽"),
    ("mun", "🌙"),
    ("musi", "🎭"),
    ("mute", "👐"),
    ("nanpa", "#️⃣"),
    ("nasa", "🌀"),
    ("nasin", "🛤️"),
    ("nena", "🗻"),
    ("ni", "⬇️"),
    ("ni", "⬆️"),
    ("ni", "⬅️"),
    ("ni", "➡️"),
    ("nimi", "📛"),
    ("noka", "🦵"),
    ("o", "🅾️"),
    ("olin", "💕"),
    ("ona", "👈"),
    ("ona", "♋️"),
    ("open", "🎬"),
    ("pakala", "💥"),
    ("pali", "🏗️"),
    ("palisa", "📏"),
    ("pan", "🍞"),
    ("pana", "🙌"),
    ("pi", "📎"),
    ("pilin", "❤️"),
    ("pimeja", "🎱"),
    ("pini", "🏁"),
    ("pini", "🛑"),
    ("pipi", "🐛"),
    ("poka", "👯"),
    ("poki", "📦"),
    ("pona", "😌"),
    ("pona", "👍"),
    ("pu", "🧘"),
    ("sama", "⚖️"),
    ("seli", "🔥"),
    ("selo", "🍌"),
    ("seme", "❓"),
    ("sewi", "☁️"),
    ("sijelo", "🧍"),
    ("sike", "⭕"),
    ("sin", "✨"),
    ("sina", "👆"),
    ("sina", "6️⃣"),
    ("sinpin", "🗿"),
    ("sitelen", "🎨"),
    ("sitelen", "🖼️"),
    ("sona", "🧠"),
    ("soweli", "🦔"),
    ("suli", "🐘"),
    ("suno", "☀️"),
    ("supa", "🛏️"),
    ("suwi", "🍬"),
    ("tan", "↩️"),
    ("taso", "🚦"),
    ("taso", "🚥"),
    ("tawa", "🛫"),
    ("telo", "💧"),
    ("tenpo", "🕒"),
    ("toki", "💬"),
    ("tomo", "🏠"),
    ("tu", "⏸️"),
    ("unpa", "🍆"),
    ("uta", "👄"),
    ("utala", "⚔️"),
    ("utala", "🆚"),
    ("walo", "🐑"),
    ("wan", "1️⃣"),
    ("waso", "🐦"),
    ("wawa", "⚡"),
    ("weka", "🆑"),
    ("wile", "🙏"),
    ("wile", "🧲"),
    ("epiku", "😁"),
    ("jasima", "🪞"),
    ("jasima", "🪩"),
    ("kijetesantakalu", "🦡"),
    ("kijetesantakalu", "🦝"),
    ("kin", "*️⃣"),
    ("kipisi", "✂️"),
    ("kokosila", "🐊"),
    ("ku", "🔬"),
    ("lanpan", "🤳"),
    ("leko", "🧱"),
    ("meso", "😑"),
    ("misikeke", "💊"),
    ("monsuta", "👻"),
    ("n", "🆖"),
    ("namako", "🌶️"),
    ("oko", "👁️"),
    ("soko", "🍄"),
    ("tonsi", "⚧️"),
    ("majuna", "🪷"),
    ("majuna", "💾"),
    ("majuna", "🧓"),
    ("su", "🧙"),
    ("su", "🧵"),
]

EMOJI_PUNCTS: List[Tuple[str, str]] = [
    ("[", "\U0001F58C"),
    ("]", "\U0001F58C"),
]


# ============================================================================
# Schema factories
# ============================================================================

def sitelen() -> Schema:
    """Build the sitelen pona schema."""
    return build(SITELEN_ENTRIES, SITELEN_PUNCTS)


def emoji() -> Schema:
    """Build the sitelen emoji schema."""
    return build(EMOJI_ENTRIES, EMOJI_PUNCTS)


# name -> (factory, long glyph config or None)
SCHEMAS: Dict[str, Tuple[Callable[[], Schema], Optional[LongGlyphConfig]]] = {
    "sitelen": (sitelen, SITELEN_LONG_GLYPH),
    "emoji": (emoji, None),
}


def get_schema_factory(name: str) -> Tuple[Callable[[], Schema], Optional[LongGlyphConfig]]:
    """
    Look up a registered schema by name.

    Raises:
        ValueError: If no schema has that name
    """
    try:
        return SCHEMAS[name]
    except KeyError:
        known = ", ".join(sorted(SCHEMAS))
        raise ValueError(f"unknown schema {name!r} (known: {known})") from None


# ============================================================================
# Rime word tables
# ============================================================================

# Column order when the header has no "columns" key
RIME_COLUMNS = ("text", "code", "weight")


def load_rime_dict(path: Path) -> List[Tuple[str, str]]:
    """
    Read (spelling, glyph) entries from a Rime ``*.dict.yaml`` file.

    The YAML header between ``---`` and ``...`` is parsed for its
    ``columns`` list, which says where the glyph (``text``) and the
    spelling (``code``) sit in each row; without one the Rime default
    ``text, code, weight`` applies. Entry order is preserved, so the
    first glyph listed for a spelling stays primary.

    Segment offsets are code point indices. They equal a host's UTF-16
    units only while every spelling stays in the Basic Multilingual
    Plane; spellings outside it are loaded but logged as a warning.

    Args:
        path: Path to the dictionary file

    Returns:
        List of (spelling, glyph) pairs

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the header is not valid YAML or its columns
            lack ``text`` or ``code``
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary not found at {path}")

    with path.open(encoding="utf-8-sig") as f:
        lines = f.read().splitlines()

    # Files without a YAML header are plain tables
    body_start = 0
    header = {}
    if "..." in lines:
        body_start = lines.index("...") + 1
        header = _parse_rime_header(path, lines[:body_start - 1])

    columns = list(header.get("columns") or RIME_COLUMNS)
    try:
        text_col = columns.index("text")
        code_col = columns.index("code")
    except ValueError:
        raise ValueError(f"{path}: columns {columns} need both 'text' and 'code'") from None
    width = max(text_col, code_col) + 1

    entries = []
    for lineno, line in enumerate(lines[body_start:], body_start + 1):
        if not line.strip() or line.startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) < width or not parts[text_col] or not parts[code_col]:
            logger.warning(f"{path}: skipping malformed line {lineno}: {line!r}")
            continue
        spelling = parts[code_col]
        if any(ord(ch) > 0xFFFF for ch in spelling):
            logger.warning(
                f"{path}: line {lineno}: spelling {spelling!r} leaves the BMP; "
                f"offsets will not match UTF-16 units"
            )
        entries.append((spelling, parts[text_col]))

    logger.info(f"Loaded {len(entries)} entries from {path}")
    return entries


def _parse_rime_header(path: Path, lines: List[str]) -> dict:
    # Comments may precede the "---" document start
    if "---" in lines:
        lines = lines[lines.index("---") + 1:]
    try:
        header = yaml.safe_load("\n".join(lines))
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: invalid YAML header: {e}") from e
    return header if isinstance(header, dict) else {}

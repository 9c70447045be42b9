"""
Schema construction for ajemi.

A schema indexes a closed dictionary of (spelling, glyph) pairs so that
every full spelling and every proper prefix of a spelling can be looked
up in one step. Each key carries a candidate that explains why it maps
to a glyph:

- Exact: the key is itself a spelling. Homophones and the glyphs of
  longer words passing through this key are kept as alternates.
- Unique: the key abbreviates exactly one spelling.
- Duplicates: the key abbreviates two or more spellings and never
  resolves during plain segmentation.

Full spellings are additionally stored in a marisa_trie.Trie for prefix
completion queries.

Usage:
    from ajemi.schema import build

    schema = build([("mi", "M"), ("lukin", "L")], puncts={".": "。"})
    schema.lookup("luk")      # Unique(glyph='L')
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

import marisa_trie

logger = logging.getLogger(__name__)


# ============================================================================
# Candidates
# ============================================================================

@dataclass(frozen=True, slots=True)
class Exact:
    """
    The key is an exact spelling of a glyph.

    Attributes:
        glyph: Glyph of the first entry with this spelling
        alternates: Homophones and glyphs of longer spellings sharing
            this key as a prefix, in input order
    """
    glyph: str
    alternates: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Unique:
    """The key is a proper prefix of exactly one spelling."""
    glyph: str


@dataclass(frozen=True, slots=True)
class Duplicates:
    """The key is a proper prefix shared by two or more spellings."""
    glyphs: Tuple[str, ...]


Candidate = Union[Exact, Unique, Duplicates]


# ============================================================================
# Schema
# ============================================================================

@dataclass(frozen=True, eq=False)
class Schema:
    """
    Immutable lookup structure shared by every segmentation call.

    Reconfiguration builds a new Schema; an existing one is never patched.

    Attributes:
        candidates: key (spelling or prefix) -> Candidate
        puncts: input character -> replacement text
        alphabet: every character appearing in any spelling
        spellings: trie over full spellings, for completion queries
    """
    candidates: Mapping[str, Candidate]
    puncts: Mapping[str, str]
    alphabet: frozenset = frozenset()
    spellings: marisa_trie.Trie = field(default_factory=marisa_trie.Trie, repr=False)

    def lookup(self, key: str) -> Optional[Candidate]:
        return self.candidates.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.candidates

    def __len__(self) -> int:
        return len(self.candidates)

    def has_prefix(self, prefix: str) -> bool:
        """Check if any spelling starts with the given prefix."""
        try:
            next(iter(self.spellings.iterkeys(prefix)))
            return True
        except StopIteration:
            return False

    def completions(self, prefix: str) -> List[str]:
        """
        All full spellings starting with a prefix.

        Intended for a disambiguation UI listing what an ambiguous
        abbreviation could mean; segmentation never consults it.

        Args:
            prefix: Typed letters

        Returns:
            Spellings in sorted order
        """
        return sorted(self.spellings.keys(prefix))

    def summary(self) -> str:
        counts = {"exact": 0, "unique": 0, "duplicates": 0}
        for candidate in self.candidates.values():
            if isinstance(candidate, Exact):
                counts["exact"] += 1
            elif isinstance(candidate, Unique):
                counts["unique"] += 1
            else:
                counts["duplicates"] += 1
        lines = ["Schema"]
        lines.append(f"  Spellings:    {counts['exact']:,}")
        lines.append(f"  Unique keys:  {counts['unique']:,}")
        lines.append(f"  Ambiguous:    {counts['duplicates']:,}")
        lines.append(f"  Punctuators:  {len(self.puncts)}")
        lines.append(f"  Alphabet:     {''.join(sorted(self.alphabet))}")
        return "\n".join(lines)


# ============================================================================
# Building
# ============================================================================

def build(
    entries: Iterable[Tuple[str, str]],
    puncts: Union[Mapping[str, str], Iterable[Tuple[str, str]]] = (),
) -> Schema:
    """
    Build a Schema from dictionary entries and a punctuation table.

    Entries are processed in input order. A repeated spelling adds a
    homophone to the existing Exact candidate. A prefix that equals a
    full spelling keeps its Exact identity; the longer word's glyph is
    recorded as an alternate instead.

    Args:
        entries: (spelling, glyph) pairs
        puncts: (character, replacement) pairs or a mapping

    Returns:
        The built Schema

    Raises:
        ValueError: If a spelling is empty
    """
    # Mutable working form: key -> [kind, glyph, extra_glyphs]
    table = {}
    alphabet = set()
    spellings = []
    count = 0
    homophones = 0

    for spelling, glyph in entries:
        if not spelling:
            raise ValueError(f"empty spelling for glyph {glyph!r}")
        count += 1

        existing = table.get(spelling)
        if existing is not None and existing[0] is Exact:
            existing[2].append(glyph)
            homophones += 1
            continue
        # An earlier longer spelling may have claimed this key as a prefix;
        # those glyphs become alternates of the exact entry.
        if existing is None:
            table[spelling] = [Exact, glyph, []]
        elif existing[0] is Unique:
            table[spelling] = [Exact, glyph, [existing[1]]]
        else:
            table[spelling] = [Exact, glyph, list(existing[2])]

        alphabet.update(spelling)
        spellings.append(spelling)

        for length in range(1, len(spelling)):
            prefix = spelling[:length]
            slot = table.get(prefix)
            if slot is None:
                table[prefix] = [Unique, glyph, []]
            elif slot[0] is Unique:
                table[prefix] = [Duplicates, None, [slot[1], glyph]]
            else:
                slot[2].append(glyph)

    candidates = {key: _freeze(slot) for key, slot in table.items()}

    if isinstance(puncts, Mapping):
        punct_items = puncts.items()
    else:
        punct_items = puncts

    schema = Schema(
        candidates=MappingProxyType(candidates),
        puncts=MappingProxyType(dict(punct_items)),
        alphabet=frozenset(alphabet),
        spellings=marisa_trie.Trie(spellings),
    )
    logger.info(
        f"Built schema: {count} entries, {len(candidates)} keys, "
        f"{homophones} homophones"
    )
    return schema


def _freeze(slot: list) -> Candidate:
    kind, glyph, extra = slot
    if kind is Exact:
        return Exact(glyph, tuple(extra))
    if kind is Unique:
        return Unique(glyph)
    return Duplicates(tuple(extra))

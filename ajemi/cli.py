"""
CLI interface for ajemi.

Usage:
    ajemi "mi lukin e sina"
    ajemi -d "tokipona"
    ajemi --json --emoji "soweli"
    echo "jan pona" | ajemi
"""

import argparse
import json
import logging
import re
import sys
from typing import List, Optional, Tuple

from ajemi import __version__, settings
from ajemi.engine import Engine, Suggestion

logger = logging.getLogger(__name__)

# Runs of letters are segmented; everything else goes through punctuation
_RUN_RE = re.compile(r"[^\W\d_]+|[\W\d_]")


# ============================================================================
# Conversion
# ============================================================================

def convert(engine: Engine, text: str) -> List[Tuple[int, str, Optional[Suggestion]]]:
    """
    Split text into letter runs and punctuation and convert each.

    Returns:
        (offset, output, suggestion) per piece; suggestion is None for
        punctuation
    """
    pieces = []
    for m in _RUN_RE.finditer(text):
        piece = m.group()
        if piece[0].isalpha():
            suggestion = engine.suggest(piece)
            pieces.append((m.start(), suggestion.text, suggestion))
        else:
            pieces.append((m.start(), engine.remap_punct(piece), None))
    return pieces


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(pieces) -> str:
    return "".join(output for _, output, _ in pieces)


def format_detailed(pieces) -> str:
    """
    Converted text followed by one line per glyph span.

    Offsets are relative to the whole input.
    """
    lines = [format_default(pieces)]
    lines.append("─" * 40)
    for offset, output, suggestion in pieces:
        if suggestion is None:
            lines.append(f"{text_repr(output)}  [{offset}:{offset + 1}] (punctuation)")
            continue
        segmentation = suggestion.segmentation
        for seg in segmentation.segments:
            lines.append(
                f"{seg.spelling} → {seg.glyph}  [{offset + seg.start}:{offset + seg.end}]"
            )
        for i in segmentation.dropped:
            lines.append(f"{segmentation.letters[i]} ✗  [{offset + i}:{offset + i + 1}] (dropped)")
    return "\n".join(lines)


def format_json(pieces) -> str:
    data = []
    for offset, output, suggestion in pieces:
        if suggestion is None:
            data.append({"type": "punct", "start": offset, "text": output})
            continue
        segmentation = suggestion.segmentation
        data.append({
            "type": "letters",
            "start": offset,
            "letters": segmentation.letters,
            "text": output,
            "segments": [
                {
                    "spelling": seg.spelling,
                    "glyph": seg.glyph,
                    "start": offset + seg.start,
                    "end": offset + seg.end,
                }
                for seg in segmentation.segments
            ],
            "dropped": [offset + i for i in segmentation.dropped],
        })
    return json.dumps(data, ensure_ascii=False, indent=2)


def text_repr(text: str) -> str:
    """Show whitespace and invisible replacements readably."""
    if text.isprintable() and not text.isspace():
        return text
    return repr(text)


# ============================================================================
# Main
# ============================================================================

def build_engine(args) -> Engine:
    return Engine.from_settings(
        schema_name="emoji" if args.emoji else None,
        dict_path=args.dict,
        long_glyph=False if args.plain else None,
        strict=True if args.strict else None,
    )


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ajemi",
        description="Convert toki pona letters to sitelen pona glyphs",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Letters to convert (read from stdin if omitted)",
    )
    parser.add_argument(
        "--emoji", "-e",
        action="store_true",
        help="Use the sitelen emoji dictionary",
    )
    parser.add_argument(
        "--plain", "-p",
        action="store_true",
        help="Skip long glyph processing",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject letters outside the dictionary alphabet",
    )
    parser.add_argument(
        "--dict",
        metavar="PATH",
        default=None,
        help="Rime *.dict.yaml word table to use instead of the built-in one",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--detail", "-d",
        action="store_true",
        help="Show the letter span behind each glyph",
    )
    output.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output spans as JSON",
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit",
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"ajemi {__version__}")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if parsed.text:
        text = " ".join(parsed.text)
    else:
        text = sys.stdin.read().strip()

    if not text:
        parser.print_help()
        return 1

    try:
        engine = build_engine(parsed)
        pieces = convert(engine, text)

        if parsed.json:
            print(format_json(pieces))
        elif parsed.detail:
            print(format_detailed(pieces))
        else:
            print(format_default(pieces))

    except Exception as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

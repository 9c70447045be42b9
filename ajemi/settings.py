"""
Settings and configuration for ajemi.

Values are read from the environment once, at import.
"""

import os
from pathlib import Path
from typing import Optional


def _flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


# Schema to start with: "sitelen" or "emoji"
SCHEMA = os.environ.get("AJEMI_SCHEMA", "sitelen")

# Apply the long glyph pass when the schema has a long glyph config
LONG_GLYPH = _flag("AJEMI_LONG_GLYPH", True)

# Reject letters outside the dictionary alphabet instead of dropping them
STRICT = _flag("AJEMI_STRICT", False)

# Rime word table used instead of the embedded one
_dict_path = os.environ.get("AJEMI_DICT_PATH")
DICT_PATH: Optional[Path] = Path(_dict_path) if _dict_path else None

# Debug mode
DEBUG = _flag("AJEMI_DEBUG", False)

"""Flattening modules.

Handles:
- Key styles (how parent and child keys are joined)
- Flattening nested maps, JSON text and record batches
- Flattening errors
"""

from .errors import FlattenError, InvalidInputError, TextFormatError
from .flatten import (
    Flattener,
    NodeKind,
    classify,
    flatten,
    flatten_json,
    flatten_records,
)
from .styles import (
    DOT_STYLE,
    PATH_STYLE,
    RAILS_STYLE,
    STYLES,
    UNDERSCORE_STYLE,
    KeyMerger,
    SeparatorStyle,
    get_style,
)

__all__ = [
    # Styles
    "KeyMerger",
    "SeparatorStyle",
    "DOT_STYLE",
    "PATH_STYLE",
    "RAILS_STYLE",
    "UNDERSCORE_STYLE",
    "STYLES",
    "get_style",
    # Flattening
    "Flattener",
    "NodeKind",
    "classify",
    "flatten",
    "flatten_json",
    "flatten_records",
    # Errors
    "FlattenError",
    "InvalidInputError",
    "TextFormatError",
]

"""flatkeys - flatten nested maps and JSON into single-level key/value pairs."""

from .config import FlattenSettings
from .transform import (
    DOT_STYLE,
    PATH_STYLE,
    RAILS_STYLE,
    STYLES,
    UNDERSCORE_STYLE,
    FlattenError,
    Flattener,
    InvalidInputError,
    KeyMerger,
    SeparatorStyle,
    TextFormatError,
    flatten,
    flatten_json,
    flatten_records,
    get_style,
)
from .utils import setup_logging

__version__ = "1.0.1"

__all__ = [
    "flatten",
    "flatten_json",
    "flatten_records",
    "Flattener",
    "FlattenSettings",
    "KeyMerger",
    "SeparatorStyle",
    "DOT_STYLE",
    "PATH_STYLE",
    "RAILS_STYLE",
    "UNDERSCORE_STYLE",
    "STYLES",
    "get_style",
    "FlattenError",
    "InvalidInputError",
    "TextFormatError",
    "setup_logging",
]

"""JSON flattening utilities.

Nested maps and sequences are collapsed into a single-level dict whose keys
are built from the path to each scalar leaf. How a parent key and a child key
are joined is decided by a key merger (see ``styles``).

Traversal follows dict insertion order, so when two paths compose to the same
flat key the one visited last wins. Recursion depth equals nesting depth;
extremely deep input raises ``RecursionError``. Callers must not mutate the
input while it is being flattened.
"""

import json
import logging
import re
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Optional

from flatkeys.transform.errors import InvalidInputError, TextFormatError
from flatkeys.transform.styles import DOT_STYLE, KeyMerger
from flatkeys.utils.logging_config import setup_logging
from flatkeys.utils.timing import timed_operation

if TYPE_CHECKING:
    from flatkeys.config import FlattenSettings

logger = logging.getLogger(__name__)

_JSON_OBJECT_START = re.compile(r"^\s*\{")


class NodeKind(Enum):
    """Kind of a value inside a nested structure."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(value: Any) -> NodeKind:
    """Classify a value as a mapping, a sequence, or a scalar.

    Only lists and tuples count as sequences; strings, bytes and any other
    object are scalars and are copied to the output as-is.
    """
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def _children(nested: Any, kind: NodeKind) -> Iterable[tuple[str, Any]]:
    if kind is NodeKind.MAPPING:
        return nested.items()
    if kind is NodeKind.SEQUENCE:
        return ((str(i), v) for i, v in enumerate(nested))
    raise InvalidInputError(type(nested).__name__)


def _flatten(
    top: bool,
    flat_map: dict,
    nested: Any,
    prefix: str,
    merger: KeyMerger,
) -> None:
    for key, value in _children(nested, classify(nested)):
        if not isinstance(key, str):
            raise InvalidInputError(
                type(key).__name__, "Not a valid input: map keys must be strings"
            )
        new_key = merger(top, prefix, key)

        kind = classify(value)
        if kind is NodeKind.SCALAR:
            flat_map[new_key] = value
        else:
            _flatten(False, flat_map, value, new_key, merger)


def flatten(
    nested: Mapping,
    prefix: str = "",
    merger: KeyMerger = DOT_STYLE,
) -> dict:
    """Flatten a nested mapping.

    Values may be mappings, lists/tuples and scalars. Keys in the result are
    composed from the descending mapping keys and sequence indexes. Mapping
    keys must be strings.

    Args:
        nested: The nested mapping to flatten
        prefix: Joined to each top-level key without a separator
        merger: Key merger deciding how keys are joined

    Returns:
        New flat dict of scalar values

    Raises:
        InvalidInputError: If ``nested`` is not a mapping, or a mapping key
            is not a string

    Example:
        >>> flatten({"a": {"b": 1, "c": [2, 3]}})
        {'a.b': 1, 'a.c.0': 2, 'a.c.1': 3}
    """
    if classify(nested) is not NodeKind.MAPPING:
        raise InvalidInputError(type(nested).__name__)

    flat_map: dict = {}
    _flatten(True, flat_map, nested, prefix, merger)
    return flat_map


def flatten_json(
    nested_str: str,
    prefix: str = "",
    merger: KeyMerger = DOT_STYLE,
) -> str:
    """Flatten a JSON object given as text and return the result as JSON text.

    The text must start with ``{`` (after optional whitespace); anything else,
    including ``null``, is rejected before parsing. Output keys are sorted.
    NaN and Infinity are not valid JSON and cannot be written out.

    Raises:
        TextFormatError: If the text does not start with a JSON object
        json.JSONDecodeError: If the text is not valid JSON
        ValueError: If a value is NaN or Infinity
    """
    if not _JSON_OBJECT_START.match(nested_str):
        raise TextFormatError()

    nested = json.loads(nested_str)
    flat_map = flatten(nested, prefix, merger)

    logger.debug(
        f"Flattened JSON object into {len(flat_map)} keys",
        extra={"key_count": len(flat_map)}
    )

    return json.dumps(
        flat_map,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def flatten_records(
    records: Iterable[Mapping],
    prefix: str = "",
    merger: KeyMerger = DOT_STYLE,
) -> list[dict]:
    """Flatten a batch of nested records.

    Args:
        records: Nested mappings
        prefix: Joined to each top-level key without a separator
        merger: Key merger deciding how keys are joined

    Returns:
        List of flat dicts, in input order
    """
    flattened = []

    with timed_operation("flatten_records", logger) as timer:
        for i, record in enumerate(records):
            try:
                flattened.append(flatten(record, prefix, merger))
            except Exception as e:
                logger.error(
                    f"Error flattening record at index {i}: {e}",
                    extra={"record_index": i, "error": str(e)}
                )
                raise

        timer.extra["record_count"] = len(flattened)

    return flattened


class Flattener:
    """Flattens nested data with a fixed prefix and key merger."""

    def __init__(self, prefix: str = "", merger: KeyMerger = DOT_STYLE):
        self.prefix = prefix
        self.merger = merger

    @classmethod
    def from_settings(cls, settings: Optional["FlattenSettings"] = None) -> "Flattener":
        """Build a flattener from settings (read from the environment if omitted).

        Also configures the ``flatkeys`` logger at the settings log level.
        """
        from flatkeys.config import FlattenSettings

        settings = settings or FlattenSettings.from_env()
        setup_logging(level=settings.log_level)
        return cls(prefix=settings.prefix, merger=settings.merger)

    def flatten(self, nested: Mapping) -> dict:
        return flatten(nested, self.prefix, self.merger)

    def flatten_json(self, nested_str: str) -> str:
        return flatten_json(nested_str, self.prefix, self.merger)

    def flatten_records(self, records: Iterable[Mapping]) -> list[dict]:
        return flatten_records(records, self.prefix, self.merger)

    def __repr__(self) -> str:
        return f"Flattener(prefix={self.prefix!r}, merger={self.merger!r})"

"""Key composition styles for flattened keys.

A key merger is any callable taking ``(top, key, subkey)`` and returning
the combined key. ``top`` is True only for the children of the outermost
container, where ``key`` is the caller-supplied prefix.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable

KeyMerger = Callable[[bool, str, str], str]


@dataclass(frozen=True)
class SeparatorStyle:
    """Join nested keys with fixed strings.

    For nested keys "f" and "g", with "f" at the root, the flat key is
    ``f{before}{middle}g{after}``. Any field may be blank; use either
    ``middle`` or ``before``/``after``.
    """

    before: str = ""
    middle: str = ""
    after: str = ""

    def __call__(self, top: bool, key: str, subkey: str) -> str:
        if top:
            return key + subkey
        return key + self.before + self.middle + subkey + self.after


# e.g. "a.b.1.c.d"
DOT_STYLE = SeparatorStyle(middle=".")

# e.g. "a/b/1/c/d"
PATH_STYLE = SeparatorStyle(middle="/")

# e.g. "a[b][1][c][d]"
RAILS_STYLE = SeparatorStyle(before="[", after="]")

# e.g. "a_b_1_c_d"
UNDERSCORE_STYLE = SeparatorStyle(middle="_")

STYLES = MappingProxyType({
    "dot": DOT_STYLE,
    "path": PATH_STYLE,
    "rails": RAILS_STYLE,
    "underscore": UNDERSCORE_STYLE,
})


def get_style(name: str) -> SeparatorStyle:
    """Look up a preset style by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name
    """
    style = STYLES.get(name.strip().lower())
    if style is None:
        raise ValueError(
            f"Unknown key style: {name!r} (expected one of {', '.join(STYLES)})"
        )
    return style

"""Character-class pattern composition.

The accepted alphabet of a validation call is the union of the variant's base class and whatever the
options switch on. Composition is a pure function cached per flag combination; validators never keep
a mutable pattern of their own.
"""

from __future__ import annotations

import re
from functools import lru_cache

NUMERIC_CLASS = r"[0-9]"

# Full-width punctuation (U+3000 itself is whitespace), kana, CJK ideographs, full-width forms.
FULL_WIDTH_CLASS = (
    r"[\u3001-\u303f\u3040-\u309f\u30a0-\u30ff\u3400-\u4dbf\u4e00-\u9fff"
    r"\uf900-\ufaff\uff01-\uff60\uffe0-\uffe6]"
)

# Half-width space and ideographic (full-width) space.
WHITESPACE_CLASS = r"[ \u3000]"
ALLOWED_WHITESPACE = frozenset({" ", "\u3000"})

_NEVER_MATCHES = re.compile(r"(?!)")


@lru_cache(maxsize=128)
def compose_pattern(
        base_pattern: str | None,
        *,
        allow_numeric: bool = False,
        allow_full_width: bool = False,
        allow_whitespace: bool = False,
) -> re.Pattern[str]:
    """Build the anchored pattern a whole value must match.

    Use `pattern.fullmatch(value)`; a partial match never counts.
    """

    alternatives: list[str] = []
    if base_pattern:
        alternatives.append(base_pattern)
    if allow_numeric:
        alternatives.append(NUMERIC_CLASS)
    if allow_full_width:
        alternatives.append(FULL_WIDTH_CLASS)
    if allow_whitespace:
        alternatives.append(WHITESPACE_CLASS)

    if not alternatives:
        return _NEVER_MATCHES
    return re.compile(r"(?:" + "|".join(alternatives) + r")+")


def has_forbidden_whitespace(text: str, *, allow_whitespace: bool) -> bool:
    """Whether `text` contains whitespace the options do not allow."""

    for ch in text:
        if not ch.isspace():
            continue
        if not allow_whitespace or ch not in ALLOWED_WHITESPACE:
            return True
    return False

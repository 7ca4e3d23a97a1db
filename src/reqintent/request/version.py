"""API version segment detection.

A version segment looks like `v<digits><separator><digits>`, e.g. `v1.0`, or `v1_0` when the
operator configured `_` as the separator to avoid dots in URLs. The match itself is permissive (any
non-digit filler is captured) so the resolver can tell "not a version" apart from "a version written
with the wrong separator".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class VersionMatch:
    """Outcome of inspecting one path segment."""

    matched: bool
    raw_version_text: str | None = None
    filler: str | None = None

    def uses_separator(self, separator: str) -> bool:
        """Whether the text between the two digit runs is exactly the configured separator."""

        return self.matched and self.filler == separator

    def version_number(self, separator: str) -> float:
        """Normalize the raw text to a dotted decimal and parse it."""

        if not self.matched or self.raw_version_text is None:
            raise ValueError("segment is not a version segment")
        return float(self.raw_version_text.replace(separator, "."))


NO_MATCH = VersionMatch(matched=False)


@lru_cache(maxsize=32)
def _version_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(
        rf"v(?P<version>[0-9]+(?P<filler>{re.escape(separator)}|[^0-9]*)[0-9]+)",
        flags=re.IGNORECASE,
    )


def match_version(segment: str, separator: str = ".") -> VersionMatch:
    """Inspect a path segment and report whether it encodes an API version."""

    match = _version_pattern(separator).fullmatch(segment or "")
    if not match:
        return NO_MATCH
    return VersionMatch(
        matched=True,
        raw_version_text=match.group("version"),
        filler=match.group("filler"),
    )

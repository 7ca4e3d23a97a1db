"""Request path tokenization."""

from __future__ import annotations


def tokenize_path(raw_path: str | None) -> tuple[str, ...]:
    """Split a raw request path into its non-empty segments, preserving order.

    Repeated, leading and trailing slashes collapse away, so `""`, `"/"` and `"//"` all yield an
    empty tuple. Never raises.
    """

    return tuple(segment for segment in (raw_path or "").split("/") if segment)

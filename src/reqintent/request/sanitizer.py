"""Request parameter sanitizing.

Array-shaped parameter values are dropped before they reach any query layer: document-store query
operators (e.g. `name[$ne]=x`) can be injected through array or nested-map parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_ARRAY_TYPES: tuple[type, ...] = (list, tuple, set, frozenset)


def is_array_value(value: Any) -> bool:
    """Whether a parameter value is composite (a sequence or nested mapping, not a string)."""

    return isinstance(value, _ARRAY_TYPES) or isinstance(value, Mapping)


def sanitize_parameters(
        params: Mapping[str, Any] | None,
        *,
        remove_array_values: bool = True,
) -> dict[str, Any]:
    """Return a new mapping with array-shaped values removed (when enabled).

    Scalar values pass through unchanged and the input mapping is never mutated.
    """

    source = dict(params or {})
    if not remove_array_values:
        return source

    dropped = sorted(key for key, value in source.items() if is_array_value(value))
    if dropped:
        logger.info("dropped array parameters keys=%s", ",".join(dropped))
    return {key: value for key, value in source.items() if not is_array_value(value)}

"""Raw request source contract.

The HTTP layer owns the actual request; the resolver only needs the method, the raw path and the
parameters that belong to the method.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from reqintent.request.schema import BODY_METHODS, HttpMethod


class RequestSource(Protocol):
    """What the resolver reads from an incoming request."""

    @property
    def method(self) -> str: ...

    @property
    def path_info(self) -> str: ...

    def parameters(self, method: str) -> Mapping[str, Any]: ...


@dataclass(frozen=True)
class RawRequest:
    """A captured request: method, `PATH_INFO`, decoded query and body parameters."""

    method: str
    path_info: str = ""
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)

    def parameters(self, method: str) -> Mapping[str, Any]:
        """Body parameters for POST/PUT/PATCH, query parameters for everything else."""

        try:
            verb = HttpMethod(method.upper())
        except ValueError:
            return dict(self.query)
        if verb in BODY_METHODS:
            return dict(self.body)
        return dict(self.query)

"""Input filter contract.

Filters run inside the module pipeline after a request has been resolved. They take an opaque module
state and return the (possibly replaced) state. The request layer never invokes them.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

StateT = TypeVar("StateT")


@runtime_checkable
class InputFilter(Protocol[StateT]):
    """A filter applied to client input before or after a module runs."""

    def execute(self, module_state: StateT) -> StateT: ...

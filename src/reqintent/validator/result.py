"""Validation outcomes and errors.

Validation failures are expected outcomes, so validators return a `ValidationResult`. Callers that
prefer exceptions call `raise_for_failure()` (or the validator's `ensure()`), which maps the reason
to `FormatValidationError` or `RfcViolationError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ValidationErrorReason(StrEnum):
    """Which rule rejected a value."""

    format = "format"
    length = "length"
    nullable = "nullable"
    rfc = "rfc"


class ValidationFailure(ValueError):
    """Base class for field-level validation errors."""

    def __init__(self, reason: ValidationErrorReason, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.value = value


class FormatValidationError(ValidationFailure):
    """Raised when a value fails the nullable, length or pattern rules."""


class RfcViolationError(ValidationFailure):
    """Raised when a mail address is mail-shaped but breaks RFC length or grammar rules."""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call."""

    ok: bool
    reason: ValidationErrorReason | None = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_failure(self, value: Any = None) -> None:
        """Raise the exception matching this result's reason; no-op on success."""

        if self.ok:
            return
        reason = self.reason or ValidationErrorReason.format
        if reason == ValidationErrorReason.rfc:
            raise RfcViolationError(reason, self.message, value)
        raise FormatValidationError(reason, self.message, value)


VALID = ValidationResult(ok=True)


def failure(reason: ValidationErrorReason, message: str) -> ValidationResult:
    return ValidationResult(ok=False, reason=reason, message=message)

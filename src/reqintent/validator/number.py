"""Unsigned integer validation.

Accepts Python ints and strings of ASCII digits (query and form parameters arrive as text). Values
must fit an unsigned 63-bit range so they can be bound to a signed BIGINT column. Length options
bound the number of digits.
"""

from __future__ import annotations

import re
from typing import Any

from reqintent.validator.formats import check_length, check_presence
from reqintent.validator.options import ValidationOptions
from reqintent.validator.result import (
    VALID,
    ValidationErrorReason,
    ValidationResult,
    failure,
)

MAX_UNSIGNED_INT = 2 ** 63 - 1

_DIGITS_RE = re.compile(r"[0-9]+")


class UnsignedIntValidator:
    """Validate non-negative integers."""

    name = "unsigned_int"

    def check(self, value: Any, options: ValidationOptions | None = None) -> ValidationResult:
        opts = options or ValidationOptions()

        # Zero is a value here; only absent values fail as required.
        presence = check_presence(value, opts, zero_is_blank=False)
        if presence is not None:
            return presence

        if isinstance(value, bool):
            return failure(ValidationErrorReason.format, "bool values are not accepted")
        if isinstance(value, int):
            text = str(value)
        elif isinstance(value, str) and _DIGITS_RE.fullmatch(value):
            text = value
        else:
            return failure(ValidationErrorReason.format, "value is not an unsigned integer")

        number = int(text)
        if number < 0 or number > MAX_UNSIGNED_INT:
            return failure(ValidationErrorReason.format, "value is out of the unsigned range")

        # Leading zeros count towards the digit count, just like in the raw parameter.
        digits = check_length(text, opts)
        if digits is not None:
            return digits
        return VALID

    def validate(self, value: Any, options: ValidationOptions | None = None) -> bool:
        return self.check(value, options).ok

    def ensure(self, value: Any, options: ValidationOptions | None = None) -> None:
        self.check(value, options).raise_for_failure(value)


UNSIGNED_INT_VALIDATOR = UnsignedIntValidator()

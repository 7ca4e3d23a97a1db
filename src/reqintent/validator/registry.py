"""Validator lookup by name.

Form definitions refer to validators by name (`"alphabet"`, `"mail_address"`, ...); this table is
the single place those names are bound.
"""

from __future__ import annotations

from typing import Any, Protocol

from reqintent.validator.formats import (
    ALPHABET_VALIDATOR,
    ALPHANUMERIC_VALIDATOR,
    FULL_SIZE_STRING_VALIDATOR,
    TEXT_STRING_VALIDATOR,
    UPPER_ALPHABET_VALIDATOR,
)
from reqintent.validator.mail import MAIL_ADDRESS_VALIDATOR
from reqintent.validator.number import UNSIGNED_INT_VALIDATOR
from reqintent.validator.options import ValidationOptions
from reqintent.validator.result import ValidationResult


class Validator(Protocol):
    """Anything that can check a value against options."""

    name: str

    def check(self, value: Any, options: ValidationOptions | None = None) -> ValidationResult: ...

    def validate(self, value: Any, options: ValidationOptions | None = None) -> bool: ...

    def ensure(self, value: Any, options: ValidationOptions | None = None) -> None: ...


VALIDATORS: dict[str, Validator] = {
    validator.name: validator
    for validator in (
        ALPHABET_VALIDATOR,
        ALPHANUMERIC_VALIDATOR,
        UPPER_ALPHABET_VALIDATOR,
        FULL_SIZE_STRING_VALIDATOR,
        TEXT_STRING_VALIDATOR,
        MAIL_ADDRESS_VALIDATOR,
        UNSIGNED_INT_VALIDATOR,
    )
}


def get_validator(name: str) -> Validator:
    """Return the validator registered under `name`.

    Raises:
        KeyError: If no validator has that name.
    """

    try:
        return VALIDATORS[name]
    except KeyError:
        raise KeyError(f"unknown validator: {name!r}") from None

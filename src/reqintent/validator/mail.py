"""RFC 5322 mail address validation.

`MailFormatValidator` wraps a generic format validator: the generic nullable/length checks run
first, then the mail-specific ones. Callers can tell the two failure kinds apart:

    - reason `format`: the value is not mail-shaped at all (no `@`),
    - reason `rfc`: mail-shaped, but the part lengths or the grammar break RFC rules.
"""

from __future__ import annotations

import re
from typing import Any

from reqintent.validator.formats import (
    TEXT_STRING_VALIDATOR,
    FormatValidator,
    is_absent,
    stringify,
)
from reqintent.validator.options import ValidationOptions
from reqintent.validator.result import (
    VALID,
    ValidationErrorReason,
    ValidationResult,
    failure,
)

MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_PART_LENGTH = 255
MAX_ADDRESS_LENGTH = 256

# ASCII only: anything from U+0080 upwards is outside the grammar.
_NON_ASCII = r"\x80-\U0010ffff"

_ATOM_CHAR = rf'[^() <>@,;:".\\\[\]\x00-\x1f{_NON_ASCII}]'
_ATOM = rf"{_ATOM_CHAR}+(?!{_ATOM_CHAR})"
_QUOTED_STRING = (
    rf'"[^\\{_NON_ASCII}\n\r"]*'
    rf'(?:\\[^{_NON_ASCII}][^\\{_NON_ASCII}\n\r"]*)*"'
)
_DOMAIN_LITERAL_CHAR = rf"(?:[^\\{_NON_ASCII}\n\r\[\]]|\\[^{_NON_ASCII}])"
_DOMAIN_LITERAL = rf"\[{_DOMAIN_LITERAL_CHAR}*\]"


def _dotted(word: str) -> str:
    return rf"{word}(?:\.{word})*"


_LOCAL_PART = _dotted(rf"(?:{_ATOM}|{_QUOTED_STRING})")
_DOMAIN_PART = _dotted(rf"(?:{_ATOM}|{_DOMAIN_LITERAL})")

MAIL_ADDRESS_RE = re.compile(rf"{_LOCAL_PART}@{_DOMAIN_PART}")


def split_address(address: str) -> tuple[str, str] | None:
    """Split on the last `@`; `None` when there is no `@` at all."""

    at_index = address.rfind("@")
    if at_index < 0:
        return None
    return address[:at_index], address[at_index + 1:]


def has_valid_lengths(local_part: str, domain_part: str, address: str) -> bool:
    # The domain limit counts the leading "@".
    return (
            len(local_part) <= MAX_LOCAL_PART_LENGTH
            and len(domain_part) + 1 <= MAX_DOMAIN_PART_LENGTH
            and len(address) <= MAX_ADDRESS_LENGTH
    )


class MailFormatValidator:
    """Validate mail addresses: generic format checks, then RFC length and grammar checks."""

    name = "mail_address"

    def __init__(self, base: FormatValidator = TEXT_STRING_VALIDATOR) -> None:
        self.base = base

    def check(self, value: Any, options: ValidationOptions | None = None) -> ValidationResult:
        result = self.base.check(value, options)
        if not result.ok or is_absent(value):
            return result

        address = stringify(value) or ""
        parts = split_address(address)
        if parts is None:
            return failure(ValidationErrorReason.format, "mail address must contain '@'")

        local_part, domain_part = parts
        if not has_valid_lengths(local_part, domain_part, address):
            return failure(ValidationErrorReason.rfc, "mail address part is too long")
        if MAIL_ADDRESS_RE.fullmatch(address) is None:
            return failure(ValidationErrorReason.rfc, "mail address violates RFC 5322 grammar")
        return VALID

    def validate(self, value: Any, options: ValidationOptions | None = None) -> bool:
        return self.check(value, options).ok

    def ensure(self, value: Any, options: ValidationOptions | None = None) -> None:
        """Raise `RfcViolationError` for RFC breaches, `FormatValidationError` otherwise."""

        self.check(value, options).raise_for_failure(value)


MAIL_ADDRESS_VALIDATOR = MailFormatValidator()

"""Format validators.

A validator variant is data, not a subclass: a `FormatSpec` names a base character class and the
options the variant switches on by default. `FormatValidator` runs one decision procedure for all of
them, short-circuiting in this order:

    1) nullable: absent-like values are accepted when `nullable` is set,
    2) absent-like values are rejected otherwise, and so are the zero forms `0`, `0.0`, `"0"`,
    3) length bounds,
    4) free-text variants stop here and accept any character,
    5) whitespace policy,
    6) the composed character class, matched against the whole value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from reqintent.validator.options import DEFAULT_OPTIONS, ValidationOptions
from reqintent.validator.patterns import compose_pattern, has_forbidden_whitespace
from reqintent.validator.result import (
    VALID,
    ValidationErrorReason,
    ValidationResult,
    failure,
)


@dataclass(frozen=True)
class FormatSpec:
    """A base character class plus the default options a validator variant seeds."""

    name: str
    base_pattern: str | None = None
    default_options: ValidationOptions = field(default=DEFAULT_OPTIONS)
    # Free-text variants accept any character once nullable/length pass.
    any_character: bool = False


def is_absent(value: Any) -> bool:
    """Whether a value counts as "absent": None, "", False or an empty collection.

    A nullable field accepts exactly these. `0`, `0.0` and `"0"` are not in the set; see
    `is_blank` for the wider set a non-nullable field rejects.
    """

    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def is_blank(value: Any) -> bool:
    """Absent values plus the zero forms `0`, `0.0` and `"0"`.

    A non-nullable field never accepts these, even where "0" would match the character class.
    """

    if is_absent(value):
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    return value == "0"


def stringify(value: Any) -> str | None:
    """Render a scalar candidate as text; `None` for values that have no text form."""

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def check_presence(
        value: Any,
        options: ValidationOptions,
        *,
        zero_is_blank: bool = True,
) -> ValidationResult | None:
    """Steps 1-2: a final result for absent or blank values, `None` when the value is present."""

    if is_absent(value):
        if options.nullable:
            return VALID
        return failure(ValidationErrorReason.nullable, "value is required")
    if zero_is_blank and not options.nullable and is_blank(value):
        return failure(ValidationErrorReason.nullable, "value is required")
    return None


def check_length(text: str, options: ValidationOptions) -> ValidationResult | None:
    length = len(text)
    if options.min_length is not None and length < options.min_length:
        return failure(
            ValidationErrorReason.length,
            f"length {length} is shorter than {options.min_length}",
        )
    if options.max_length is not None and length > options.max_length:
        return failure(
            ValidationErrorReason.length,
            f"length {length} is longer than {options.max_length}",
        )
    return None


class FormatValidator:
    """Validate values against a `FormatSpec`. Stateless; safe to share between threads."""

    def __init__(self, spec: FormatSpec) -> None:
        self.spec = spec

    @property
    def name(self) -> str:
        return self.spec.name

    def effective_options(self, options: ValidationOptions | None = None) -> ValidationOptions:
        """The variant's defaults combined with the caller's options."""

        if options is None:
            return self.spec.default_options
        return self.spec.default_options.merged_with(options)

    def check(self, value: Any, options: ValidationOptions | None = None) -> ValidationResult:
        """Run the decision procedure and return a typed result."""

        opts = self.effective_options(options)

        presence = check_presence(value, opts)
        if presence is not None:
            return presence

        text = stringify(value)
        if text is None:
            return failure(
                ValidationErrorReason.format,
                f"{type(value).__name__} values are not accepted",
            )

        too_long_or_short = check_length(text, opts)
        if too_long_or_short is not None:
            return too_long_or_short

        if self.spec.any_character:
            return VALID

        if has_forbidden_whitespace(text, allow_whitespace=opts.allow_whitespace):
            return failure(ValidationErrorReason.format, "whitespace is not allowed")

        pattern = compose_pattern(
            self.spec.base_pattern,
            allow_numeric=opts.allow_numeric,
            allow_full_width=opts.allow_full_width,
            allow_whitespace=opts.allow_whitespace,
        )
        if pattern.fullmatch(text) is None:
            return failure(
                ValidationErrorReason.format,
                f"value does not match the {self.spec.name} format",
            )
        return VALID

    def validate(self, value: Any, options: ValidationOptions | None = None) -> bool:
        """Return whether the value is acceptable."""

        return self.check(value, options).ok

    def ensure(self, value: Any, options: ValidationOptions | None = None) -> None:
        """Raise the matching `ValidationFailure` when the value is rejected."""

        self.check(value, options).raise_for_failure(value)


ALPHABET = FormatSpec(name="alphabet", base_pattern=r"[a-zA-Z]")
ALPHANUMERIC = FormatSpec(
    name="alphanumeric",
    base_pattern=r"[a-zA-Z0-9]",
    default_options=DEFAULT_OPTIONS.with_numeric(),
)
UPPER_ALPHABET = FormatSpec(name="upper_alphabet", base_pattern=r"[A-Z]")
FULL_SIZE_STRING = FormatSpec(
    name="full_size_string",
    default_options=DEFAULT_OPTIONS.with_full_width(),
)
TEXT_STRING = FormatSpec(name="text_string", any_character=True)

ALPHABET_VALIDATOR = FormatValidator(ALPHABET)
ALPHANUMERIC_VALIDATOR = FormatValidator(ALPHANUMERIC)
UPPER_ALPHABET_VALIDATOR = FormatValidator(UPPER_ALPHABET)
FULL_SIZE_STRING_VALIDATOR = FormatValidator(FULL_SIZE_STRING)
TEXT_STRING_VALIDATOR = FormatValidator(TEXT_STRING)

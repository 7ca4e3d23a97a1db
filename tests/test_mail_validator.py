"""Tests for RFC mail address validation."""

from __future__ import annotations

import pytest

from reqintent.validator.mail import (
    MAIL_ADDRESS_VALIDATOR,
    MailFormatValidator,
    split_address,
)
from reqintent.validator.options import DEFAULT_OPTIONS
from reqintent.validator.result import (
    FormatValidationError,
    RfcViolationError,
    ValidationErrorReason,
)


def test_valid_addresses() -> None:
    for value in (
            "user@example.com",
            "first.last@example.co.jp",
            "user+tag@example.com",
            "o'brien@example.org",
            '"john..doe"@example.com',
            "user@[192.168.0.1]",
    ):
        assert MAIL_ADDRESS_VALIDATOR.validate(value), value


def test_missing_at_is_format_error() -> None:
    result = MAIL_ADDRESS_VALIDATOR.check("user.example.com")
    assert not result
    assert result.reason == ValidationErrorReason.format

    with pytest.raises(FormatValidationError) as exc_info:
        MAIL_ADDRESS_VALIDATOR.ensure("user.example.com")
    assert not isinstance(exc_info.value, RfcViolationError)


def test_local_part_longer_than_64_is_rfc_violation() -> None:
    value = "a" * 65 + "@example.com"
    assert MAIL_ADDRESS_VALIDATOR.check(value).reason == ValidationErrorReason.rfc
    with pytest.raises(RfcViolationError):
        MAIL_ADDRESS_VALIDATOR.ensure(value)

    assert MAIL_ADDRESS_VALIDATOR.validate("a" * 64 + "@example.com")


def test_total_length_limit() -> None:
    domain = ".".join(["d" * 60] * 4) + ".com"
    value = "a" * 64 + "@" + domain
    assert len(value) > 256
    assert MAIL_ADDRESS_VALIDATOR.check(value).reason == ValidationErrorReason.rfc


def test_grammar_violations() -> None:
    for value in (
            "a..b@example.com",
            ".user@example.com",
            "user.@example.com",
            "us(er@example.com",
            "user@exa mple.com",
            "user@",
            "@example.com",
            "ユーザー@example.com",
    ):
        result = MAIL_ADDRESS_VALIDATOR.check(value, DEFAULT_OPTIONS.with_whitespace())
        assert result.reason == ValidationErrorReason.rfc, value


def test_unquoted_whitespace_is_an_rfc_violation() -> None:
    assert MAIL_ADDRESS_VALIDATOR.check("us er@example.com").reason == ValidationErrorReason.rfc
    assert MAIL_ADDRESS_VALIDATOR.check("user@exa mple.com").reason == ValidationErrorReason.rfc


def test_quoted_local_part_may_contain_spaces() -> None:
    assert MAIL_ADDRESS_VALIDATOR.validate('"john doe"@example.com')
    with pytest.raises(RfcViolationError):
        MAIL_ADDRESS_VALIDATOR.ensure("john doe@example.com")


def test_generic_checks_run_first() -> None:
    assert MAIL_ADDRESS_VALIDATOR.check("").reason == ValidationErrorReason.nullable
    assert MAIL_ADDRESS_VALIDATOR.validate("", DEFAULT_OPTIONS.with_nullable())
    assert MAIL_ADDRESS_VALIDATOR.validate(None, DEFAULT_OPTIONS.with_nullable())

    short = DEFAULT_OPTIONS.with_max(5)
    assert MAIL_ADDRESS_VALIDATOR.check("user@example.com", short).reason == (
        ValidationErrorReason.length
    )


def test_split_address_uses_last_at() -> None:
    assert split_address('"a@b"@example.com') == ('"a@b"', "example.com")
    assert split_address("no-at-sign") is None


def test_quoted_local_part_with_at() -> None:
    assert MailFormatValidator().validate('"a@b"@example.com')


def test_domain_length_counts_the_at_sign() -> None:
    domain = ".".join(["d" * 50] * 5)
    assert len(domain) == 254
    assert MAIL_ADDRESS_VALIDATOR.validate("a@" + domain)

    longer = "d" * 51 + "." + ".".join(["d" * 50] * 4)
    assert len(longer) == 255
    assert MAIL_ADDRESS_VALIDATOR.check("a@" + longer).reason == ValidationErrorReason.rfc

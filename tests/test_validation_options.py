"""Tests for the immutable ValidationOptions builder."""

from __future__ import annotations

import pytest

from reqintent.validator.options import DEFAULT_OPTIONS, ValidationOptions


def test_defaults_are_unbounded_and_strict() -> None:
    options = ValidationOptions()
    assert options.min_length is None
    assert options.max_length is None
    assert not options.allow_whitespace
    assert not options.allow_numeric
    assert not options.allow_full_width
    assert not options.nullable


def test_with_operations_never_mutate_receiver() -> None:
    base = ValidationOptions()
    nullable = base.with_nullable()
    assert nullable.nullable
    assert not base.nullable
    assert nullable is not base

    ranged = base.with_range(2, 5)
    assert (ranged.min_length, ranged.max_length) == (2, 5)
    assert base.min_length is None
    assert base.max_length is None


def test_default_template_stays_untouched() -> None:
    DEFAULT_OPTIONS.with_whitespace().with_numeric().with_full_width().with_nullable()
    assert DEFAULT_OPTIONS == ValidationOptions()


def test_chained_options() -> None:
    options = DEFAULT_OPTIONS.with_whitespace().with_numeric().with_min(1).with_max(10)
    assert options.allow_whitespace
    assert options.allow_numeric
    assert not options.allow_full_width
    assert options.min_length == 1
    assert options.max_length == 10


def test_with_range_allows_open_ends() -> None:
    options = DEFAULT_OPTIONS.with_range(max_length=3)
    assert options.min_length is None
    assert options.max_length == 3


def test_invalid_ranges_are_rejected() -> None:
    with pytest.raises(ValueError):
        ValidationOptions(min_length=5, max_length=2)
    with pytest.raises(ValueError):
        DEFAULT_OPTIONS.with_range(5, 2)
    with pytest.raises(ValueError):
        DEFAULT_OPTIONS.with_min(-1)


def test_options_are_frozen() -> None:
    with pytest.raises(ValueError):
        DEFAULT_OPTIONS.nullable = True  # type: ignore[misc]


def test_merged_with_unions_flags_and_prefers_other_bounds() -> None:
    base = DEFAULT_OPTIONS.with_numeric().with_range(1, 10)
    other = DEFAULT_OPTIONS.with_whitespace().with_max(5)
    merged = base.merged_with(other)
    assert merged.allow_numeric
    assert merged.allow_whitespace
    assert merged.min_length == 1
    assert merged.max_length == 5

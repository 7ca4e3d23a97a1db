"""Validation options.

`ValidationOptions` is an immutable bundle of constraints. Every `with_*` call returns a new
instance, so `DEFAULT_OPTIONS` (or any other base) can be shared freely between validations and
threads:

    options = DEFAULT_OPTIONS.with_range(2, 5).with_whitespace()
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationOptions(BaseModel):
    """Named constraints applied to one validation call. Unset bounds mean "no constraint"."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    allow_whitespace: bool = False
    allow_numeric: bool = False
    allow_full_width: bool = False
    nullable: bool = False

    @model_validator(mode="after")
    def validate_range(self) -> ValidationOptions:
        """Validate that the length range is well-formed (`min_length <= max_length`)."""

        if (
                self.min_length is not None
                and self.max_length is not None
                and self.min_length > self.max_length
        ):
            raise ValueError("min_length must be <= max_length")
        return self

    def _with(self, **changes: object) -> ValidationOptions:
        # model_copy skips validation; rebuild so range checks still apply.
        return ValidationOptions.model_validate({**self.model_dump(), **changes})

    def with_whitespace(self) -> ValidationOptions:
        return self._with(allow_whitespace=True)

    def with_numeric(self) -> ValidationOptions:
        return self._with(allow_numeric=True)

    def with_full_width(self) -> ValidationOptions:
        return self._with(allow_full_width=True)

    def with_nullable(self) -> ValidationOptions:
        return self._with(nullable=True)

    def with_range(
            self,
            min_length: int | None = None,
            max_length: int | None = None,
    ) -> ValidationOptions:
        """Set both length bounds at once (`None` leaves a side unbounded)."""

        return self._with(min_length=min_length, max_length=max_length)

    def with_min(self, min_length: int) -> ValidationOptions:
        return self._with(min_length=min_length)

    def with_max(self, max_length: int) -> ValidationOptions:
        return self._with(max_length=max_length)

    def merged_with(self, other: ValidationOptions) -> ValidationOptions:
        """Combine two option sets: flags are OR-ed, bounds from `other` win when set."""

        return self._with(
            min_length=other.min_length if other.min_length is not None else self.min_length,
            max_length=other.max_length if other.max_length is not None else self.max_length,
            allow_whitespace=self.allow_whitespace or other.allow_whitespace,
            allow_numeric=self.allow_numeric or other.allow_numeric,
            allow_full_width=self.allow_full_width or other.allow_full_width,
            nullable=self.nullable or other.nullable,
        )


DEFAULT_OPTIONS = ValidationOptions()

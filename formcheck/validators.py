"""
Primitive validators for formcheck.

Each function tests one value against one rule and returns a ValidationResult.
None of them raise on bad input values; failures are reported as data.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Callable

from .types import ErrorType, FieldValue, ValidationError, ValidationResult

DEFAULT_MESSAGES = MappingProxyType(
    {
        ErrorType.REQUIRED: "This field is required",
        ErrorType.EMAIL: "Please enter a valid email address",
        ErrorType.MIN_LENGTH: "Minimum length is {min} characters",
        ErrorType.MAX_LENGTH: "Maximum length is {max} characters",
        ErrorType.MATCH: "Values do not match",
        ErrorType.CUSTOM: "Invalid value",
    }
)

# word(.word)*@label(.label)*.tld
_EMAIL_RE = re.compile(
    r"[A-Za-z0-9_%+-]+(?:\.[A-Za-z0-9_%+-]+)*@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}"
)


def validate_required(value: FieldValue, message: str | None = None) -> ValidationResult:
    """
    Fail when the value is None, empty, or whitespace only.

    Usage:
        validate_required("Hello")              # valid
        validate_required("   ")                # required error
        validate_required("", "Name is required")
    """
    if value is None or value.strip() == "":
        return ValidationResult.failure(
            ErrorType.REQUIRED, message or DEFAULT_MESSAGES[ErrorType.REQUIRED]
        )
    return ValidationResult()


def validate_email(value: FieldValue, message: str | None = None) -> ValidationResult:
    """
    Fail unless the value is a practical email address.

    Empty and None values fail here too; pair with validate_required when a
    separate "required" message is wanted.
    """
    if not value or not is_email(value):
        return ValidationResult.failure(
            ErrorType.EMAIL, message or DEFAULT_MESSAGES[ErrorType.EMAIL]
        )
    return ValidationResult()


def is_email(value: str) -> bool:
    if _EMAIL_RE.fullmatch(value) is None:
        return False
    return ".." not in value and not value.endswith(".")


def validate_length(
    value: FieldValue,
    min: int | None = None,
    max: int | None = None,
    min_message: str | None = None,
    max_message: str | None = None,
) -> ValidationResult:
    """
    Check the raw (untrimmed) length of a value against optional bounds.

    Length is counted in UTF-16 code units, the way browsers count form
    input, so characters outside the BMP count as two. None counts as length
    0. Both bounds are inclusive and checked independently.

    Raises:
        ValueError: If a bound is negative or min is greater than max
    """
    check_bounds(min, max)
    length = len(value.encode("utf-16-le", "surrogatepass")) // 2 if value is not None else 0

    errors: list[ValidationError] = []
    if min is not None and length < min:
        errors.append(
            ValidationError(
                ErrorType.MIN_LENGTH,
                min_message or DEFAULT_MESSAGES[ErrorType.MIN_LENGTH].format(min=min),
            )
        )
    if max is not None and length > max:
        errors.append(
            ValidationError(
                ErrorType.MAX_LENGTH,
                max_message or DEFAULT_MESSAGES[ErrorType.MAX_LENGTH].format(max=max),
            )
        )
    return ValidationResult.from_errors(errors)


def check_bounds(min: int | None, max: int | None) -> None:
    """Reject length bounds that no value could meaningfully satisfy."""
    if min is not None and min < 0:
        raise ValueError(f"min must be >= 0, got {min}")
    if max is not None and max < 0:
        raise ValueError(f"max must be >= 0, got {max}")
    if min is not None and max is not None and min > max:
        raise ValueError(f"min ({min}) cannot exceed max ({max})")


def validate_match(
    value: FieldValue, other: FieldValue, message: str | None = None
) -> ValidationResult:
    """Fail unless value equals other exactly (case-sensitive)."""
    if value != other:
        return ValidationResult.failure(
            ErrorType.MATCH, message or DEFAULT_MESSAGES[ErrorType.MATCH]
        )
    return ValidationResult()


def validate_custom(
    value: Any, predicate: Callable[[Any], bool], message: str | None = None
) -> ValidationResult:
    """
    Delegate to a caller-supplied predicate.

    Exceptions raised by the predicate propagate: they signal a bug in the
    predicate, not bad user input.

    Usage:
        validate_custom("abc123", lambda v: any(c.isdigit() for c in v))
    """
    if not predicate(value):
        return ValidationResult.failure(
            ErrorType.CUSTOM, message or DEFAULT_MESSAGES[ErrorType.CUSTOM]
        )
    return ValidationResult()

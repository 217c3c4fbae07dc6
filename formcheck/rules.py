"""
Field rules for formcheck.

A Rule binds one primitive validator to its options so form schemas can be
declared up front and evaluated later against raw values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from .types import RuleFn, ValidationResult
from .validators import (
    check_bounds,
    validate_custom,
    validate_email,
    validate_length,
    validate_match,
    validate_required,
)


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Immutable field rule.

    Wraps a check function returning a ValidationResult, plus metadata used
    when compiling a schema to a pydantic model.
    """

    check: RuleFn
    name: str = "rule"
    required: bool = False

    def __call__(self, value: Any) -> ValidationResult:
        result = self.check(value)
        if not isinstance(result, ValidationResult):
            raise TypeError(
                f"Rule {self.name!r} returned {type(result).__name__}, expected ValidationResult"
            )
        return result


RuleLike = Union[Rule, RuleFn]


def to_rule(r: Any) -> Rule:
    """
    Coerce a value to a Rule.

    Conversion rules:
        Rule -> pass through
        Callable -> Rule(check=callable), named after the callable
    """
    if isinstance(r, Rule):
        return r

    if callable(r):
        return Rule(check=r, name=getattr(r, "__name__", type(r).__name__))

    raise TypeError(f"Cannot convert {type(r).__name__} to rule")


def Required(message: str | None = None) -> Rule:
    """
    Value must be present and not blank.

    Usage:
        Required()
        Required("Name is required")
    """

    def check(x: Any) -> ValidationResult:
        return validate_required(x, message)

    return Rule(check=check, name="required", required=True)


def Email(message: str | None = None) -> Rule:
    """Value must be a well-formed email address."""

    def check(x: Any) -> ValidationResult:
        return validate_email(x, message)

    return Rule(check=check, name="email")


def Length(
    min: int | None = None,
    max: int | None = None,
    min_message: str | None = None,
    max_message: str | None = None,
) -> Rule:
    """
    Value length must fall within bounds (inclusive).

    Usage:
        Length(3, 20)
        Length(min=10, min_message="Message must be at least 10 characters")
        Length(max=500)
    """
    if min is None and max is None:
        raise ValueError("Length() needs at least one of min or max")
    check_bounds(min, max)

    def check(x: Any) -> ValidationResult:
        return validate_length(
            x, min=min, max=max, min_message=min_message, max_message=max_message
        )

    return Rule(check=check, name="length")


def MinLength(n: int, message: str | None = None) -> Rule:
    """Validate minimum length."""
    return Length(min=n, min_message=message)


def MaxLength(n: int, message: str | None = None) -> Rule:
    """Validate maximum length."""
    return Length(max=n, max_message=message)


def Match(other: str | None, message: str | None = None) -> Rule:
    """
    Value must equal `other` exactly.

    Usage:
        Match(form["password"], "Passwords do not match")
    """

    def check(x: Any) -> ValidationResult:
        return validate_match(x, other, message)

    return Rule(check=check, name="match")


def Custom(predicate: Callable[[Any], bool], message: str | None = None) -> Rule:
    """
    Create a rule from an arbitrary predicate.

    Usage:
        Custom(lambda v: any(c.isupper() for c in v), "Needs an uppercase letter")
    """

    def check(x: Any) -> ValidationResult:
        return validate_custom(x, predicate, message)

    return Rule(check=check, name=getattr(predicate, "__name__", "custom"))

"""
Type definitions for formcheck.

Provides the error vocabulary and the uniform ValidationResult returned by
every validation call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable


class ErrorType(str, Enum):
    """Closed set of rule tags a ValidationError can carry."""

    REQUIRED = "required"
    EMAIL = "email"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    MATCH = "match"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single failed rule."""

    type: ErrorType
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "message": self.message}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationError:
        return cls(type=ErrorType(data["type"]), message=data["message"])


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of one or more validation rules.

    `valid` is derived from `errors`, so a result can never claim to be valid
    while carrying errors. Errors keep the order the rules were evaluated in.

    Usage:
        ValidationResult()                                   # valid
        ValidationResult((ValidationError(ErrorType.MATCH, "Values do not match"),))
    """

    errors: tuple[ValidationError, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (lists included) but store an immutable tuple
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    @classmethod
    def failure(cls, error_type: ErrorType, message: str) -> ValidationResult:
        """Build a result holding exactly one error."""
        return cls((ValidationError(error_type, message),))

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationError]) -> ValidationResult:
        return cls(tuple(errors))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the `{valid, errors}` shape consumed by form UIs."""
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationResult:
        """
        Rebuild a result from its serialized form.

        Raises:
            ValueError: If the `valid` flag disagrees with the errors
        """
        errors = tuple(ValidationError.from_dict(e) for e in data.get("errors", []))
        if "valid" in data and bool(data["valid"]) != (len(errors) == 0):
            raise ValueError(
                f"Inconsistent result: valid={data['valid']!r} with {len(errors)} error(s)"
            )
        return cls(errors)


# Type aliases
FieldValue = str | None
RuleFn = Callable[[Any], ValidationResult]

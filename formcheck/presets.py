"""
Ready-made form schemas.

Each function builds a fresh schema so callers can extend it without
affecting anyone else.
"""

from __future__ import annotations

from typing import Any

from .rules import Custom, Email, Length, Match, Required, Rule, RuleLike
from .types import ValidationResult
from .validators import validate_length


def _has_uppercase(value: Any) -> bool:
    return isinstance(value, str) and any(c.isupper() for c in value)


def _has_digit(value: Any) -> bool:
    return isinstance(value, str) and any(c.isdigit() for c in value)


def _trimmed_min_length(n: int, message: str) -> Rule:
    """Like Length(min=n) but ignoring surrounding whitespace."""

    def check(x: Any) -> ValidationResult:
        return validate_length(x.strip() if isinstance(x, str) else x, min=n, min_message=message)

    return Rule(check=check, name="trimmed_length")


def contact_form_schema() -> dict[str, list[RuleLike]]:
    """
    Schema for the site contact form.

    `company` and `subject` are optional and left unvalidated. The message
    length is measured after trimming whitespace.
    """
    return {
        "name": [Required("Name is required")],
        "email": [
            Required("Email is required"),
            Email("Please enter a valid email address"),
        ],
        "message": [
            Required("Message is required"),
            _trimmed_min_length(10, "Message must be at least 10 characters"),
        ],
    }


def registration_form_schema(password: str | None) -> dict[str, list[RuleLike]]:
    """Schema for account registration; `password` is what confirm_password must match."""
    return {
        "username": [Required(), Length(3, 20)],
        "email": [Required(), Email()],
        "password": [
            Required(),
            Length(min=8, min_message="Password must be at least 8 characters"),
            Custom(_has_uppercase, "Password must contain at least one uppercase letter"),
            Custom(_has_digit, "Password must contain at least one number"),
        ],
        "confirm_password": [
            Required(),
            Match(password, "Passwords do not match"),
        ],
    }

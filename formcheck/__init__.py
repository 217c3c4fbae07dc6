"""
formcheck - Composable form validation with uniform, serializable results.

Usage:
    from formcheck import Required, Email, Length, validate_form

    schema = {
        "name": [Required("Name is required")],
        "email": [Required(), Email()],
        "message": [Required(), Length(min=10)],
    }

    results = validate_form({"name": "", "email": "a@b.com"}, schema)
    results["name"].to_dict()
    # {"valid": False, "errors": [{"type": "required", "message": "..."}]}
"""

from .core import combine_validation_results, validate_field
from .presets import contact_form_schema, registration_form_schema
from .rules import (
    Custom,
    Email,
    Length,
    Match,
    MaxLength,
    MinLength,
    Required,
    Rule,
    to_rule,
)
from .schema import form_errors, is_form_valid, to_pydantic, validate_form
from .types import ErrorType, ValidationError, ValidationResult
from .validators import (
    DEFAULT_MESSAGES,
    validate_custom,
    validate_email,
    validate_length,
    validate_match,
    validate_required,
)

__all__ = [
    # Result types
    "ErrorType",
    "ValidationError",
    "ValidationResult",
    # Primitive validators
    "DEFAULT_MESSAGES",
    "validate_required",
    "validate_email",
    "validate_length",
    "validate_match",
    "validate_custom",
    # Rules
    "Rule",
    "to_rule",
    "Required",
    "Email",
    "Length",
    "MinLength",
    "MaxLength",
    "Match",
    "Custom",
    # Field / form
    "validate_field",
    "combine_validation_results",
    "validate_form",
    "is_form_valid",
    "form_errors",
    "to_pydantic",
    # Presets
    "contact_form_schema",
    "registration_form_schema",
]

"""
Schema operations for formcheck.

Provides validate_form() plus helpers for reading form results and
to_pydantic() for compiling a form schema into a model.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Callable, Mapping, Sequence
from typing import Optional as TypingOptional

from pydantic import AfterValidator, Field, create_model

from .core import validate_field
from .rules import RuleLike, to_rule
from .types import ValidationResult

logger = logging.getLogger(__name__)

FormSchema = Mapping[str, Sequence[RuleLike]]


def validate_form(
    values: Mapping[str, Any], schema: FormSchema
) -> dict[str, ValidationResult]:
    """
    Validate form values against a schema.

    Args:
        values: Raw field values keyed by field name
        schema: Field name -> ordered rules

    Returns:
        One ValidationResult per schema field. Fields missing from `values`
        are validated as None; fields missing from `schema` are skipped and
        get no entry.

    Usage:
        schema = {
            "name": [Required("Name is required")],
            "email": [Required(), Email()],
        }
        results = validate_form({"name": "", "email": "a@b.com"}, schema)
        results["name"].valid  # False
    """
    results = {
        field: validate_field(values.get(field), rules)
        for field, rules in schema.items()
    }
    logger.debug(
        "Validated %d field(s), %d invalid",
        len(results),
        sum(1 for r in results.values() if not r.valid),
    )
    return results


def is_form_valid(results: Mapping[str, ValidationResult]) -> bool:
    """Check that every field result is valid."""
    return all(result.valid for result in results.values())


def form_errors(results: Mapping[str, ValidationResult]) -> dict[str, str]:
    """
    Collapse form results to the first error message of each invalid field.

    Usage:
        form_errors(validate_form(values, schema))
        # {"name": "Name is required", "message": "Message must be at least 10 characters"}
    """
    return {
        field: result.errors[0].message
        for field, result in results.items()
        if not result.valid
    }


def to_pydantic(name: str, schema: FormSchema) -> type:
    """
    Compile a form schema to a Pydantic model.

    Fields with a required rule must be supplied; the rest are optional
    strings whose rules also run on the None default. Rule failures surface as
    a pydantic ValidationError whose message joins the rule messages. Input
    keys outside the schema are ignored.

    Args:
        name: Name of the generated model class
        schema: Field name -> ordered rules

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        Contact = to_pydantic("Contact", {"name": [Required()]})
        Contact(name="Alice")
        Contact()  # raises pydantic.ValidationError
    """
    fields: dict[str, Any] = {}

    for key, rules in schema.items():
        compiled = [to_rule(r) for r in rules]
        field_type = Annotated[TypingOptional[str], AfterValidator(_field_check(compiled))]
        if any(rule.required for rule in compiled):
            fields[key] = (field_type, ...)
        else:
            fields[key] = (field_type, Field(default=None, validate_default=True))

    return create_model(name, **fields)


def _field_check(rules: list[RuleLike]) -> Callable[[str | None], str | None]:
    def check(value: str | None) -> str | None:
        result = validate_field(value, rules)
        if not result.valid:
            raise ValueError("; ".join(result.messages))
        return value

    return check

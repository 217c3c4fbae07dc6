"""
Field validation and result combination for formcheck.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .rules import RuleLike, to_rule
from .types import ValidationResult


def combine_validation_results(results: Iterable[ValidationResult]) -> ValidationResult:
    """
    Merge results into one, keeping every error in order.

    The merged result is valid only if every input was valid; an empty input
    combines to a valid result.
    """
    return ValidationResult.from_errors(
        error for result in results for error in result.errors
    )


def validate_field(value: Any, rules: Sequence[RuleLike]) -> ValidationResult:
    """
    Apply every rule to a single value.

    All rules run even after a failure, so a UI can show every problem with
    the field at once.

    Usage:
        validate_field("", [Required(), Email()])
        # -> errors: required, email

    Raises:
        TypeError: If an entry in `rules` is not a rule or does not return a
            ValidationResult
    """
    compiled = [to_rule(r) for r in rules]
    return combine_validation_results(rule(value) for rule in compiled)

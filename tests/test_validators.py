"""
Tests for formcheck primitive validators.
"""

import pytest

from formcheck import (
    DEFAULT_MESSAGES,
    ErrorType,
    validate_custom,
    validate_email,
    validate_length,
    validate_match,
    validate_required,
)


class TestValidateRequired:
    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_blank_values_fail(self, value):
        result = validate_required(value)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.REQUIRED

    @pytest.mark.parametrize("value", ["Hello", "0", "...", " x "])
    def test_non_blank_values_pass(self, value):
        result = validate_required(value)
        assert result.valid
        assert result.errors == ()

    def test_default_message(self):
        result = validate_required(None)
        assert result.errors[0].message == "This field is required"

    def test_custom_message(self):
        result = validate_required("", "This field cannot be empty")
        assert result.errors[0].message == "This field cannot be empty"
        assert result.errors[0].type == ErrorType.REQUIRED


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "email@example.com",
            "firstname.lastname@example.com",
            "first.last@sub.example.com",
            "email@subdomain.example.com",
            "firstname+lastname@example.com",
            "1234567890@example.com",
            "email@example-one.com",
        ],
    )
    def test_valid_emails(self, email):
        result = validate_email(email)
        assert result.valid
        assert result.errors == ()

    @pytest.mark.parametrize(
        "email",
        [
            "plainaddress",
            "@missingusername.com",
            "@missing.com",
            "username@.com",
            "username@domain",
            "username@domain..com",
            "a@b..com",
            "user..name@example.com",
            "user@example.com.",
            "user@@example.com",
            "user@exa@mple.com",
            "user.@example.com",
            ".user@example.com",
            "user@example.c",
        ],
    )
    def test_invalid_emails(self, email):
        result = validate_email(email)
        assert not result.valid
        assert [e.type for e in result.errors] == [ErrorType.EMAIL]

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_fails_as_email(self, value):
        result = validate_email(value)
        assert not result.valid
        assert result.errors[0].type == ErrorType.EMAIL

    def test_custom_message(self):
        result = validate_email("invalid-email", "Enter a valid email address")
        assert result.errors[0].message == "Enter a valid email address"


class TestValidateLength:
    def test_below_min(self):
        result = validate_length("abc", min=5)
        assert not result.valid
        assert result.errors[0].type == ErrorType.MIN_LENGTH
        assert result.errors[0].message == "Minimum length is 5 characters"

    def test_above_max(self):
        result = validate_length("abcdefghi", max=5)
        assert not result.valid
        assert result.errors[0].type == ErrorType.MAX_LENGTH
        assert result.errors[0].message == "Maximum length is 5 characters"

    def test_within_limits(self):
        assert validate_length("abc", min=2, max=5).valid

    def test_boundaries_pass(self):
        assert validate_length("abc", min=3).valid
        assert validate_length("abc", max=3).valid
        assert validate_length("abc", min=3, max=3).valid

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_counts_as_zero(self, value):
        result = validate_length(value, min=1)
        assert [e.type for e in result.errors] == [ErrorType.MIN_LENGTH]
        assert validate_length(value, max=5).valid

    def test_no_trimming(self):
        assert validate_length("   ", min=3).valid

    def test_custom_messages(self):
        short = validate_length("a", min=3, min_message="Text is too short")
        long = validate_length("abcdef", max=3, max_message="Text is too long")
        assert short.errors[0].message == "Text is too short"
        assert long.errors[0].message == "Text is too long"

    def test_counts_utf16_units(self):
        assert not validate_length("\U0001F600", max=1).valid
        assert validate_length("\U0001F600", min=2, max=2).valid
        assert validate_length("\u00e9", max=1).valid

    def test_no_bounds_passes(self):
        assert validate_length("anything").valid

    @pytest.mark.parametrize(
        "kwargs", [{"min": -1}, {"max": -2}, {"min": 5, "max": 2}]
    )
    def test_bad_bounds_raise(self, kwargs):
        with pytest.raises(ValueError):
            validate_length("abc", **kwargs)


class TestValidateMatch:
    def test_mismatch(self):
        result = validate_match("p1", "p2")
        assert not result.valid
        assert result.errors[0].type == ErrorType.MATCH
        assert result.errors[0].message == DEFAULT_MESSAGES[ErrorType.MATCH]

    def test_match(self):
        assert validate_match("x", "x").valid

    def test_case_sensitive(self):
        assert not validate_match("Password", "password").valid

    def test_none_matches_none(self):
        assert validate_match(None, None).valid
        assert not validate_match("", None).valid

    def test_custom_message(self):
        result = validate_match("p1", "p2", "Passwords do not match")
        assert result.errors[0].message == "Passwords do not match"


class TestValidateCustom:
    @staticmethod
    def has_number(value):
        return any(c.isdigit() for c in value)

    def test_predicate_false(self):
        result = validate_custom("abcdef", self.has_number)
        assert not result.valid
        assert result.errors[0].type == ErrorType.CUSTOM
        assert result.errors[0].message == "Invalid value"

    def test_predicate_true(self):
        assert validate_custom("abc123", self.has_number).valid

    def test_custom_message(self):
        result = validate_custom(
            "abcdef",
            lambda v: any(c.isupper() for c in v),
            "Must contain at least one uppercase letter",
        )
        assert result.errors[0].message == "Must contain at least one uppercase letter"
        assert result.errors[0].type == ErrorType.CUSTOM

    def test_predicate_exception_propagates(self):
        def broken(value):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            validate_custom("x", broken)

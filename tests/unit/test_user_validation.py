"""
Unit tests for candidate-record validation.
"""
import pytest

from app.application.services.user_service import ensure_valid, validate_user_create
from app.core.exceptions import ValidationException
from app.domain.schemas.user import UserCreate


def _candidate(**overrides) -> UserCreate:
    data = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
    }
    data.update(overrides)
    return UserCreate.model_validate(data)


def _fields(errors):
    return {e.field: e.message for e in errors}


def test_valid_candidate_has_no_errors():
    assert validate_user_create(_candidate(phone="123-456-7890", company="Test Co")) == []


def test_phone_and_company_are_unconstrained():
    assert validate_user_create(_candidate(phone="call me maybe", company="x" * 200)) == []


def test_empty_first_name_is_required():
    errors = _fields(validate_user_create(_candidate(firstName="")))
    assert errors == {"firstName": "First name is required"}


def test_whitespace_name_counts_as_non_empty():
    assert validate_user_create(_candidate(firstName=" ", lastName="  ")) == []


def test_long_last_name_is_rejected():
    errors = _fields(validate_user_create(_candidate(lastName="x" * 51)))
    assert errors == {"lastName": "Last name must be less than 50 characters"}


def test_fifty_character_name_is_accepted():
    assert validate_user_create(_candidate(firstName="x" * 50, lastName="y" * 50)) == []


@pytest.mark.parametrize("email", ["a@b.test", "a@host.local", "first.last+tag@example.com"])
def test_reserved_domains_pass_syntax_check(email):
    assert validate_user_create(_candidate(email=email)) == []


@pytest.mark.parametrize("email", ["", "not-an-email", "john@", "@example.com", "john doe@example.com"])
def test_invalid_email_syntax(email):
    errors = _fields(validate_user_create(_candidate(email=email)))
    assert errors == {"email": "Please enter a valid email address"}


def test_all_problems_reported_together():
    errors = validate_user_create(_candidate(firstName="", lastName="", email="nope"))
    assert [e.field for e in errors] == ["firstName", "lastName", "email"]


def test_ensure_valid_raises_with_field_details():
    with pytest.raises(ValidationException) as exc_info:
        ensure_valid(_candidate(email="nope"))

    exc = exc_info.value
    assert exc.status_code == 400
    assert exc.details == {
        "errors": [{"field": "email", "message": "Please enter a valid email address"}]
    }


@pytest.mark.parametrize("field", ["phone", "company"])
def test_blank_optional_fields_become_absent(field):
    candidate = _candidate(**{field: "  "})
    assert getattr(candidate, field) is None

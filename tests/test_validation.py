import pytest

from signupkit.validation import (
    validate_email,
    validate_password,
    validate_confirm,
    validate_terms,
    validate_form,
    is_form_valid,
)

STRONG = "Str0ng!Passw0rd"


@pytest.mark.parametrize(
    "email,expected",
    [
        ("user@example.com", (True, "")),
        ("  user@example.com  ", (True, "")),
        ("", (False, "Email is required")),
        ("   ", (False, "Email is required")),
        ("user@example", (False, "Enter a valid email address")),
        ("user@example.c", (False, "Enter a valid email address")),
        ("us er@example.com", (False, "Enter a valid email address")),
        ("userexample.com", (False, "Enter a valid email address")),
    ],
)
def test_validate_email(email, expected):
    assert validate_email(email) == expected


def test_validate_password_requires_all_criteria():
    assert validate_password("") == (False, "Password is required")
    assert validate_password("Str0ngPassw0rd") == (False, "Password does not meet all requirements")
    assert validate_password(STRONG) == (True, "")


def test_validate_confirm():
    assert validate_confirm(STRONG, STRONG) == (True, "")
    assert validate_confirm(STRONG, "other") == (False, "Passwords do not match")
    # two empty fields do not count as matching
    assert validate_confirm("", "") == (False, "Passwords do not match")


def test_validate_terms():
    assert validate_terms(True) == (True, "")
    assert validate_terms(False) == (False, "You must accept the terms")


def test_validate_form_reports_every_field():
    errors = validate_form("", "", "", False)
    assert list(errors) == ["email", "password", "confirmPassword", "terms"]
    assert all(errors.values())
    assert not is_form_valid(errors)


def test_validate_form_valid():
    errors = validate_form("a@b.co", STRONG, STRONG, True)
    assert is_form_valid(errors)
    assert errors == {"email": "", "password": "", "confirmPassword": "", "terms": ""}

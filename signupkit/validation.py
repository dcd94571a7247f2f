"""
signupkit.validation

Field rules for the signup form. Every validator returns (is_valid, message);
message is "" when the field is valid.
"""

import re
from typing import Dict, Tuple

from .strength import evaluate

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$")

Result = Tuple[bool, str]


def validate_email(value: str) -> Result:
    value = value.strip()
    if not value:
        return False, "Email is required"
    if not EMAIL_RE.match(value):
        return False, "Enter a valid email address"
    return True, ""


def validate_password(value: str) -> Result:
    if not value:
        return False, "Password is required"
    # all six criteria are required to submit
    if not evaluate(value).is_acceptable:
        return False, "Password does not meet all requirements"
    return True, ""


def validate_confirm(password: str, confirm: str) -> Result:
    if confirm and confirm == password:
        return True, ""
    return False, "Passwords do not match"


def validate_terms(checked: bool) -> Result:
    if checked:
        return True, ""
    return False, "You must accept the terms"


def validate_form(email: str, password: str, confirm: str, terms: bool) -> Dict[str, str]:
    """Run every field rule and return field -> message ("" when valid)."""
    results = {
        "email": validate_email(email),
        "password": validate_password(password),
        "confirmPassword": validate_confirm(password, confirm),
        "terms": validate_terms(terms),
    }
    return {name: msg for name, (_, msg) in results.items()}


def is_form_valid(errors: Dict[str, str]) -> bool:
    return not any(errors.values())

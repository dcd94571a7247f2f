"""
signupkit.errors

SignupkitError
├── ValidationError
│   └── SignupValidationError
├── ConfigurationError
└── StorageError
"""

from typing import Dict, Optional


class SignupkitError(Exception):
    """Base exception for all signupkit errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


class ValidationError(SignupkitError):
    pass


class SignupValidationError(ValidationError):
    """Raised on submit when one or more form fields are invalid."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        failing = [name for name, msg in errors.items() if msg]
        super().__init__(
            message or "Signup form has invalid fields",
            code="SIGNUP_INVALID",
            detail=", ".join(failing),
        )
        self.errors = dict(errors)


class ConfigurationError(SignupkitError):
    pass


class StorageError(SignupkitError):
    pass

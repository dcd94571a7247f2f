"""signupkit: signup form helpers built around a password strength evaluator."""

from .strength import evaluate, StrengthReport, Tier, COMMON_PASSWORDS

__version__ = "1.0.0"

__all__ = ["evaluate", "StrengthReport", "Tier", "COMMON_PASSWORDS", "__version__"]

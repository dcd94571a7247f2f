"""
signupkit.suggestions

Turn a strength report into the checklist hints shown under the password
field, plus an example replacement password from the generator.
"""

from typing import Dict, List

from .strength import evaluate, StrengthReport
from .generator import generate_signup_password

HINTS = {
    "length": "Use at least 12 characters",
    "upper": "Add an uppercase letter",
    "lower": "Add a lowercase letter",
    "digit": "Include a number",
    "symbol": "Include a symbol",
    "common": "Avoid common passwords",
}


def hints_for(report: StrengthReport) -> List[str]:
    return [HINTS[name] for name in report.failed]


def suggest(password: str) -> Dict:
    """
    {
        "report": StrengthReport,
        "suggestions": [str],  # one per failed criterion, evaluation order
        "examples": [str],     # generated passwords that pass every criterion
    }
    """
    report = evaluate(password)
    return {
        "report": report,
        "suggestions": hints_for(report),
        "examples": [generate_signup_password()],
    }

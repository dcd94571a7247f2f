"""
signupkit.strength

Password strength evaluator used by every signup front end:
- COMMON_PASSWORDS: fixed denylist, checked case-insensitively
- evaluate(password): returns a StrengthReport with the six criteria,
  the number passed, a 0-100 percent and a low/mid/high tier

The evaluator never accepts or rejects a password. Callers decide that
(the signup form requires all six criteria).
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping

COMMON_PASSWORDS = frozenset({
    "password", "123456", "123456789", "qwerty", "abc123", "password1",
    "111111", "12345678", "iloveyou", "admin", "welcome", "monkey",
})

MIN_LENGTH = 12

# evaluation order; reports and UIs list criteria in this order
CRITERIA = ("length", "upper", "lower", "digit", "symbol", "common")

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^A-Za-z0-9]")


class Tier(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"

    @property
    def color(self) -> str:
        return {
            Tier.LOW: "#fca5a5",
            Tier.MID: "#fbbf24",
            Tier.HIGH: "#6ee7b7",
        }[self]

    @classmethod
    def from_percent(cls, percent: int) -> "Tier":
        # 5 of 6 criteria is 83%, the lowest score shown as strong
        if percent >= 83:
            return cls.HIGH
        if percent >= 50:
            return cls.MID
        return cls.LOW


@dataclass(frozen=True)
class StrengthReport:
    criteria: Mapping[str, bool]
    passed: int
    percent: int
    tier: Tier

    @property
    def is_acceptable(self) -> bool:
        return self.passed == len(CRITERIA)

    @property
    def failed(self) -> List[str]:
        return [name for name, ok in self.criteria.items() if not ok]

    def to_dict(self) -> Dict:
        return {
            "criteria": dict(self.criteria),
            "passed": self.passed,
            "percent": self.percent,
            "colorTier": self.tier.value,
        }


def evaluate(password: str) -> StrengthReport:
    """
    Evaluate a candidate password against the six signup criteria.

    Defined for every string. The empty string reports "common" as met but
    scores zero: nothing typed yet earns no credit. percent uses the
    built-in round(); for the seven possible pass counts it agrees with
    round-half-up.
    """
    criteria = {
        "length": len(password) >= MIN_LENGTH,
        "upper": bool(_UPPER.search(password)),
        "lower": bool(_LOWER.search(password)),
        "digit": bool(_DIGIT.search(password)),
        "symbol": bool(_SYMBOL.search(password)),
        "common": password.lower() not in COMMON_PASSWORDS,
    }
    passed = sum(1 for ok in criteria.values() if ok) if password else 0
    percent = round(passed / len(CRITERIA) * 100)
    return StrengthReport(
        criteria=MappingProxyType(criteria),
        passed=passed,
        percent=percent,
        tier=Tier.from_percent(percent),
    )

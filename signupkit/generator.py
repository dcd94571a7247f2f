"""
signupkit.generator
Password for the signup "Generate" button, drawn with Python's secrets module.
"""

from secrets import choice, SystemRandom
from typing import List, Tuple

# look-alike characters (I, O, l, 0, 1) are left out
SIGNUP_UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
SIGNUP_LOWER = "abcdefghijkmnopqrstuvwxyz"
SIGNUP_DIGITS = "23456789"
SIGNUP_SYMBOLS = "!@#$%^&*()-_=+[]{};:,.?"

# (pool, how many) drawn before shuffling; 16 characters in total
SIGNUP_RECIPE: Tuple[Tuple[str, int], ...] = (
    (SIGNUP_UPPER, 3),
    (SIGNUP_LOWER, 5),
    (SIGNUP_DIGITS, 2),
    (SIGNUP_SYMBOLS, 2),
    (SIGNUP_UPPER + SIGNUP_LOWER + SIGNUP_DIGITS + SIGNUP_SYMBOLS, 4),
)

_sysrand = SystemRandom()


def generate_signup_password() -> str:
    """
    3 upper, 5 lower, 2 digits, 2 symbols and 4 from any pool, shuffled.
    Always satisfies every signup strength criterion.
    """
    chars: List[str] = []
    for pool, count in SIGNUP_RECIPE:
        chars.extend(choice(pool) for _ in range(count))
    _sysrand.shuffle(chars)
    return "".join(chars)

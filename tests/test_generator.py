from signupkit.generator import (
    generate_signup_password,
    SIGNUP_RECIPE,
    SIGNUP_UPPER,
    SIGNUP_LOWER,
    SIGNUP_DIGITS,
    SIGNUP_SYMBOLS,
)
from signupkit.strength import evaluate


def test_recipe_adds_up_to_sixteen():
    assert sum(count for _, count in SIGNUP_RECIPE) == 16


def test_signup_password_composition():
    pw = generate_signup_password()
    assert len(pw) == 16
    assert sum(c in SIGNUP_UPPER for c in pw) >= 3
    assert sum(c in SIGNUP_LOWER for c in pw) >= 5
    assert sum(c in SIGNUP_DIGITS for c in pw) >= 2
    assert sum(c in SIGNUP_SYMBOLS for c in pw) >= 2
    assert not set(pw) & set("IOl01")


def test_signup_passwords_always_pass_every_criterion():
    for _ in range(200):
        assert evaluate(generate_signup_password()).passed == 6


def test_passwords_differ():
    seen = {generate_signup_password() for _ in range(20)}
    assert len(seen) > 1

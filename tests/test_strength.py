from signupkit.strength import evaluate, COMMON_PASSWORDS, CRITERIA, Tier


def test_empty_password_scores_zero():
    r = evaluate("")
    assert r.passed == 0
    assert r.percent == 0
    assert r.tier is Tier.LOW
    assert r.criteria["common"] is True  # empty is not in the common list
    for name in ("length", "upper", "lower", "digit", "symbol"):
        assert r.criteria[name] is False


def test_criteria_keys_in_evaluation_order():
    r = evaluate("anything")
    assert list(r.criteria) == ["length", "upper", "lower", "digit", "symbol", "common"]
    assert tuple(r.criteria) == CRITERIA


def test_detects_common_password_case_insensitively():
    for pw in ("password", "PASSWORD", "Password", "QwErTy", "Admin"):
        assert evaluate(pw).criteria["common"] is False
    assert evaluate("password12").criteria["common"] is True


def test_common_set_contents():
    required = {
        "password", "123456", "123456789", "qwerty", "abc123", "password1",
        "111111", "12345678", "iloveyou", "admin", "welcome", "monkey",
    }
    assert required <= COMMON_PASSWORDS
    assert isinstance(COMMON_PASSWORDS, frozenset)


def test_meets_all_criteria_for_strong_password():
    r = evaluate("Str0ng!Passw0rd")
    assert r.passed == 6
    assert r.percent == 100
    assert r.tier is Tier.HIGH
    assert r.is_acceptable
    assert r.failed == []


def test_partial_pass_is_mid_tier():
    # length, upper, lower and not-common; no digit or symbol
    r = evaluate("Abcdefghijkl")
    assert r.criteria["length"] and r.criteria["upper"] and r.criteria["lower"]
    assert not r.criteria["digit"]
    assert not r.criteria["symbol"]
    assert r.passed == 4
    assert r.percent == 67
    assert r.tier is Tier.MID
    assert not r.is_acceptable
    assert r.failed == ["digit", "symbol"]


def test_five_of_six_is_high_tier():
    r = evaluate("Str0ngPassw0rd")  # no symbol
    assert r.passed == 5
    assert r.percent == 83
    assert r.tier is Tier.HIGH


def test_percent_and_tier_for_each_pass_count():
    samples = {
        "password": (1, 17, Tier.LOW),       # lower only
        "abc": (2, 33, Tier.LOW),            # lower, common
        "abc1": (3, 50, Tier.MID),           # lower, digit, common
        "Abc1": (4, 67, Tier.MID),
        "Abc1!": (5, 83, Tier.HIGH),
        "Abcdefghij1!": (6, 100, Tier.HIGH),
    }
    for pw, (passed, percent, tier) in samples.items():
        r = evaluate(pw)
        assert (r.passed, r.percent, r.tier) == (passed, percent, tier), pw


def test_passed_matches_true_criteria():
    for pw in ("x", "12345678", "Tr0ub4dor&3", "correct horse battery staple", "ÀÉÎõü", "\t\n", "A" * 500):
        r = evaluate(pw)
        assert r.passed == sum(r.criteria.values())
        assert r.percent == round(r.passed / 6 * 100)


def test_ascii_only_character_classes():
    r = evaluate("ÄÖÜäöü٣")
    assert not r.criteria["upper"]
    assert not r.criteria["lower"]
    assert not r.criteria["digit"]
    assert r.criteria["symbol"]


def test_space_counts_as_symbol_and_length_is_not_capped():
    assert evaluate("a b").criteria["symbol"]
    assert evaluate("a" * 10_000).criteria["length"]
    assert not evaluate("a" * 11).criteria["length"]
    assert evaluate("a" * 12).criteria["length"]


def test_evaluate_is_idempotent():
    assert evaluate("Str0ng!Passw0rd") == evaluate("Str0ng!Passw0rd")
    assert evaluate("").to_dict() == evaluate("").to_dict()


def test_report_is_immutable():
    r = evaluate("abc")
    try:
        r.criteria["length"] = True
        mutated = True
    except TypeError:
        mutated = False
    assert not mutated
    try:
        r.passed = 6
        mutated = True
    except AttributeError:
        mutated = False
    assert not mutated


def test_to_dict_shape():
    d = evaluate("Str0ng!Passw0rd").to_dict()
    assert set(d) == {"criteria", "passed", "percent", "colorTier"}
    assert d["colorTier"] == "high"
    assert all(d["criteria"].values())


def test_tier_colors():
    assert Tier.from_percent(82) is Tier.MID
    assert Tier.from_percent(49) is Tier.LOW
    assert len({t.color for t in Tier}) == 3

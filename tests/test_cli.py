from signupkit.cli import main
from signupkit.drafts import DraftStore

STRONG = "Str0ng!Passw0rd"


def test_score_strong_password(capsys):
    assert main(["score", STRONG]) == 0
    out = capsys.readouterr().out
    assert "100%" in out
    assert "Passed 6 of 6" in out
    assert "Suggestions" not in out


def test_score_weak_password_lists_suggestions(capsys):
    assert main(["score", "password"]) == 0
    out = capsys.readouterr().out
    assert "Avoid common passwords" in out
    assert "Example" in out


def test_generate_copies(capsys):
    assert main(["generate", "--copies", "2"]) == 0
    out = capsys.readouterr().out
    assert "Password #1" in out and "Password #2" in out

    assert main(["generate", "--copies", "0"]) == 1
    assert "--copies must be at least 1" in capsys.readouterr().out


def test_check_email(capsys):
    assert main(["check-email", "free@example.com", "--delay", "0"]) == 0
    assert "Email available" in capsys.readouterr().out
    assert main(["check-email", "taken@example.com", "--delay", "0"]) == 1
    assert "Email already in use" in capsys.readouterr().out


def test_validate(capsys):
    ok = main(["validate", "--email", "a@b.co", "--password", STRONG, "--confirm", STRONG, "--terms"])
    assert ok == 0
    bad = main(["validate", "--email", "a@b", "--password", "abc", "--confirm", "abd"])
    assert bad == 1
    out = capsys.readouterr().out
    assert "Enter a valid email address" in out
    assert "You must accept the terms" in out


def test_draft_show_and_clear(tmp_path, capsys):
    path = str(tmp_path / "draft.json")
    assert main(["draft", "show", "-f", path]) == 0
    assert "No saved draft" in capsys.readouterr().out

    DraftStore(path).save("me@example.com", True)
    main(["draft", "show", "-f", path])
    assert "me@example.com" in capsys.readouterr().out

    main(["draft", "clear", "-f", path])
    assert DraftStore(path).load() is None


def test_draft_storage_failure_exits_nonzero(tmp_path, capsys):
    folder = tmp_path / "not-a-file"
    folder.mkdir()
    assert main(["draft", "clear", "-f", str(folder)]) == 1
    assert "Could not remove draft" in capsys.readouterr().out


def test_bad_config_exits_with_message(tmp_path, monkeypatch, capsys):
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    (home / "config.json").write_text('{"availability_delay_ms": "soon"}', encoding="utf-8")
    monkeypatch.setenv("SIGNUPKIT_HOME", str(home))
    assert main(["generate"]) == 2
    assert "Bad configuration" in capsys.readouterr().out

import pytest

from signupkit.drafts import DraftStore


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep config and drafts out of the real user profile."""
    monkeypatch.setenv("SIGNUPKIT_HOME", str(tmp_path / "home"))
    yield


@pytest.fixture
def draft_store(tmp_path) -> DraftStore:
    return DraftStore(str(tmp_path / "draft.json"))


@pytest.fixture
def client(tmp_path):
    from signupkit.spweb.api import app

    app.config.update(
        TESTING=True,
        AVAILABILITY_DELAY=0,
        SUBMIT_DELAY=0,
        DRAFT_PATH=str(tmp_path / "web-draft.json"),
    )
    with app.test_client() as c:
        yield c

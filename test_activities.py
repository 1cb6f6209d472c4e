from app.services.activity_logger import ActivityLogger, snippet, actor_name
from app.models import ActivityType


def test_feed_is_capped_and_newest_first(client, db):
    for i in range(25):
        ActivityLogger.log(db, "ACME-1", ActivityType.TASK_CREATED, f"event {i}")
    ActivityLogger.log(db, "OTHER", ActivityType.TASK_CREATED, "elsewhere")

    response = client.get("/api/activities/ACME-1")

    assert response.status_code == 200
    feed = response.json()
    assert len(feed) == 20
    assert feed[0]["description"] == "event 24"
    assert feed[-1]["description"] == "event 5"
    assert feed[0]["action_type"] == "TASK_CREATED"


def test_feed_for_unknown_project_is_empty(client):
    assert client.get("/api/activities/NOPE").json() == []


def test_snippet():
    assert snippet("x" * 30) == "x" * 30
    assert snippet("x" * 31) == "x" * 30 + "..."
    assert snippet(None) == ""


def test_actor_name_fallbacks():
    assert actor_name("Neha", "n@x.com", "Member") == "Neha"
    assert actor_name(None, "neha.k@x.com", "Member") == "neha.k"
    assert actor_name("  ", None, "Someone") == "Someone"


def test_log_swallows_failures(db, monkeypatch):
    def broken_commit():
        raise RuntimeError("disk full")

    monkeypatch.setattr(db, "commit", broken_commit)

    assert ActivityLogger.log(db, "ACME-1", ActivityType.QUERY_ADDED, "x") is None


def test_feed_never_exceeds_twenty_when_limit_raised(client, db, monkeypatch):
    from app.config.settings import settings
    monkeypatch.setattr(settings, "ACTIVITY_FEED_LIMIT", 50)
    for i in range(30):
        ActivityLogger.log(db, "ACME-1", ActivityType.QUERY_ADDED, f"event {i}")

    feed = client.get("/api/activities/ACME-1").json()

    assert len(feed) == 20
    assert feed[0]["description"] == "event 29"

import logging

from jose import jwt

from app.config.settings import settings
from app.models import Project, Task, Query, User
from seed_all import seed


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Project Collaboration API"}
    assert client.get("/health").json() == {"status": "ok"}


def test_identity_mismatch_is_logged_not_rejected(client, monkeypatch, caplog):
    monkeypatch.setattr(settings, "IDENTITY_TOKEN_SECRET", "test-secret")
    token = jwt.encode({"email": "someone.else@x.com"}, "test-secret", algorithm="HS256")

    with caplog.at_level(logging.WARNING):
        response = client.post(
            "/api/onboarding",
            json={"email": "a@x.com", "role": "Admin", "project_code": "ACME-1"},
            headers={"Authorization": f"Bearer {token}"}
        )

    assert response.status_code == 200
    assert "Identity mismatch" in caplog.text


def test_invalid_token_is_not_fatal(client, monkeypatch):
    monkeypatch.setattr(settings, "IDENTITY_TOKEN_SECRET", "test-secret")

    response = client.post(
        "/api/projects",
        json={"code": "ACME-1", "name": "Acme", "admin_email": "a@x.com"},
        headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 201


def test_seed_populates_through_services(db):
    summary = seed(db)

    assert summary == {"projects": 2, "members": 3, "tasks": 4, "queries": 2}
    assert db.query(Project).count() == 2
    assert db.query(User).filter(User.role == "member").count() == 3
    assert db.query(Task).count() == 4
    assert db.query(Query).count() == 2


def test_seed_is_rerunnable_for_projects(db):
    seed(db)
    summary = seed(db)

    assert summary["projects"] == 0
    assert db.query(User).count() == 5


def test_server_options_follow_settings(monkeypatch):
    from start_server import server_options

    monkeypatch.setattr(settings, "PORT", 9100)
    monkeypatch.setattr(settings, "RELOAD", False)

    options = server_options()

    assert options["port"] == 9100
    assert options["reload"] is False
    assert options["log_level"] == settings.LOG_LEVEL.lower()
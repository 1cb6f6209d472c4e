from app.models import User, Project


def test_create_project_adds_admin_as_first_member(client, onboard, db):
    onboard("a@x.com", "Admin", None)

    response = client.post("/api/projects", json={"code": "ACME-1", "name": "Acme", "admin_email": "a@x.com"})

    assert response.status_code == 201
    body = response.json()
    assert body["code"] == "ACME-1"
    assert body["members"] == ["a@x.com"]
    admin = db.query(User).filter(User.email == "a@x.com").one()
    assert admin.project_code == "ACME-1"
    assert admin.project_name == "Acme"


def test_duplicate_code_conflicts(client):
    payload = {"code": "ACME-1", "name": "Acme", "admin_email": "a@x.com"}
    assert client.post("/api/projects", json=payload).status_code == 201

    response = client.post("/api/projects", json=payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "Project code already exists"


def test_codes_differing_only_in_case_are_distinct(client, db):
    assert client.post("/api/projects", json={"code": "ACME-1", "name": "Acme", "admin_email": "a@x.com"}).status_code == 201
    assert client.post("/api/projects", json={"code": "acme-1", "name": "Acme", "admin_email": "z@x.com"}).status_code == 201
    assert db.query(Project).count() == 2


def test_project_without_user_row_still_created(client, db):
    response = client.post("/api/projects", json={"code": "SOLO", "name": "Solo", "admin_email": "ghost@x.com"})
    assert response.status_code == 201
    assert db.query(User).count() == 0


def test_missing_fields_are_validation_errors(client):
    assert client.post("/api/projects", json={"name": "Acme", "admin_email": "a@x.com"}).status_code == 400
    assert client.post("/api/projects", json={"code": "X", "admin_email": "a@x.com"}).status_code == 400
    assert client.post("/api/projects", json={"code": "X", "name": "Acme"}).status_code == 400


def test_list_admin_projects_newest_first(client):
    client.post("/api/projects", json={"code": "P1", "name": "One", "admin_email": "a@x.com"})
    client.post("/api/projects", json={"code": "P2", "name": "Two", "admin_email": "a@x.com"})
    client.post("/api/projects", json={"code": "P3", "name": "Three", "admin_email": "b@x.com"})

    response = client.get("/api/projects/a@x.com")

    assert response.status_code == 200
    assert [p["code"] for p in response.json()] == ["P2", "P1"]


def test_team_roster(client, onboard):
    onboard("a@x.com", "Admin", "ACME-1")
    onboard("b@x.com", "Member", "ACME-1")
    onboard("c@x.com", "Admin", "OTHER")

    response = client.get("/api/team/ACME-1")

    assert response.status_code == 200
    emails = [m["email"] for m in response.json()["team_members"]]
    assert emails == ["a@x.com", "b@x.com"]

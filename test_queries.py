from app.models import Activity, ActivityType


def post_query(client, **overrides):
    payload = {"project_code": "ACME-1", "text": "Which staging database should we use?", "sender_email": "b@x.com"}
    payload.update(overrides)
    return client.post("/api/queries", json=payload)


def test_create_query(client, db):
    response = post_query(client)

    assert response.status_code == 201
    query = response.json()
    assert query["is_resolved"] is False
    assert query["sender_email"] == "b@x.com"

    activity = db.query(Activity).one()
    assert activity.action_type == ActivityType.QUERY_ADDED
    assert activity.user_name == "b"
    assert activity.description == 'Added a new query: "Which staging database should ..."'


def test_sender_email_is_required(client):
    response = post_query(client, sender_email=None)
    assert response.status_code == 400
    assert response.json()["detail"] == "Sender email is required"


def test_text_and_code_are_required(client):
    assert post_query(client, text=" ").status_code == 400
    assert post_query(client, project_code="").status_code == 400


def test_toggle_twice_restores_state(client, db):
    query_id = post_query(client).json()["id"]

    first = client.patch(f"/api/queries/{query_id}/resolve", json={"user_name": "Priya"})
    second = client.patch(f"/api/queries/{query_id}/resolve")

    assert first.json()["is_resolved"] is True
    assert second.json()["is_resolved"] is False
    resolved = db.query(Activity).filter(Activity.action_type == ActivityType.QUERY_RESOLVED).all()
    assert len(resolved) == 1
    assert resolved[0].user_name == "Priya"
    assert resolved[0].user_email == "b@x.com"


def test_each_resolution_logs_once(client, db):
    query_id = post_query(client, text="Short one").json()["id"]

    for _ in range(4):
        client.patch(f"/api/queries/{query_id}/resolve")

    resolved = db.query(Activity).filter(Activity.action_type == ActivityType.QUERY_RESOLVED).all()
    assert len(resolved) == 2
    assert resolved[0].description == 'Resolved query: "Short one"'
    assert resolved[0].user_name == "Someone"


def test_resolve_unknown_query(client):
    assert client.patch("/api/queries/404/resolve").status_code == 404


def test_list_queries_newest_first(client):
    post_query(client, text="first")
    post_query(client, text="second")
    post_query(client, project_code="OTHER", text="elsewhere")

    texts = [q["text"] for q in client.get("/api/queries/ACME-1").json()]
    assert texts == ["second", "first"]

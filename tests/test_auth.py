from ednc.db import Instructor


def test_register_issues_token(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Kim Teacher", "email": "kim@example.com", "password": "pw123456"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["token_type"] == "bearer"
    assert data["instructor"]["email"] == "kim@example.com"
    assert data["instructor"]["is_admin"] is False

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == data["instructor"]["id"]


def test_register_duplicate_email(client, db_session):
    payload = {"name": "Kim", "email": "dup@example.com", "password": "pw"}
    assert client.post("/api/auth/register", json=payload).status_code == 201

    response = client.post("/api/auth/register", json={**payload, "name": "Other Kim"})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_EMAIL"
    assert db_session.query(Instructor).filter(Instructor.email == "dup@example.com").count() == 1


def test_register_cannot_claim_admin(client, db_session):
    response = client.post(
        "/api/auth/register",
        json={"name": "Sneaky", "email": "sneaky@example.com", "password": "pw", "is_admin": True},
    )

    assert response.status_code == 201
    assert response.json()["instructor"]["is_admin"] is False
    assert db_session.query(Instructor).filter_by(email="sneaky@example.com").one().is_admin is False


def test_register_requires_every_field(client):
    response = client.post("/api/auth/register", json={"name": "  ", "email": "a@b.c", "password": "pw"})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_FAILED"


def test_login_returns_current_admin_flag(client, admin):
    response = client.post("/api/auth/login", json={"email": admin.email, "password": "testpassword123"})

    assert response.status_code == 200
    assert response.json()["instructor"]["is_admin"] is True


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "pw"})

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_login_wrong_password(client, instructor):
    response = client.post("/api/auth/login", json={"email": instructor.email, "password": "nope"})

    assert response.status_code == 401


def test_missing_token(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401


def test_invalid_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 403
    assert response.json()["code"] == "INVALID_TOKEN"


def test_health(client):
    assert client.get("/health").json()["status"] == "OK"


def test_password_is_hashed_as_sent(client):
    client.post("/api/auth/register", json={"name": "Kim", "email": "pw@example.com", "password": "secret  "})

    trimmed = client.post("/api/auth/login", json={"email": "pw@example.com", "password": "secret"})
    exact = client.post("/api/auth/login", json={"email": "pw@example.com", "password": "secret  "})

    assert trimmed.status_code == 401
    assert exact.status_code == 200


def test_blank_password_rejected(client):
    response = client.post("/api/auth/register", json={"name": "Kim", "email": "b@example.com", "password": "   "})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_FAILED"

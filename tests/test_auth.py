from datetime import timedelta

from torqr.security_utils import create_access_token


def test_register_returns_user_without_password(client):
    response = client.post(
        "/auth/register",
        json={"email": "Anna@Heizung.DE", "password": "Secret123!", "name": "Anna"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["email"] == "anna@heizung.de"
    assert "password" not in body["data"]
    assert "passwordHash" not in body["data"]


def test_register_duplicate_email(client, auth_headers):
    response = client.post(
        "/auth/register",
        json={"email": "anna@heizung.de", "password": "Secret123!", "name": "Anna"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["details"] == [{"path": ["email"], "message": "Email is already registered"}]


def test_register_rejects_short_password(client):
    response = client.post(
        "/auth/register", json={"email": "x@y.de", "password": "short", "name": "X"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"
    assert response.json()["details"][0]["path"] == ["password"]


def test_login_returns_token_and_user(client, auth_headers):
    response = client.post(
        "/auth/login", json={"email": "ANNA@heizung.de", "password": "Secret123!"}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tokenType"] == "bearer"
    assert data["accessToken"]
    assert data["user"]["email"] == "anna@heizung.de"


def test_login_wrong_password(client, auth_headers):
    response = client.post("/auth/login", json={"email": "anna@heizung.de", "password": "nope1234"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid email or password"}


def test_login_unknown_email(client):
    response = client.post("/auth/login", json={"email": "ghost@heizung.de", "password": "Secret123!"})
    assert response.status_code == 401


def test_me_resolves_identity(client, auth_headers):
    response = client.get("/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Anna Heizung"


def test_missing_token_is_unauthorized(client):
    response = client.get("/customers")
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_invalid_token_is_unauthorized(client):
    response = client.get("/customers", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_expired_token_is_unauthorized(client, auth_headers):
    user_id = client.get("/auth/me", headers=auth_headers).json()["data"]["id"]
    token = create_access_token(user_id, expires_delta=timedelta(minutes=-1))
    response = client.get("/dashboard/stats", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_unknown_user_is_unauthorized(client):
    token = create_access_token("00000000-0000-0000-0000-000000000000")
    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}

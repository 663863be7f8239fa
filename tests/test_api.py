"""Tests for API endpoints and application-wide handlers."""

from fastapi.testclient import TestClient


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_api_users_unauthorized(client):
    """Test /api/users returns 401 when not authenticated."""
    response = client.get("/api/users")
    assert response.status_code == 401
    assert response.json() == {"message": "You shall not pass!"}


def test_api_users_lists_users_when_logged_in(client):
    """Logged-in clients can list users without password hashes."""
    client.post("/api/auth/register", json={"username": "sue", "password": "1234"})
    client.post("/api/auth/register", json={"username": "bob", "password": "abcd"})
    client.post("/api/auth/login", json={"username": "bob", "password": "abcd"})

    response = client.get("/api/users")

    assert response.status_code == 200
    assert response.json() == [
        {"user_id": 1, "username": "sue"},
        {"user_id": 2, "username": "bob"},
    ]


def test_unknown_route_uses_message_body(client):
    """HTTP errors are rendered with a message field."""
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_storage_error_returns_500(monkeypatch):
    """Unexpected storage errors reach the global handler as a generic 500."""
    import session_auth.database as db_module
    from session_auth.main import app

    async def broken_insert(username, password_hash):
        raise RuntimeError("disk full")

    monkeypatch.setattr("session_auth.auth.users.insert", broken_insert)
    db_module._db_connection = None

    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.post("/api/auth/register", json={"username": "sue", "password": "1234"})

    db_module._db_connection = None
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}

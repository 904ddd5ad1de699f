"""
Tests for the authentication gate and the account endpoints.
"""
import logging
from datetime import datetime, timedelta

from jose import jwt
from sqlalchemy.exc import OperationalError

from tracker.core import config
from tracker.core.logging_config import sanitize_log_data
from tracker.core.security import create_access_token
from tracker.db.session import get_db
from tracker.main import app
from factories import auth_headers


def test_missing_authorization_header(client):
    response = client.get("/api/applications")
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Missing or invalid authorization header"


def test_non_bearer_authorization_header(client):
    response = client.get("/api/applications", headers={"Authorization": "Token abc123"})
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Missing or invalid authorization header"


def test_garbage_token(client):
    response = client.get("/api/applications", headers={"Authorization": "Bearer not-a-jwt"})
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


def test_token_signed_with_another_secret(client, alice):
    token = jwt.encode({"sub": alice.id}, "some-other-secret", algorithm=config.ALGORITHM)
    
    response = client.get("/api/applications", headers={"Authorization": f"Bearer {token}"})
    
    assert response.status_code == 401


def test_expired_token(client, alice):
    token = create_access_token({"sub": alice.id}, expires_delta=timedelta(minutes=-5))
    
    response = client.get("/api/applications", headers={"Authorization": f"Bearer {token}"})
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


def test_token_without_subject(client):
    token = create_access_token({"scope": "tracker"})
    
    response = client.get("/api/applications", headers={"Authorization": f"Bearer {token}"})
    
    assert response.status_code == 401


def test_token_for_unknown_user(client):
    token = create_access_token({"sub": "00000000-0000-0000-0000-000000000000"})
    
    response = client.get("/api/applications", headers={"Authorization": f"Bearer {token}"})
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


def test_missing_secret_is_a_server_error(client, alice, monkeypatch):
    headers = auth_headers(alice)
    monkeypatch.setattr(config, "SECRET_KEY", None)
    
    response = client.get("/api/applications", headers=headers)
    
    assert response.status_code == 500
    assert response.json()["detail"] == "Authentication service unavailable"


class _UnreachableSession:
    def query(self, *args, **kwargs):
        raise OperationalError("SELECT users.id", {}, Exception("connection refused"))
    
    def rollback(self):
        pass
    
    def close(self):
        pass


def test_user_lookup_failure_is_a_server_error(client, alice):
    headers = auth_headers(alice)
    
    def broken_get_db():
        yield _UnreachableSession()
    
    app.dependency_overrides[get_db] = broken_get_db
    
    response = client.get("/api/applications", headers=headers)
    
    assert response.status_code == 500
    assert response.json()["detail"] == "Authentication service unavailable"


def test_valid_token_reaches_route(client, alice):
    response = client.get("/api/applications", headers=auth_headers(alice))
    
    assert response.status_code == 200
    assert response.json() == []


def test_signup_login_and_profile(client):
    signup = client.post("/api/auth/signup", json={"email": "jane@acme.io", "password": "SecurePass123"})
    
    assert signup.status_code == 201
    body = signup.json()
    assert body["user_id"]
    assert body["token_type"] == "bearer"
    
    login = client.post("/api/auth/login", json={"email": "jane@acme.io", "password": "SecurePass123"})
    assert login.status_code == 200
    token = login.json()["access_token"]
    
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == body["user_id"]
    assert me.json()["email"] == "jane@acme.io"
    created_at = datetime.fromisoformat(me.json()["created_at"].replace("Z", "+00:00"))
    assert created_at.utcoffset() == timedelta(0)


def test_signup_duplicate_email(client):
    payload = {"email": "jane@acme.io", "password": "SecurePass123"}
    assert client.post("/api/auth/signup", json=payload).status_code == 201
    
    response = client.post("/api/auth/signup", json=payload)
    
    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"


def test_signup_rejects_short_password(client):
    response = client.post("/api/auth/signup", json={"email": "jane@acme.io", "password": "short"})
    
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request data"


def test_login_wrong_password(client):
    client.post("/api/auth/signup", json={"email": "jane@acme.io", "password": "SecurePass123"})
    
    response = client.post("/api/auth/login", json={"email": "jane@acme.io", "password": "WrongPass123"})
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


def test_login_passwordless_account(client, alice):
    response = client.post("/api/auth/login", json={"email": alice.email, "password": "anything-at-all"})
    
    assert response.status_code == 401


def test_delete_account_removes_owned_data(client, alice, bob):
    alice_headers = auth_headers(alice)
    bob_headers = auth_headers(bob)
    payload = {"companyName": "Acme", "positionTitle": "SRE", "applicationDate": "2024-01-01"}
    application_id = client.post("/api/applications", json=payload, headers=alice_headers).json()["id"]
    client.post(
        "/api/interviews",
        json={"applicationId": application_id, "interviewType": "phone_screen", "interviewDate": "2030-01-01T10:00:00Z"},
        headers=alice_headers,
    )
    client.post("/api/applications", json=payload, headers=bob_headers)
    
    response = client.delete("/api/auth/me", headers=alice_headers)
    
    assert response.status_code == 204
    assert client.get("/api/applications", headers=alice_headers).status_code == 401
    assert len(client.get("/api/applications", headers=bob_headers).json()) == 1


def test_rejected_login_does_not_log_password(client, caplog):
    client.post("/api/auth/signup", json={"email": "jane@acme.io", "password": "SecurePass123"})
    
    with caplog.at_level(logging.INFO, logger="tracker.api.routes.auth"):
        response = client.post("/api/auth/login", json={"email": "jane@acme.io", "password": "Hunter2-wrong"})
    
    assert response.status_code == 401
    assert "Login rejected" in caplog.text
    assert "jane@acme.io" in caplog.text
    assert "Hunter2-wrong" not in caplog.text


def test_duplicate_signup_does_not_log_password(client, caplog):
    payload = {"email": "jane@acme.io", "password": "SecurePass123"}
    client.post("/api/auth/signup", json=payload)
    
    with caplog.at_level(logging.INFO, logger="tracker.api.routes.auth"):
        response = client.post("/api/auth/signup", json=payload)
    
    assert response.status_code == 409
    assert "Signup rejected" in caplog.text
    assert "SecurePass123" not in caplog.text


def test_sanitize_log_data_redacts_secret_keys():
    data = {"email": "jane@acme.io", "password": "SecurePass123", "access_token": "abc", "Authorization": "Bearer x"}
    
    sanitized = sanitize_log_data(data)
    
    assert sanitized == {
        "email": "jane@acme.io",
        "password": "***REDACTED***",
        "access_token": "***REDACTED***",
        "Authorization": "***REDACTED***",
    }
    assert data["password"] == "SecurePass123"

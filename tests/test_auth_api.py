"""
Integration tests for login, registration and the session user record.
"""
import pytest
from itsdangerous import TimestampSigner
import base64
import json

from app.core.config import settings
from app.core.security import SESSION_USER_KEY


@pytest.mark.parametrize(
    "email,password,role",
    [
        ("admin@ka-eco.rw", "admin123", "admin"),
        ("researcher@ka-eco.rw", "research123", "researcher"),
        ("public@ka-eco.rw", "public123", "public"),
    ],
)
def test_login_with_known_credentials(client, email, password, role):
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200

    user = response.json()
    assert user["email"] == email
    assert user["role"] == role
    assert "password" not in user and "password_hash" not in user
    assert settings.SESSION_COOKIE in client.cookies


@pytest.mark.parametrize(
    "email,password",
    [
        ("admin@ka-eco.rw", "wrong"),
        ("admin@ka-eco.rw", "research123"),
        ("nobody@ka-eco.rw", "admin123"),
        ("not-an-email", "admin123"),
    ],
)
def test_login_rejects_other_pairs(client, email, password):
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"
    assert client.get("/auth/me").status_code == 401


def test_login_email_is_case_insensitive(client):
    response = client.post("/auth/login", json={"email": "Admin@Ka-Eco.rw", "password": "admin123"})
    assert response.status_code == 200


def test_inactive_account_cannot_login(client):
    response = client.post("/auth/login", json={"email": "researcher2@ka-eco.rw", "password": "research456"})
    assert response.status_code == 403
    assert response.json()["detail"] == "Account disabled"


def test_me_returns_session_user(researcher_client):
    response = researcher_client.get("/auth/me")
    assert response.status_code == 200
    assert response.json()["role"] == "researcher"


def test_me_requires_login(client):
    assert client.get("/auth/me").status_code == 401


def test_logout_clears_session(admin_client):
    assert admin_client.get("/auth/me").status_code == 200

    response = admin_client.post("/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert admin_client.get("/auth/me").status_code == 401


def test_logout_without_session_is_harmless(client):
    assert client.post("/auth/logout").status_code == 200


def test_unreadable_session_record_is_discarded(client):
    """A session holding a record that is not a user profile counts as logged out."""
    payload = base64.b64encode(json.dumps({SESSION_USER_KEY: {"id": "x"}}).encode("utf-8"))
    cookie = TimestampSigner(str(settings.SECRET_KEY)).sign(payload).decode("utf-8")
    client.cookies.set(settings.SESSION_COOKIE, cookie)

    assert client.get("/auth/me").status_code == 401


def test_register_creates_and_logs_in(client):
    response = client.post(
        "/auth/register",
        json={
            "email": "new.researcher@ka-eco.rw",
            "password": "secret",
            "name": "New Researcher",
            "role": "researcher",
            "organization": "University of Rwanda",
        },
    )
    assert response.status_code == 201
    assert response.json()["role"] == "researcher"
    assert client.get("/auth/me").json()["email"] == "new.researcher@ka-eco.rw"

    client.post("/auth/logout")
    login = client.post("/auth/login", json={"email": "new.researcher@ka-eco.rw", "password": "secret"})
    assert login.status_code == 200


def test_register_duplicate_email(client):
    response = client.post(
        "/auth/register",
        json={"email": "public@ka-eco.rw", "password": "x", "name": "Dup"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Could not create account"


def test_register_cannot_choose_admin(client):
    response = client.post(
        "/auth/register",
        json={"email": "sneaky@ka-eco.rw", "password": "x", "name": "Sneaky", "role": "admin"},
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "fixture_name,expected",
    [
        ("admin_client", ["dashboard", "wetlands", "reports", "admin"]),
        ("researcher_client", ["dashboard", "wetlands", "reports"]),
        ("public_client", ["dashboard", "wetlands", "reports"]),
    ],
)
def test_navigation_per_role(request, fixture_name, expected):
    client = request.getfixturevalue(fixture_name)
    response = client.get("/auth/navigation")
    assert response.status_code == 200
    assert [item["key"] for item in response.json()] == expected


# ============================================================================
# SESSION FOLLOWS ACCOUNT CHANGES
# ============================================================================

def test_demoted_researcher_loses_edit_rights(admin_client, researcher_client):
    assert admin_client.put("/admin/users/2", json={"role": "public"}).status_code == 200

    assert researcher_client.delete("/wetlands/1").status_code == 403
    assert researcher_client.get("/auth/me").json()["role"] == "public"
    assert researcher_client.get("/wetlands/1").status_code == 200


def test_promoted_user_gains_rights_without_relogin(admin_client, public_client):
    assert public_client.get("/admin/stats").status_code == 403
    assert admin_client.put("/admin/users/3", json={"role": "admin"}).status_code == 200
    assert public_client.get("/admin/stats").status_code == 200


def test_deleted_user_session_is_dropped(admin_client, public_client):
    assert admin_client.delete("/admin/users/3").status_code == 200

    assert public_client.get("/auth/me").status_code == 401
    assert public_client.get("/wetlands/").status_code == 401


def test_deactivated_user_session_is_dropped(admin_client, researcher_client):
    assert admin_client.post("/admin/users/2/toggle-status").json()["status"] == "inactive"

    assert researcher_client.get("/auth/me").status_code == 401
    # Reactivation does not restore the cleared session
    admin_client.post("/admin/users/2/toggle-status")
    assert researcher_client.get("/auth/me").status_code == 401

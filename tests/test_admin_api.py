"""
Integration tests for the admin panel endpoints.
"""
import pytest


def test_non_admins_are_forbidden(researcher_client, public_client, client):
    for c in (researcher_client, public_client):
        assert c.get("/admin/stats").status_code == 403
        assert c.get("/admin/users").status_code == 403
    assert client.get("/admin/users").status_code == 401


def test_system_stats(admin_client):
    response = admin_client.get("/admin/stats")
    assert response.status_code == 200

    stats = response.json()
    assert stats["wetlands"]["total"] == 4
    assert stats["total_sensors"] == 14
    assert stats["readings"]["total"] == 480
    assert stats["readings"]["last_7_days"] == 4 * 7 * 4
    assert stats["users"] == {"total": 4, "active": 3}
    assert stats["wetland_status_distribution"] == {"healthy": 2, "degraded": 1, "critical": 1}
    assert sum(stats["sensor_type_distribution"].values()) == 480

    daily = stats["daily_readings"]
    assert len(daily) == 7
    assert [d["date"] for d in daily] == sorted(d["date"] for d in daily)
    assert all(d["readings"] == d["critical"] + d["warning"] + d["normal"] for d in daily)


def test_list_users(admin_client):
    data = admin_client.get("/admin/users").json()
    assert data["total"] == 4
    assert all("password_hash" not in u for u in data["users"])


@pytest.mark.parametrize(
    "params,expected",
    [
        ({"role": "researcher"}, 2),
        ({"role": "admin"}, 1),
        ({"role": "all"}, 4),
        ({"search": "RESEARCH"}, 2),
        ({"search": "public", "role": "public"}, 1),
    ],
)
def test_filter_users(admin_client, params, expected):
    assert admin_client.get("/admin/users", params=params).json()["total"] == expected


def test_filter_users_invalid_role(admin_client):
    assert admin_client.get("/admin/users", params={"role": "superuser"}).status_code == 422


def test_create_user_and_login(admin_client, client):
    response = admin_client.post(
        "/admin/users",
        json={
            "name": "Field Officer",
            "email": "officer@ka-eco.rw",
            "password": "field123",
            "role": "researcher",
            "organization": "REMA",
        },
    )
    assert response.status_code == 201
    assert response.json()["status"] == "active"

    login = client.post("/auth/login", json={"email": "officer@ka-eco.rw", "password": "field123"})
    assert login.status_code == 200
    assert login.json()["role"] == "researcher"


def test_create_duplicate_user(admin_client):
    response = admin_client.post(
        "/admin/users",
        json={"name": "Dup", "email": "admin@ka-eco.rw", "password": "x"},
    )
    assert response.status_code == 400


def test_update_user(admin_client):
    response = admin_client.put("/admin/users/3", json={"role": "researcher", "organization": "UR"})
    assert response.status_code == 200
    assert response.json()["role"] == "researcher"
    assert response.json()["organization"] == "UR"


def test_update_user_email_clash(admin_client):
    assert admin_client.put("/admin/users/3", json={"email": "admin@ka-eco.rw"}).status_code == 400


def test_update_missing_user(admin_client):
    assert admin_client.put("/admin/users/999", json={"name": "Ghost"}).status_code == 404


def test_toggle_status_blocks_login(admin_client, client):
    response = admin_client.post("/admin/users/3/toggle-status")
    assert response.status_code == 200
    assert response.json()["status"] == "inactive"

    login = client.post("/auth/login", json={"email": "public@ka-eco.rw", "password": "public123"})
    assert login.status_code == 403

    assert admin_client.post("/admin/users/3/toggle-status").json()["status"] == "active"
    login = client.post("/auth/login", json={"email": "public@ka-eco.rw", "password": "public123"})
    assert login.status_code == 200


def test_delete_user(admin_client):
    assert admin_client.delete("/admin/users/4").status_code == 200
    assert admin_client.get("/admin/users").json()["total"] == 3
    assert admin_client.delete("/admin/users/4").status_code == 404


def test_admin_cannot_delete_self(admin_client):
    me = admin_client.get("/auth/me").json()
    response = admin_client.delete(f"/admin/users/{me['id']}")
    assert response.status_code == 400


def test_admin_cannot_deactivate_self(admin_client):
    me = admin_client.get("/auth/me").json()
    response = admin_client.post(f"/admin/users/{me['id']}/toggle-status")
    assert response.status_code == 400
    assert admin_client.get("/auth/me").status_code == 200


@pytest.mark.parametrize("payload", [{"status": "inactive"}, {"role": "researcher"}])
def test_admin_cannot_remove_own_access(admin_client, payload):
    me = admin_client.get("/auth/me").json()
    assert admin_client.put(f"/admin/users/{me['id']}", json=payload).status_code == 400
    assert admin_client.get("/admin/stats").status_code == 200


def test_admin_can_edit_own_profile(admin_client):
    me = admin_client.get("/auth/me").json()
    response = admin_client.put(f"/admin/users/{me['id']}", json={"name": "Kamanzi D.", "role": "admin"})
    assert response.status_code == 200
    assert admin_client.get("/auth/me").json()["name"] == "Kamanzi D."

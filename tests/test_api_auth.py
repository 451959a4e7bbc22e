from conftest import ADMIN_PASSWORD, REVEAL_PASSWORD


def test_login_success_and_failure(client):
    ok = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert ok.status_code == 200
    assert ok.json()["success"] is True
    assert len(ok.json()["token"]) == 64

    bad = client.post("/api/auth/login", json={"password": "guess"})
    assert bad.status_code == 401
    assert bad.json() == {"error": "Incorrect password"}


def test_verify_and_logout(client, admin_token):
    assert client.post("/api/auth/verify", json={"token": admin_token}).json() == {"valid": True}

    assert client.post("/api/auth/logout", json={"token": admin_token}).json()["success"] is True

    response = client.post("/api/auth/verify", json={"token": admin_token})
    assert response.status_code == 401
    assert response.json() == {"valid": False}


def test_verify_expires_after_a_day(client, admin_token, fake_time):
    fake_time.advance(hours=24)
    assert client.post("/api/auth/verify", json={"token": admin_token}).status_code == 401


def test_admin_routes_require_session(client):
    for path in (
        "/api/admin/clients",
        "/api/admin/online-appointments",
        "/api/admin/appointments",
        "/api/admin/sales",
        "/api/admin/products",
        "/api/admin/stats",
        "/api/admin/services",
        "/api/admin/reminders",
    ):
        response = client.get(path)
        assert response.status_code == 401, path
        assert response.json() == {"error": "Not authenticated"}


def test_token_accepted_from_query_and_header(client, admin_token):
    assert client.get("/api/admin/clients", params={"token": admin_token}).status_code == 200
    assert client.get("/api/admin/clients", headers={"X-Session-Token": admin_token}).status_code == 200
    assert client.get("/api/admin/clients", params={"token": "forged"}).status_code == 401


def _add_client(admin):
    response = admin.post("/api/admin/clients", json={
        "name": "Ana Souza",
        "phone": "(11) 98765-4321",
        "cpf": "529.982.247-25",
    })
    assert response.status_code == 200
    return response.json()["id"]


def test_reveal_flow(admin, admin_token, fake_time):
    client_id = _add_client(admin)

    listed = admin.get("/api/admin/clients").json()[0]
    assert listed["cpf"] == "***.982.***-**"
    assert listed["phone"] == "(**) *****-4321"

    wrong = admin.post("/api/admin/reveal-data", json={"password": ADMIN_PASSWORD, "sessionToken": admin_token})
    assert wrong.status_code == 401

    ok = admin.post("/api/admin/reveal-data", json={"password": REVEAL_PASSWORD, "sessionToken": admin_token})
    assert ok.json()["success"] is True
    assert admin.post("/api/admin/check-reveal", json={"sessionToken": admin_token}).json() == {"revealed": True}

    listed = admin.get("/api/admin/clients").json()[0]
    assert listed["cpf"] == "529.982.247-25"
    assert listed["phone"] == "(11) 98765-4321"

    history = admin.get(f"/api/admin/clients/{client_id}/history").json()
    assert history["client"]["cpf_display"] == "529.982.247-25"

    fake_time.advance(minutes=30)
    assert admin.post("/api/admin/check-reveal", json={"sessionToken": admin_token}).json() == {"revealed": False}
    assert admin.get("/api/admin/clients").json()[0]["cpf"] == "***.982.***-**"


def test_hide_data(admin, admin_token):
    _add_client(admin)
    admin.post("/api/admin/reveal-data", json={"password": REVEAL_PASSWORD, "sessionToken": admin_token})

    assert admin.post("/api/admin/hide-data", json={"sessionToken": admin_token}).json()["success"] is True
    assert admin.get("/api/admin/clients").json()[0]["phone"] == "(**) *****-4321"


def test_reveal_requires_login(client):
    response = client.post("/api/admin/reveal-data", json={"password": REVEAL_PASSWORD, "sessionToken": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


def test_logout_hides_data(client, admin_token):
    client.post("/api/admin/reveal-data", json={"password": REVEAL_PASSWORD, "sessionToken": admin_token})
    client.post("/api/auth/logout", json={"token": admin_token})

    assert client.post("/api/admin/check-reveal", json={"sessionToken": admin_token}).json() == {"revealed": False}


def test_get_phone_needs_reveal(admin, admin_token):
    client_id = _add_client(admin)

    denied = admin.get(f"/api/admin/get-phone/client/{client_id}")
    assert denied.status_code == 403

    admin.post("/api/admin/reveal-data", json={"password": REVEAL_PASSWORD, "sessionToken": admin_token})
    assert admin.get(f"/api/admin/get-phone/client/{client_id}").json() == {"phone": "(11) 98765-4321"}
    assert admin.get("/api/admin/get-phone/appointment/999").status_code == 404
    assert admin.get(f"/api/admin/get-phone/product/{client_id}").status_code == 400


def test_check_reveal_false_once_session_expires(client, admin_token, fake_time):
    fake_time.advance(hours=23, minutes=50)
    client.post("/api/admin/reveal-data", json={"password": REVEAL_PASSWORD, "sessionToken": admin_token})
    fake_time.advance(minutes=10)

    assert client.post("/api/auth/verify", json={"token": admin_token}).status_code == 401
    assert client.post("/api/admin/check-reveal", json={"sessionToken": admin_token}).json() == {"revealed": False}

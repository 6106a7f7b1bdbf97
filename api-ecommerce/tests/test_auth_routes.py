API = "/ecommerce/api"
PASSWORD = "super-secret-password"


def test_login_success(client, seed_user):
    seed_user("alice@shop.io")

    response = client.post(f"{API}/auth/login", json={"email": "Alice@shop.io", "password": PASSWORD})

    assert response.status_code == 200
    result = response.get_json()["result"]
    assert result["accessToken"]
    assert result["authenticated"] is True
    assert result["expiresIn"] == 3600


def test_login_wrong_password(client, seed_user):
    seed_user("alice@shop.io")

    response = client.post(f"{API}/auth/login", json={"email": "alice@shop.io", "password": "wrong-one"})

    assert response.status_code == 401
    assert response.get_json() == {"code": 401, "message": "Unauthenticated"}


def test_login_unknown_email(client):
    response = client.post(f"{API}/auth/login", json={"email": "ghost@shop.io", "password": PASSWORD})

    assert response.status_code == 401


def test_logout_revokes_token(client, seed_user, login):
    seed_user("alice@shop.io")
    headers = login("alice@shop.io")

    response = client.post(f"{API}/auth/logout", headers=headers)

    assert response.status_code == 200
    assert client.get(f"{API}/users/me", headers=headers).status_code == 401
    # a fresh login still works
    fresh = login("alice@shop.io")
    assert client.get(f"{API}/users/me", headers=fresh).status_code == 200


def test_health(client):
    assert client.get("/ecommerce/health").get_json() == {"code": 200, "result": {"status": "ok"}}
    assert client.get("/ecommerce/health/db").status_code == 200


def test_unknown_route_is_wrapped(client):
    response = client.get(f"{API}/nope")

    assert response.status_code == 404
    assert response.get_json()["code"] == 404

# tests/test_auth.py
from .conftest import LOGIN, PASSWORD


def test_login_success(anon_client):
    resp = anon_client.post("/login", json={"username": LOGIN, "password": PASSWORD})

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "success"
    assert resp.get_json()["data"] == {"username": LOGIN}


def test_login_accepts_form(anon_client):
    resp = anon_client.post("/login", data={"username": LOGIN, "password": PASSWORD})
    assert resp.status_code == 200


def test_login_wrong_password(anon_client):
    resp = anon_client.post("/login", json={"username": LOGIN, "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["error"]["code"] == "UNAUTHORIZED"


def test_login_unknown_user(anon_client):
    resp = anon_client.post("/login", json={"username": "root", "password": PASSWORD})
    assert resp.status_code == 401


def test_mutations_require_login(anon_client):
    resp = anon_client.post("/api/addPosition", json={"position": "Shed"})

    assert resp.status_code == 401
    assert resp.get_json()["error"]["code"] == "UNAUTHORIZED"


def test_reads_are_public(anon_client):
    resp = anon_client.get("/api/getPositions")
    assert resp.status_code == 200
    assert resp.get_json()["data"] == []


def test_logout(client):
    assert client.post("/logout").status_code == 200
    assert client.post("/api/addPosition", json={"position": "Shed"}).status_code == 401

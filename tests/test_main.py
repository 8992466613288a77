def test_health_check(client):
    assert client.get("/").json() == {"status": "ok"}


def test_cors_permite_el_frontend(client):
    resp = client.options(
        "/planes",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_rechaza_otros_origenes(client):
    resp = client.options(
        "/planes",
        headers={"Origin": "http://otro.example.com", "Access-Control-Request-Method": "GET"},
    )
    assert "access-control-allow-origin" not in resp.headers

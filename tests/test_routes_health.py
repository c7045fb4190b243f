def test_health_check(client):
    response = client.get("/health/check")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert body["payments_configured"] is True


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200

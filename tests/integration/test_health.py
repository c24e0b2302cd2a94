def test_health_reports_database(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["details"]["database"]["status"] == "healthy"
    assert "total_errors" in body["error_statistics"]


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200

import pytest
from datetime import datetime


@pytest.mark.unit
class TestSystemRoutes:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["message"]
        assert datetime.fromisoformat(body["timestamp"])

    def test_home_page_links(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'href="/health"' in response.text
        assert 'href="/api/kelas"' in response.text

    def test_cors_allows_any_origin(self, client):
        response = client.get("/health", headers={"Origin": "http://dashboard.example"})

        assert response.headers["access-control-allow-origin"] == "*"

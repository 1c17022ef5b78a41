import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from educms_backend.middleware import UploadSizeLimiterMiddleware
from educms_backend.middleware.upload_limiter import format_bytes


@pytest.fixture
def limited_client():
    app = FastAPI()
    app.add_middleware(UploadSizeLimiterMiddleware, max_size=16)

    @app.post("/upload")
    async def upload():
        return {"ok": True}

    @app.get("/upload")
    async def read():
        return {"ok": True}

    return TestClient(app)


@pytest.mark.unit
class TestUploadSizeLimiter:

    def test_small_body_passes(self, limited_client):
        response = limited_client.post("/upload", content=b"x" * 16)

        assert response.status_code == 200

    def test_large_body_is_rejected(self, limited_client):
        response = limited_client.post("/upload", content=b"x" * 17)

        assert response.status_code == 413
        body = response.json()
        assert body["success"] is False
        assert "Maximum allowed size is 16 B" in body["message"]

    def test_get_is_not_checked(self, limited_client):
        assert limited_client.get("/upload").status_code == 200

    def test_format_bytes(self):
        assert format_bytes(512) == "512 B"
        assert format_bytes(2048) == "2.0 KB"
        assert format_bytes(10 * 1024 * 1024) == "10.0 MB"

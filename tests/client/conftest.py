"""Pytest configuration and fixtures for educms-client tests."""

from typing import Any, Dict, List, Optional

import httpx
import pytest
import respx

from educms_client.notifications import NotificationLevel, Notifier

BASE_URL = "http://localhost:3000"


class RecordingNotifier(Notifier):
    """Notifier that records every UI hook call."""

    def __init__(self):
        self.messages = []
        self.loading = []
        self.closed = []

    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        self.messages.append((level, message))

    def set_loading(self, loading: bool) -> None:
        self.loading.append(loading)

    def close_editor(self, table) -> None:
        self.closed.append(table)

    def levels(self) -> List[NotificationLevel]:
        return [level for level, _ in self.messages]


def envelope(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        body["message"] = message
    return body


SERVER_DATA = {
    "kelas": [{"id": 1, "nama_kelas": "Matematika", "id_guru": 2}],
    "pengguna": [{"id": "u-1", "nama_lengkap": "Budi", "email": "budi@example.com"}],
    "materi": [],
    "tugas": [{"id": 4, "judul": "PR 1", "id_kelas": 1}],
    "kuis": [],
    "forum": [{"id": 9, "isi": "Halo", "id_kelas": 1}],
}

SERVER_STATS = {"kelas": 1, "pengguna": 1, "materi": 0, "kuis": 0, "forum": 1, "pengumpulan": 5}


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return BASE_URL


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def respx_mock():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def server(respx_mock):
    """Mock every read the dashboard load performs."""
    routes = {}
    for table, rows in SERVER_DATA.items():
        routes[table] = respx_mock.get(f"/api/{table}").mock(
            return_value=httpx.Response(200, json=envelope(rows))
        )
    routes["stats"] = respx_mock.get("/api/dashboard/stats").mock(
        return_value=httpx.Response(200, json=envelope(SERVER_STATS))
    )
    return routes

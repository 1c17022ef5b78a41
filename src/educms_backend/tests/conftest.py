"""Pytest fixtures for the EduCMS backend tests."""

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from educms_backend.database import get_storage
from educms_backend.server import create_app
from educms_backend.storage import StorageError


class FakeStorage:
    """
    In-memory stand-in for StorageClient.

    Mirrors the backend rules the API depends on: single-row operations fail
    unless exactly one row matches, deleting nothing succeeds.
    """

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables = {name: [dict(row) for row in rows] for name, rows in (tables or {}).items()}
        self.calls = []
        self.failing = set()
        self._next_id = 1000

    def _check(self, table: str):
        if table in self.failing:
            raise StorageError(
                f'relation "public.{table}" does not exist',
                status_code=404,
                code="42P01",
            )

    def _matching(self, table: str, eq: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [
            row for row in self.tables.get(table, [])
            if all(str(row.get(column)) == str(value) for column, value in (eq or {}).items())
        ]

    @staticmethod
    def _one(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
        if len(rows) != 1:
            raise StorageError(
                "JSON object requested, multiple (or no) rows returned",
                status_code=406,
                code="PGRST116",
                details=f"The result contains {len(rows)} rows",
            )
        return rows[0]

    async def select(self, table, *, columns="*", eq=None, limit=None, single=False):
        self.calls.append(("select", table, eq))
        self._check(table)
        rows = self._matching(table, eq)
        if single:
            return dict(self._one(rows))
        if limit is not None:
            rows = rows[:limit]
        return [dict(row) for row in rows]

    async def insert(self, table, row):
        self.calls.append(("insert", table, dict(row)))
        self._check(table)
        stored = dict(row)
        if "id" not in stored:
            self._next_id += 1
            stored["id"] = self._next_id
        self.tables.setdefault(table, []).append(stored)
        return dict(stored)

    async def update(self, table, values, *, eq):
        self.calls.append(("update", table, dict(values)))
        self._check(table)
        row = self._one(self._matching(table, eq))
        row.update(values)
        return dict(row)

    async def delete(self, table, *, eq):
        self.calls.append(("delete", table, eq))
        self._check(table)
        doomed = self._matching(table, eq)
        self.tables[table] = [row for row in self.tables.get(table, []) if row not in doomed]

    async def close(self):
        pass

    def writes(self):
        return [call for call in self.calls if call[0] != "select"]


@pytest.fixture
def storage():
    return FakeStorage({
        "categories": [
            {"id": 1, "name": "Matematika", "description": "Aljabar", "teacher_id": 2, "image_url": None},
            {"id": 2, "name": "Fisika", "description": "Mekanika", "teacher_id": 2, "image_url": None},
        ],
        "profiles": [
            {"id": "8c1f6f9e-0b7a-4f43-9c47-3d0e4c6a1b2d", "full_name": "Budi", "email": "budi@example.com",
             "role": "guru", "avatar_url": None},
        ],
        "quizzes": [
            {"id": 1, "category_id": 1, "title": "Kuis 1", "start_time": None, "end_time": None},
        ],
        "messages": [],
        "materi": [],
        "quiz_attempts": [{"id": 1}, {"id": 2}, {"id": 3}],
    })


@pytest.fixture
def app(storage):
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: storage
    return app


@pytest.fixture
def client(app):
    return TestClient(app)

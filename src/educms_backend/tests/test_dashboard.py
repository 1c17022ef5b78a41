"""
Tests for the dashboard counters.
"""

import pytest

from educms_backend.business_logic.stats import gather_settled_with_default


@pytest.mark.unit
class TestDashboardStats:

    def test_counts_rows_per_table(self, client):
        response = client.get("/api/dashboard/stats")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "kelas": 2,
                "pengguna": 1,
                "materi": 0,
                "kuis": 1,
                "forum": 0,
                "pengumpulan": 3,
            },
        }

    def test_failed_count_is_zero(self, client, storage):
        storage.failing.add("quizzes")

        response = client.get("/api/dashboard/stats")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["kuis"] == 0
        assert data["kelas"] == 2
        assert data["pengumpulan"] == 3

    def test_all_counts_failing_still_succeeds(self, client, storage):
        storage.failing.update({"categories", "profiles", "materi", "quizzes", "messages", "quiz_attempts"})

        response = client.get("/api/dashboard/stats")

        assert response.status_code == 200
        assert set(response.json()["data"].values()) == {0}

    def test_stats_route_is_not_a_table(self, client, storage):
        client.get("/api/dashboard/stats")

        assert all(call[1] != "dashboard" for call in storage.calls)


@pytest.mark.unit
class TestGatherSettledWithDefault:

    @pytest.mark.asyncio
    async def test_failures_replaced_by_default(self):
        async def ok(value):
            return value

        async def boom():
            raise RuntimeError("down")

        results = await gather_settled_with_default([ok(1), boom(), ok(3)], default=0)

        assert results == [1, 0, 3]

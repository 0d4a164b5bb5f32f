"""Tests for the scoring and diagnostic HTTP endpoints."""
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from main import app
from tests.conftest import NOW_MS, days_ago, raw_atom

PREFIX = settings.API_PREFIX


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestDiagnostics:

    def test_ping(self, client):
        response = client.get(f"{PREFIX}/ping")
        assert response.status_code == 200
        assert response.json() == {"message": "pong"}

    def test_version(self, client):
        response = client.get(f"{PREFIX}/version")
        assert response.json() == {"version": settings.VERSION}

    def test_healthz(self, client):
        assert client.get(f"{PREFIX}/healthz").json() == {"status": "healthy"}

    def test_health_runs_engine(self, client):
        body = client.get(f"{PREFIX}/health").json()
        assert body["status"] == "healthy"
        assert body["checks"] == {"engine": "ok"}

    def test_root(self, client):
        assert client.get("/").json()["version"] == settings.VERSION


class TestScoresEndpoint:

    def test_scores_keyed_by_id(self, client):
        atoms = [
            raw_atom("t1", pinnedTier="critical"),
            raw_atom("n1", type="note", status="active"),
        ]
        response = client.post(f"{PREFIX}/scores", json={"atoms": atoms, "nowMs": NOW_MS})
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"t1", "n1"}
        assert body["t1"]["priorityTier"] == "Critical"
        assert body["t1"]["priorityScore"] == 0.9
        assert body["n1"]["priorityTier"] is None
        assert body["n1"]["priorityScore"] == 0.0
        assert set(body["n1"]) == {"id", "staleness", "priorityTier", "priorityScore", "energy", "opacity"}

    def test_now_defaults_to_server_clock(self, client):
        response = client.post(f"{PREFIX}/scores", json={"atoms": [raw_atom("t1")]})
        assert response.status_code == 200
        assert 0.0 <= response.json()["t1"]["staleness"] <= 1.0

    def test_malformed_atoms_rejected(self, client):
        response = client.post(
            f"{PREFIX}/scores",
            json={"atoms": [{"id": "t1", "type": "task"}], "nowMs": NOW_MS},
        )
        assert response.status_code == 422


class TestEntropyEndpoint:

    def test_empty_collection(self, client):
        response = client.post(
            f"{PREFIX}/entropy",
            json={"atoms": [], "inboxCount": 0, "inboxCap": 10, "taskCap": 10, "nowMs": NOW_MS},
        )
        assert response.status_code == 200
        assert response.json() == {
            "score": 0.0,
            "level": "green",
            "openTasks": 0,
            "staleCount": 0,
            "zeroLinkCount": 0,
            "inboxCount": 0,
        }

    def test_caps_default_from_settings(self, client):
        response = client.post(
            f"{PREFIX}/entropy",
            json={"atoms": [], "inboxCount": settings.DEFAULT_INBOX_CAP, "nowMs": NOW_MS},
        )
        body = response.json()
        assert body["score"] == pytest.approx(0.35)
        assert body["level"] == "green"

    def test_negative_inbox_count_rejected(self, client):
        response = client.post(f"{PREFIX}/entropy", json={"atoms": [], "inboxCount": -1})
        assert response.status_code == 422


class TestCompressionEndpoint:

    def test_candidates_in_input_order(self, client):
        atoms = [
            raw_atom("orphan", updatedAt=days_ago(1), createdAt=days_ago(20)),
            raw_atom("fresh", links=["orphan"]),
            raw_atom("stale", updatedAt=days_ago(100), createdAt=days_ago(200), links=["x"]),
        ]
        response = client.post(
            f"{PREFIX}/compression-candidates", json={"atoms": atoms, "nowMs": NOW_MS}
        )
        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body] == ["orphan", "stale"]
        assert body[0]["reason"] == "Orphan: no links to active items (20 days old)"
        assert body[1]["reason"] == "Stale: 100 days since last edit"


class TestCapStatusEndpoint:

    def test_cap_status(self, client):
        atoms = [raw_atom(f"t{i}") for i in range(15)]
        response = client.post(
            f"{PREFIX}/caps/status",
            json={"atoms": atoms, "inboxCount": 3, "caps": {"inboxCap": 10, "taskCap": 15}},
        )
        assert response.status_code == 200
        assert response.json() == {"inboxStatus": "ok", "taskStatus": "full"}

    def test_cap_guardrails(self, client):
        response = client.post(
            f"{PREFIX}/caps/status",
            json={"atoms": [], "inboxCount": 0, "caps": {"inboxCap": 100, "taskCap": 15}},
        )
        assert response.status_code == 422

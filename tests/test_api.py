"""
Tests for the HTTP wrapper around the PSRI calculator.
"""

import pytest

from psricalc.core.config import Settings

CORN_BASE = (2.0 / 9.0) ** (1.0 / 3.0)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "service": "psri-service"}


class TestCompute:
    """POST /psri/compute"""

    def test_corn_replicate(self, client, corn_trial):
        resp = client.post("/psri/compute", json=corn_trial)

        assert resp.status_code == 200
        body = resp.json()
        assert body["PSRI"] == pytest.approx(CORN_BASE)
        assert body["PSRI_final"] == body["PSRI"]
        assert body["MSG"] == pytest.approx(10 / 15)
        assert body["t50"] == pytest.approx(3.0)
        assert body["species"] == "corn"
        assert body["time_points"] == [3.0, 5.0, 7.0]

    def test_radicle_and_disease(self, client, corn_trial):
        payload = dict(corn_trial, radicle_summary={"total_count": 15}, diseased_counts=[0, 0, 0])
        resp = client.post("/psri/compute", json=payload)

        assert resp.status_code == 200
        body = resp.json()
        assert body["radicle_vigor_factor"] == pytest.approx(1.10)
        assert body["PSRI"] == pytest.approx(CORN_BASE * 1.10)
        assert body["total_diseased"] == 0.0

    def test_time_points_default_from_settings(self, client, corn_trial):
        payload = dict(corn_trial)
        del payload["time_points"]
        resp = client.post("/psri/compute", json=payload)

        assert resp.status_code == 200
        assert resp.json()["time_points"] == [3.0, 5.0, 7.0]

    def test_length_mismatch_is_bad_request(self, client, corn_trial):
        payload = dict(corn_trial, time_points=[3, 5])
        resp = client.post("/psri/compute", json=payload)

        assert resp.status_code == 400
        assert "differ in length" in resp.json()["detail"]

    def test_zero_total_seeds_is_bad_request(self, client, corn_trial):
        resp = client.post("/psri/compute", json=dict(corn_trial, total_seeds=0))

        assert resp.status_code == 400

    def test_missing_field_is_unprocessable(self, client, corn_trial):
        payload = dict(corn_trial)
        del payload["species"]
        resp = client.post("/psri/compute", json=payload)

        assert resp.status_code == 422


class TestSettings:
    def test_defaults(self):
        s = Settings()

        assert s.PROJECT_NAME == "psri-service"
        assert s.DEFAULT_TIME_POINTS == [3.0, 5.0, 7.0]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TIME_POINTS", "[2, 4, 6, 8]")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings()

        assert s.DEFAULT_TIME_POINTS == [2.0, 4.0, 6.0, 8.0]
        assert s.LOG_LEVEL == "debug"

"""Tests for FastAPI endpoints using TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from betlytics.api.app import create_app


@pytest.fixture
def client():
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def wagers_payload():
    return [
        {"date": "2024-01-01", "odds": 2.0, "stake": 100, "status": "won", "sport": "NBA"},
        {"date": "2024-01-02", "odds": 1.8, "stake": 50, "status": "lost", "sport": "NBA"},
        {"date": "2024-01-03", "odds": 3.5, "stake": 100, "status": "lost"},
        {
            "date": "2024-01-08",
            "odds": 6.0,
            "stake": 20,
            "status": "won",
            "profit": 100,
            "created_at": "2024-01-08T09:00:00Z",
            "settled_at": "2024-01-10T09:00:00Z",
        },
        {"date": "2024-01-09", "odds": 2.5, "stake": 40, "status": "pending"},
    ]


class TestHealthEndpoint:
    def test_health_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data
        assert "version" in data


class TestCalculatorEndpoints:
    def test_kelly(self, client):
        response = client.post(
            "/api/calculators/kelly",
            json={"odds": 2.0, "win_probability": 0.6, "bankroll": 1000},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["kelly_percentage"] == 5.0
        assert data["recommended_stake"] == 50.0
        assert data["is_safe"] is True
        assert data["classification"] == "safe"
        assert data["warning"] is None

    def test_kelly_no_edge_warning(self, client):
        response = client.post(
            "/api/calculators/kelly",
            json={"odds": 2.0, "win_probability": 0.3, "bankroll": 1000, "fraction": 0.5},
        )
        data = response.json()
        assert data["classification"] == "no_edge"
        assert data["warning"]

    def test_invalid_odds_is_422(self, client):
        response = client.post(
            "/api/calculators/kelly",
            json={"odds": 0.5, "win_probability": 0.6, "bankroll": 1000},
        )
        assert response.status_code == 422
        assert response.json()["field"] == "odds"

    def test_ev(self, client):
        response = client.post(
            "/api/calculators/ev",
            json={"odds": 2.0, "win_probability": 0.55, "stake": 100},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["expected_value"] == 10.0
        assert data["is_positive_ev"] is True
        assert data["break_even_probability"] == 50.0

    def test_ev_zero_stake_is_422(self, client):
        response = client.post(
            "/api/calculators/ev",
            json={"odds": 2.0, "win_probability": 0.55, "stake": 0},
        )
        assert response.status_code == 422
        assert response.json()["field"] == "stake"

    def test_clv(self, client):
        response = client.post(
            "/api/calculators/clv",
            json={"opening_odds": 2.0, "closing_odds": 2.2},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["clv_percentage"] == 10.0
        assert data["is_beating_closing"] is True

    def test_missing_field_is_422(self, client):
        response = client.post("/api/calculators/clv", json={"opening_odds": 2.0})
        assert response.status_code == 422


class TestReportEndpoint:
    def test_report(self, client, wagers_payload):
        response = client.post("/api/analytics/report", json={"wagers": wagers_payload})
        assert response.status_code == 200
        data = response.json()
        assert data["stats"]["total_bets"] == 5
        assert data["stats"]["net_profit"] == 50.0
        assert data["streaks"]["current_streak"] == {"type": "win", "count": 1}
        assert data["drawdown"]["max_drawdown"] == 150.0
        assert data["profit_factor"] == pytest.approx(1.33)
        assert data["avg_hold_time_days"] == 2.0

    def test_infinite_profit_factor_serialized(self, client, wagers_payload):
        response = client.post(
            "/api/analytics/report",
            json={"wagers": wagers_payload, "start": "2024-01-08"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["profit_factor"] == "Infinity"
        assert data["start"] == "2024-01-08"
        assert data["stats"]["total_bets"] == 1

    def test_empty_history(self, client):
        response = client.post("/api/analytics/report", json={"wagers": []})
        assert response.status_code == 200
        data = response.json()
        assert data["profit_factor"] == 0.0
        assert data["streaks"]["current_streak"]["type"] == "none"

    def test_invalid_wager_is_422(self, client):
        payload = [{"date": "2024-01-01", "odds": 2.0, "stake": -5, "status": "won"}]
        response = client.post("/api/analytics/report", json={"wagers": payload})
        assert response.status_code == 422
        assert response.json()["field"] == "stake"

    def test_equity_curve(self, client, wagers_payload):
        response = client.post("/api/analytics/equity-curve", json={"wagers": wagers_payload})
        assert response.status_code == 200
        data = response.json()
        assert [p["equity"] for p in data] == [100.0, 50.0, -50.0, 50.0]
        assert data[0]["date"] == "2024-01-01"


class TestBankrollEndpoints:
    def test_bankroll(self, client, wagers_payload):
        response = client.post(
            "/api/analytics/bankroll",
            json={"wagers": wagers_payload, "starting_bankroll": 1000, "as_of": "2024-01-09"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["current_bankroll"] == 1050.0
        assert data["growth_percentage"] == 5.0
        assert data["points"][0] == {"date": None, "bankroll": 1000.0}
        assert len(data["points"]) == 5
        # 2024-01-03 .. 2024-01-09, pending stake included
        assert data["staking"]["last_7_days"] == 160.0
        assert data["staking"]["as_of"] == "2024-01-09"

    def test_negative_bankroll_is_422(self, client, wagers_payload):
        response = client.post(
            "/api/analytics/bankroll",
            json={"wagers": wagers_payload, "starting_bankroll": -5},
        )
        assert response.status_code == 422
        assert response.json()["field"] == "starting_bankroll"

    def test_weekly(self, client, wagers_payload):
        response = client.post("/api/analytics/weekly", json={"wagers": wagers_payload})
        assert response.status_code == 200
        data = response.json()
        assert [w["week_start"] for w in data] == ["2024-01-01", "2024-01-08"]
        assert [w["cumulative_profit"] for w in data] == [-50.0, 50.0]

"""
Integration tests for wetland reports.
"""
from datetime import timedelta

from app.utils.time_utils import utcnow


def test_report_default_range(researcher_client):
    response = researcher_client.get("/reports/wetlands/1")
    assert response.status_code == 200

    report = response.json()
    assert report["wetland"]["name"] == "Nyabugogo Wetland"
    assert report["summary"]["total_readings"] == 120
    assert len(report["readings"]) == 120
    assert len(report["temperature_series"]) == 20
    assert len(report["ph_series"]) == 20

    timestamps = [r["timestamp"] for r in report["readings"]]
    assert timestamps == sorted(timestamps)

    dist = report["status_distribution"]
    assert dist["normal"] + dist["warning"] + dist["critical"] == 120
    assert dist["critical"] == report["summary"]["critical_alerts"]
    assert dist["warning"] == report["summary"]["warning_alerts"]

    assert 20 <= report["summary"]["avg_temperature"] <= 35
    assert 6 <= report["summary"]["avg_ph"] <= 9
    assert report["health_trend"] in ("Improving", "Stable", "Declining")


def test_report_explicit_range(public_client):
    end = utcnow()
    start = end - timedelta(days=2, hours=12)
    response = public_client.get(
        "/reports/wetlands/4",
        params={"start": start.isoformat(), "end": end.isoformat()},
    )
    assert response.status_code == 200
    # Days 0, 1 and 2 of history, four sensor types each
    assert response.json()["summary"]["total_readings"] == 12


def test_report_range_without_data(public_client):
    response = public_client.get(
        "/reports/wetlands/2",
        params={"start": "2020-01-01T00:00:00", "end": "2020-01-31T23:59:59"},
    )
    assert response.status_code == 200

    report = response.json()
    assert report["summary"]["total_readings"] == 0
    assert report["summary"]["avg_temperature"] == 0
    assert report["summary"]["avg_ph"] == 0
    assert report["health_trend"] == "Improving"


def test_report_start_after_end(public_client):
    response = public_client.get(
        "/reports/wetlands/1",
        params={"start": "2024-02-01T00:00:00", "end": "2024-01-01T00:00:00"},
    )
    assert response.status_code == 422


def test_report_missing_wetland(public_client):
    assert public_client.get("/reports/wetlands/999").status_code == 404


def test_report_requires_login(client):
    assert client.get("/reports/wetlands/1").status_code == 401

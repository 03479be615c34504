"""
Tests for the report REST endpoints and the API server app.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import app as server_app
from intel_reports.api.report_endpoints import router as reports_router


# Create test FastAPI app
app = FastAPI()
app.include_router(reports_router)

# Test client
client = TestClient(app)


class TestCatalogEndpoints:

    def test_list_types(self):
        response = client.get("/api/reports/types")
        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data] == [
            "sector-overview", "company-deep-dive", "competitive-analysis", "market-entry-brief",
        ]
        assert data[2]["configFields"][0]["type"] == "multi-select"

    def test_get_type(self):
        response = client.get("/api/reports/types/market-entry-brief")
        assert response.status_code == 200
        assert len(response.json()["sections"]) == 11

    def test_get_unknown_type(self):
        response = client.get("/api/reports/types/unknown")
        assert response.status_code == 404

    def test_sectors(self):
        response = client.get("/api/reports/sectors")
        assert response.status_code == 200
        assert {"value": "launch-services", "label": "Launch Services"} in response.json()


class TestConfigEndpoint:

    def test_valid_sector_config(self):
        response = client.post("/api/reports/config", json={
            "reportType": "sector-overview",
            "sector": "launch-services",
        })
        assert response.status_code == 200
        assert response.json() == {"reportType": "sector-overview", "config": {"sector": "launch-services"}}

    def test_comparison_needs_two_companies(self):
        response = client.post("/api/reports/config", json={
            "reportType": "competitive-analysis",
            "companies": ["spacex"],
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Please select at least 2 companies to compare"

    def test_comparison_too_many_companies(self):
        response = client.post("/api/reports/config", json={
            "reportType": "competitive-analysis",
            "companies": ["a", "b", "c", "d", "e", "f"],
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Select no more than 5 companies to compare"

    def test_company_deep_dive(self):
        response = client.post("/api/reports/config", json={
            "reportType": "company-deep-dive",
            "company": "rocket-lab",
        })
        assert response.json()["config"] == {"companySlug": "rocket-lab"}

    @pytest.mark.parametrize("topic,status", [
        ("AI", 400),
        ("LEO broadband for maritime customers", 200),
    ])
    def test_market_entry_topic(self, topic, status):
        response = client.post("/api/reports/config", json={
            "reportType": "market-entry-brief",
            "topic": topic,
        })
        assert response.status_code == status

    def test_unknown_type(self):
        response = client.post("/api/reports/config", json={"reportType": "nope"})
        assert response.status_code == 404


REPORT = {
    "title": "Propulsion Sector Overview",
    "generatedAt": "2026-10-19T14:30:00Z",
    "sections": [
        {"id": "market", "title": "Market", "content": "**Growing** fast"},
        {"id": "players", "title": "Players", "content": "- A\n- B"},
    ],
}


class TestDocumentEndpoints:

    def test_render(self):
        response = client.post("/api/reports/render", json=REPORT)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<strong>Growing</strong> fast" in response.text
        assert "<ul><li>A</li><li>B</li></ul>" in response.text

    def test_toc(self):
        response = client.post("/api/reports/toc", json=REPORT)
        assert response.status_code == 200
        assert response.json() == [
            {"id": "market", "title": "Market", "number": "01", "anchor": "section-market"},
            {"id": "players", "title": "Players", "number": "02", "anchor": "section-players"},
        ]

    def test_render_rejects_invalid_report(self):
        response = client.post("/api/reports/render", json={"sections": []})
        assert response.status_code == 422


def test_health():
    response = TestClient(server_app).get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["report_types"] == 4

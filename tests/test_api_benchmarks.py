"""
Tests for the Benchmarks API.
"""

import pytest
from fastapi.testclient import TestClient

from api.analyze import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "content-benchmark-engine"

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCalculateBenchmarks:

    def test_calculate(self, client, competitor_pages):
        response = client.post(
            "/api/benchmarks/calculate",
            json={"keyword": "digital marketing", "competitors": competitor_pages},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["keyword"] == "digital marketing"
        assert data["benchmarks"]["averageWordCount"] == 1620
        assert data["targets"]["targetKeywordDensity"] == 2.62
        assert data["targets"]["targetOptimizedHeadings"] == 9
        assert data["report"]["validation"]["isValid"] is True

    def test_lsi_zero_fill_query_param(self, client, competitor_pages):
        response = client.post(
            "/api/benchmarks/calculate?lsi_zero_fill=true",
            json={"competitors": competitor_pages},
        )

        assert response.status_code == 200
        keywords = {
            k["keyword"]: k for k in response.json()["benchmarks"]["lsiKeywordFrequencies"]
        }
        assert keywords["SEO strategy"]["averageFrequency"] == 0.6

    def test_wrong_competitor_count(self, client, competitor_pages):
        response = client.post(
            "/api/benchmarks/calculate",
            json={"competitors": competitor_pages[:3]},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Expected 5 competitors, got 3"

    def test_invalid_competitor(self, client, competitor_pages):
        competitor_pages[0]["wordCount"] = -100

        response = client.post(
            "/api/benchmarks/calculate",
            json={"competitors": competitor_pages},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Competitor 1 has invalid word count: -100"

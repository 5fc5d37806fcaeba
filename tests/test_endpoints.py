"""
Endpoint tests for the HTTP service.
"""
import pytest
from fastapi.testclient import TestClient
from templatereview.service.server import app


TEMPLATE = "ROLE: r\n\nCONTEXT: c\n\nTASK: Review {{code}}.\n\nFORMAT: f\n"


@pytest.fixture
def client():
    return TestClient(app)


class TestCoreEndpoints:
    """Health and operation listing endpoints (server.py)"""

    def test_health(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"
        assert "version" in r.json()

    def test_operations(self, client):
        r = client.get("/api/operations")
        assert r.status_code == 200
        assert "validate_template" in r.json()["operations"]


class TestReviewRouter:
    """Router /api/analyze, /api/validate, /api/enhance, /api/review"""

    def test_analyze(self, client):
        r = client.post("/api/analyze", json={"template": TEMPLATE, "metadata": {"type": "qa"}})
        assert r.status_code == 200
        body = r.json()
        assert body["structure"]["hasRole"] is True
        assert body["metadata"] == {"type": "qa"}

    def test_validate(self, client):
        r = client.post("/api/validate", json={"template": "TASK: x\n\nROLE: y\n"})
        assert r.status_code == 200
        body = r.json()
        assert body["isValid"] is False
        assert "section-order" in [v["rule"] for v in body["violations"]]

    def test_enhance(self, client):
        r = client.post("/api/enhance", json={"template": TEMPLATE.replace("{{code}}", "[code]")})
        assert r.status_code == 200
        assert r.json()["enhancedContent"] == TEMPLATE

    def test_review_by_name(self, client):
        r = client.post("/api/review/validate_template", json={"template": TEMPLATE})
        assert r.status_code == 200
        assert r.json() == {"isValid": True, "violations": []}

    def test_empty_template(self, client):
        r = client.post("/api/validate", json={"template": "   "})
        assert r.status_code == 400

    def test_missing_template(self, client):
        assert client.post("/api/enhance", json={}).status_code == 400

    def test_unknown_operation(self, client):
        r = client.post("/api/review/rewrite_template", json={"template": TEMPLATE})
        assert r.status_code == 404

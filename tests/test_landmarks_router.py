"""
Tests for the landmarks router and health endpoint.
"""

from fastapi.testclient import TestClient


class TestHealth:
    """Tests for /health."""

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestAuditEndpoint:
    """Tests for POST /landmarks/audit."""

    def test_audit_clean_page(self, client: TestClient, page):
        """A well ordered page returns landmarks and no findings."""
        html = page(
            '<nav><a href="/">Home</a><a href="/a">About</a><a href="/b">Blog</a></nav>',
            '<main id="content">Hello</main>',
        )
        response = client.post("/landmarks/audit", json={"html": html})

        assert response.status_code == 200
        data = response.json()
        assert data["main"]["label"] == "main#content"
        assert data["main"]["explicit"] is True
        assert data["navigation"]["tag"] == "nav"
        assert data["nav_before_main"] is True
        assert data["main_first"] is True
        assert data["findings"] == []

    def test_audit_reports_findings(self, client: TestClient, page):
        """Order problems come back as findings."""
        html = page("<header>h</header>", "<aside>a</aside>", "<main>m</main>")
        response = client.post("/landmarks/audit", json={"html": html})

        assert response.status_code == 200
        findings = response.json()["findings"]
        assert len(findings) == 1
        assert findings[0]["type"] == "main_not_first"
        assert findings[0]["severity"] == 4
        assert findings[0]["message"] == "Main content should appear first"

    def test_audit_overrides(self, client: TestClient, page):
        """Request fields override settings."""
        html = page("only text")
        response = client.post(
            "/landmarks/audit", json={"html": html, "semantic_exclude": True}
        )
        assert response.status_code == 200
        assert response.json()["findings"] == []

        response = client.post(
            "/landmarks/audit", json={"html": html, "max_number_of_problems": 0}
        )
        assert response.json()["findings"] == []
        assert response.json()["truncated"] is True

    def test_empty_html_rejected(self, client: TestClient):
        """Empty documents fail validation."""
        response = client.post("/landmarks/audit", json={"html": ""})
        assert response.status_code == 422

    def test_negative_limit_rejected(self, client: TestClient):
        """Negative limits fail validation."""
        response = client.post(
            "/landmarks/audit", json={"html": "<main>x</main>", "max_number_of_problems": -1}
        )
        assert response.status_code == 422

    def test_missing_html_rejected(self, client: TestClient):
        """The html field is required."""
        response = client.post("/landmarks/audit", json={})
        assert response.status_code == 422

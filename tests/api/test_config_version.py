# tests/api/test_config_version.py
"""Tests for the config and version endpoints."""

from reservation_usage import __version__


class TestVersionEndpoint:
    """Tests for GET /api/v1/version."""

    def test_version_returns_200(self, client):
        """Should return 200."""
        response = client.get("/api/v1/version")
        assert response.status_code == 200

    def test_version_returns_version_string(self, client):
        """Should return the package version."""
        response = client.get("/api/v1/version")
        assert response.json() == {"version": __version__}


class TestConfigEndpoint:
    """Tests for GET /api/v1/config."""

    def test_config_returns_200(self, client):
        """Should return 200."""
        response = client.get("/api/v1/config")
        assert response.status_code == 200

    def test_config_contains_expected_fields(self, client):
        """Should expose non-sensitive configuration."""
        response = client.get("/api/v1/config")
        data = response.json()
        expected_fields = [
            "default_region",
            "reservations_ttl_seconds",
            "instances_ttl_seconds",
            "emr_tag_key",
            "regional_scope",
            "log_level",
            "api_host",
            "api_port",
        ]
        for field in expected_fields:
            assert field in data, f"Missing config field: {field}"

    def test_config_reflects_the_environment(self, client):
        data = client.get("/api/v1/config").json()
        assert data["default_region"] == "eu-north-3"
        assert data["reservations_ttl_seconds"] == 3600
        assert data["instances_ttl_seconds"] == 300

    def test_config_does_not_expose_secrets(self, client):
        """Should NOT expose the verification token."""
        response = client.get("/api/v1/config")
        raw = str(response.json()).lower()
        assert "token" not in raw
        assert "secret" not in raw

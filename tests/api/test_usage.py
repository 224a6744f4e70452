# tests/api/test_usage.py
"""Tests for the usage endpoints."""

import re

from reservation_usage.core.config import config
from reservation_usage.core.exceptions import UpstreamLoadFailure

FORM = {"Content-Type": "application/x-www-form-urlencoded"}


class TestUsageCommand:
    """Tests for POST /api/v1/usage."""

    def test_returns_summary_rows(self, client, fake_inventory):
        response = client.post("/api/v1/usage", content="token=secret&text=eu-north-9", headers=FORM)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        rows = {row["family"]: row for row in response.json()}
        assert rows["i9"] == {
            "family": "i9",
            "on_demand": 4.0,
            "spot": 0.0,
            "emr": 4.0,
            "reserved": 24.0,
            "unreserved": 0.0,
            "surplus": 20.0,
        }
        assert rows["p7"]["surplus"] == 4.0
        assert rows["d5"]["unreserved"] == 4.0
        assert rows["c6"]["spot"] == 4.0

    def test_loads_the_region_from_the_text(self, client, fake_inventory):
        client.post("/api/v1/usage", content="token=secret&text=eu-north-9", headers=FORM)

        assert fake_inventory.reservation_regions == ["eu-north-9"]
        assert fake_inventory.instance_regions == ["eu-north-9"]

    def test_falls_back_to_the_default_region(self, client, fake_inventory):
        client.post("/api/v1/usage", content="token=secret", headers=FORM)

        assert fake_inventory.instance_regions == ["eu-north-3"]

    def test_rejects_a_wrong_token(self, client, fake_inventory):
        response = client.post("/api/v1/usage", content="token=nope&text=eu-north-9", headers=FORM)

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("text/plain")
        assert re.search(r"authentication", response.text, re.IGNORECASE)
        assert fake_inventory.instance_regions == []

    def test_rejects_a_missing_token(self, client):
        response = client.post("/api/v1/usage", content="text=eu-north-9", headers=FORM)

        assert response.status_code == 401

    def test_plain_text_when_accepted(self, client):
        headers = dict(FORM, Accept="text/plain")
        response = client.post("/api/v1/usage", content="token=secret&text=eu-north-9", headers=headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        lines = response.text.splitlines()
        assert re.match(r"^family\s+on demand\s+spot\s+emr\s+reserved\s+unreserved\s+surplus$", lines[0])
        assert any(re.match(r"^i9(?:\s+\d+){6}$", line) for line in lines)

    def test_slack_message_for_slackbot(self, client):
        headers = dict(FORM, Accept="*/*", **{"User-Agent": "Slackbot 1.0 (+https://api.slack.com/robots)"})
        response = client.post("/api/v1/usage", content="token=secret&text=eu-north-9", headers=headers)

        assert response.status_code == 200
        message = response.json()
        assert message["response_type"] == "in_channel"
        assert message["text"].startswith("```\n")
        assert message["text"].endswith("```\n")
        assert "eu-north-9" in message["attachments"][0]["text"]

    def test_body_with_undecodable_bytes_is_answered(self, client, fake_inventory):
        body = b"token=secret&text=eu-north-9&user_name=\xff\xfe"

        response = client.post("/api/v1/usage", content=body, headers=FORM)

        assert response.status_code == 200
        assert fake_inventory.instance_regions == ["eu-north-9"]

    def test_body_without_form_content_type_is_rejected(self, client, fake_inventory):
        response = client.post("/api/v1/usage", content=b"\xff\xfe\x00")

        assert 400 <= response.status_code < 500
        assert fake_inventory.instance_regions == []

    def test_upstream_failure_is_a_bad_gateway(self, client, fake_inventory):
        fake_inventory.error = UpstreamLoadFailure("Could not load instances for region 'eu-north-9'")

        response = client.post("/api/v1/usage", content="token=secret&text=eu-north-9", headers=FORM)

        assert response.status_code == 502
        assert "eu-north-9" in response.json()["detail"]


class TestUsageQuery:
    """Tests for GET /api/v1/usage."""

    def test_returns_summary_rows(self, client, fake_inventory):
        response = client.get(
            "/api/v1/usage", params={"region": "eu-north-7"}, headers={"X-Verification-Token": "secret"}
        )

        assert response.status_code == 200
        assert [row["family"] for row in response.json()] == ["c6", "d5", "i9", "p7"]
        assert fake_inventory.instance_regions == ["eu-north-7"]

    def test_requires_the_token_header(self, client):
        response = client.get("/api/v1/usage", params={"region": "eu-north-7"})

        assert response.status_code == 401

    def test_missing_region_is_a_client_error(self, client, monkeypatch):
        monkeypatch.setattr(config, "AWS_DEFAULT_REGION", "")

        response = client.get("/api/v1/usage", headers={"X-Verification-Token": "secret"})

        assert response.status_code == 400

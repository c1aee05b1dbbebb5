"""Tests for GET /api/zones and /api/zones/offset."""

from api.base import ErrorCodes


class TestListZones:
    """Tests for GET /api/zones."""

    def test_filter_toronto(self, client):
        """A substring query narrows the list to matching zones."""
        response = client.get("/api/zones", params={"q": "toronto"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == ["America/Toronto"]
        assert body["error"] is None

    def test_no_query_lists_everything(self, client, app):
        """No query returns the whole catalog."""
        response = client.get("/api/zones")

        data = response.json()["data"]
        assert len(data) == len(app.state.conversion_service.catalog.list())
        assert "UTC" in data

    def test_case_insensitive(self, client):
        """Queries match regardless of case."""
        response = client.get("/api/zones", params={"q": "KOLKATA"})
        assert response.json()["data"] == ["Asia/Kolkata"]


class TestZoneOffset:
    """Tests for GET /api/zones/offset."""

    def test_kolkata(self, client):
        """Zone spelling is canonicalised in the response."""
        response = client.get(
            "/api/zones/offset",
            params={"zone": "asia/kolkata", "at": "2024-07-01T16:00:00Z"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data == {
            "zone": "Asia/Kolkata",
            "at": "2024-07-01T16:00:00Z",
            "offset_minutes": 330,
            "label": "UTC+05:30",
        }

    def test_toronto_follows_dst(self, client):
        """The label changes with the season."""
        summer = client.get(
            "/api/zones/offset", params={"zone": "America/Toronto", "at": "2024-07-01T00:00:00Z"}
        ).json()["data"]
        winter = client.get(
            "/api/zones/offset", params={"zone": "America/Toronto", "at": "2024-01-01T00:00:00Z"}
        ).json()["data"]
        assert summer["label"] == "UTC-04:00"
        assert winter["label"] == "UTC-05:00"

    def test_defaults_to_now(self, client):
        """Without at, the current instant is used."""
        response = client.get("/api/zones/offset", params={"zone": "UTC"})
        assert response.json()["data"]["label"] == "UTC+00:00"

    def test_unknown_zone_returns_404(self, client):
        """Unknown zones map to UNKNOWN_ZONE."""
        response = client.get("/api/zones/offset", params={"zone": "Mars/Base"})

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == ErrorCodes.UNKNOWN_ZONE

    def test_bad_instant_returns_400(self, client):
        """An instant without an offset is rejected."""
        response = client.get("/api/zones/offset", params={"zone": "UTC", "at": "2024-07-01T16:00"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == ErrorCodes.INVALID_REQUEST

    def test_missing_zone_returns_422(self, client):
        """zone is a required query parameter."""
        response = client.get("/api/zones/offset")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == ErrorCodes.VALIDATION_ERROR

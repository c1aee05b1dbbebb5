"""Tests for POST /api/convert, /api/convert/swap and GET /api/convert/defaults."""

from api.base import ErrorCodes


def body(civil="2024-07-01T12:00", source="America/Toronto", target="Asia/Kolkata", **extra):
    return {"civil": civil, "source_zone": source, "target_zone": target, **extra}


class TestConvert:
    """Tests for POST /api/convert."""

    def test_toronto_to_kolkata(self, client):
        """Both readings carry every rendered and copied form."""
        response = client.post("/api/convert", json=body())

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["source"] == {
            "zone": "America/Toronto",
            "civil": "2024-07-01T12:00:00",
            "instant": "2024-07-01T16:00:00Z",
            "epoch_ms": 1719849600000,
            "offset_minutes": -240,
            "offset": "UTC-04:00",
            "iso": "2024-07-01T12:00:00-04:00",
            "display": "July 1, 2024, 12:00:00 PM UTC-04:00 (America/Toronto)",
            "heading": "Monday, 1 July 2024 • 12:00 (UTC-04:00)",
            "formatted": "Monday, 1 July 2024 12:00 UTC-04:00",
        }
        assert data["target"]["civil"] == "2024-07-01T21:30:00"
        assert data["target"]["offset"] == "UTC+05:30"
        assert data["target"]["iso"] == "2024-07-01T21:30:00+05:30"
        assert data["target"]["formatted"] == "Monday, 1 July 2024 21:30 UTC+05:30"
        assert data["adjustment"] is None

    def test_gap_reports_adjustment(self, client):
        """A skipped wall time is shifted forward and the shift is reported."""
        response = client.post("/api/convert", json=body(civil="2024-03-10T02:30", target="UTC"))

        data = response.json()["data"]
        assert data["source"]["civil"] == "2024-03-10T03:30:00"
        assert data["target"]["civil"] == "2024-03-10T07:30:00"
        assert data["adjustment"] == {
            "requested": "2024-03-10T02:30:00",
            "adjusted": "2024-03-10T03:30:00",
            "shift_minutes": 60,
        }

    def test_overlap_earlier_by_default(self, client):
        """A repeated wall time resolves to its first occurrence."""
        response = client.post("/api/convert", json=body(civil="2024-11-03T01:30", target="UTC"))
        assert response.json()["data"]["target"]["civil"] == "2024-11-03T05:30:00"

    def test_overlap_later_on_request(self, client):
        """disambiguation=later picks the second occurrence."""
        response = client.post(
            "/api/convert",
            json=body(civil="2024-11-03T01:30", target="UTC", disambiguation="later"),
        )
        assert response.json()["data"]["target"]["civil"] == "2024-11-03T06:30:00"

    def test_invalid_civil_returns_400(self, client):
        """Impossible dates are rejected with INVALID_CIVIL_TIME."""
        response = client.post("/api/convert", json=body(civil="2024-02-30T10:00"))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == ErrorCodes.INVALID_CIVIL_TIME

    def test_unknown_zone_returns_404(self, client):
        """The error message names the unknown zone."""
        response = client.post("/api/convert", json=body(target="Mars/Base"))

        assert response.status_code == 404
        assert "Mars/Base" in response.json()["error"]["message"]

    def test_bad_disambiguation_returns_422(self, client):
        """Only 'earlier' and 'later' are accepted."""
        response = client.post("/api/convert", json=body(disambiguation="middle"))

        assert response.status_code == 422
        assert response.json()["error"]["code"] == ErrorCodes.VALIDATION_ERROR


class TestSwap:
    """Tests for POST /api/convert/swap."""

    def test_swaps_zones(self, client):
        """Zones trade places; the wall-clock reading is kept."""
        response = client.post("/api/convert/swap", json=body())

        assert response.status_code == 200
        assert response.json()["data"] == {
            "civil": "2024-07-01T12:00:00",
            "source_zone": "Asia/Kolkata",
            "target_zone": "America/Toronto",
            "disambiguation": "earlier",
        }


class TestDefaults:
    """Tests for GET /api/convert/defaults."""

    def test_configured_zones(self, client):
        """With detection off, the configured zones are used at minute precision."""
        response = client.get("/api/convert/defaults")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["source_zone"] == "America/Toronto"
        assert data["target_zone"] == "UTC"
        assert data["civil"].endswith(":00")


class TestRequestId:
    """X-Request-ID header and envelope meta."""

    def test_generated_id_in_header_and_meta(self, client):
        """A generated ID appears in both the header and meta."""
        response = client.get("/api/zones", params={"q": "utc"})

        request_id = response.headers["X-Request-ID"]
        assert request_id
        assert response.json()["meta"]["request_id"] == request_id

    def test_incoming_id_is_reused(self, client):
        """A well-formed caller ID is echoed back."""
        response = client.get("/api/zones", headers={"X-Request-ID": "front-end-42"})

        assert response.headers["X-Request-ID"] == "front-end-42"
        assert response.json()["meta"]["request_id"] == "front-end-42"

    def test_malformed_incoming_id_is_replaced(self, client):
        """IDs with disallowed characters are not echoed."""
        response = client.get("/api/zones", headers={"X-Request-ID": "bad id with spaces"})
        assert response.headers["X-Request-ID"] != "bad id with spaces"

    def test_unhandled_error_keeps_request_id(self, client, app, monkeypatch):
        """A 500 from an unexpected exception still carries the request ID."""
        def explode(query):
            raise RuntimeError("catalog exploded")

        monkeypatch.setattr(app.state.conversion_service, "search_zones", explode)

        response = client.get("/api/zones", headers={"X-Request-ID": "front-end-42"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "front-end-42"
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == ErrorCodes.INTERNAL_ERROR
        assert body["meta"]["request_id"] == "front-end-42"
        assert "catalog exploded" not in body["error"]["message"]

"""Tests for the API client and its fallback mode."""
import httpx
import pytest

from backend.client import AnalystClient, ClientError, ConnectionMode
from backend.config import Settings


def mock_client(handler, **kwargs):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return AnalystClient("http://backend.test/api", http=http, **kwargs)


def timeout_handler(request):
    raise httpx.ReadTimeout("timed out", request=request)


def offline_handler(request):
    raise httpx.ConnectError("connection refused", request=request)


class TestTransportErrors:

    def test_timeout_message(self):
        """Timeouts surface as a readable ClientError."""
        client = mock_client(timeout_handler)

        with pytest.raises(ClientError, match="Request timeout - please try again"):
            client.get_startup("x")

    def test_network_error_message(self):
        """Connection failures surface as a network error."""
        client = mock_client(offline_handler)

        with pytest.raises(ClientError, match="Network error - please check your connection"):
            client.health_check()

    def test_server_error_field_is_used(self):
        """The server's error string becomes the message."""
        client = mock_client(lambda r: httpx.Response(404, json={"success": False, "error": "Startup not found"}))

        with pytest.raises(ClientError) as exc_info:
            client.get_startup("missing")

        assert exc_info.value.message == "Startup not found"
        assert exc_info.value.status_code == 404

    def test_non_json_error(self):
        """Without a JSON body the status line is used."""
        client = mock_client(lambda r: httpx.Response(502, text="bad gateway"))

        with pytest.raises(ClientError, match="HTTP 502"):
            client.analyze_startup("x")

    def test_sends_bearer_token_and_timeout(self):
        """Requests carry the static key and the fixed timeout."""
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            seen["timeout"] = request.extensions.get("timeout")
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"status": "healthy"})

        client = mock_client(handler, api_key="public-key")
        client.health_check()

        assert seen["auth"] == "Bearer public-key"
        assert seen["url"] == "http://backend.test/api/health"
        assert seen["timeout"]["read"] == 15.0

    def test_timeout_and_key_from_settings(self, monkeypatch):
        """CLIENT_TIMEOUT_SECONDS and API_KEY configure a client built from settings."""
        monkeypatch.setenv("CLIENT_TIMEOUT_SECONDS", "3")
        monkeypatch.setenv("API_KEY", "from-env")
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            seen["timeout"] = request.extensions.get("timeout")
            return httpx.Response(200, json={"status": "healthy"})

        http = httpx.Client(transport=httpx.MockTransport(handler))
        client = AnalystClient.from_settings("http://backend.test/api", Settings(), http=http)
        client.health_check()

        assert client.timeout == 3.0
        assert seen["timeout"]["read"] == 3.0
        assert seen["auth"] == "Bearer from-env"


class TestFallbackMode:

    def test_list_startups_falls_back(self):
        """A failed list returns the static dataset and enters fallback mode."""
        client = mock_client(timeout_handler)

        body = client.list_startups()

        assert body["success"] is True
        assert body["count"] == 3
        assert [s["name"] for s in body["data"]] == ["TechNova", "HealthLink", "FinanceFlow"]
        assert all("lastAnalyzed" in s for s in body["data"])
        assert client.mode is ConnectionMode.FALLBACK
        assert client.last_error.message == "Request timeout - please try again"

    def test_dashboard_stats_falls_back(self):
        """Failed stats return the fallback overview."""
        client = mock_client(offline_handler)

        body = client.dashboard_stats()

        assert body["data"]["overview"]["totalStartups"] == 3
        assert body["data"]["overview"]["avgScore"] == 78
        assert client.mode is ConnectionMode.FALLBACK

    def test_fetch_reports_mode_of_the_call(self):
        """The stats fetch returns the outcome of that call, not the shared mode."""
        state = {"up": False}

        def handler(request):
            if not state["up"]:
                raise httpx.ConnectError("down", request=request)
            return httpx.Response(200, json={"success": True, "data": {"overview": {}}})

        client = mock_client(handler)
        body, mode, error = client.fetch_dashboard_stats()
        assert mode is ConnectionMode.FALLBACK
        assert error.message == "Network error - please check your connection"
        assert body["data"]["overview"]["totalStartups"] == 3

        state["up"] = True
        body, mode, error = client.fetch_dashboard_stats()
        assert mode is ConnectionMode.LIVE
        assert error is None
        assert body["data"] == {"overview": {}}

    def test_fallback_data_is_not_shared(self):
        """Callers can mutate fallback data without affecting later calls."""
        client = mock_client(offline_handler)

        client.list_startups()["data"][0]["name"] = "Mutated"

        assert client.list_startups()["data"][0]["name"] == "TechNova"

    def test_recovers_to_live(self):
        """A successful call returns the client to live mode."""
        state = {"up": False}

        def handler(request):
            if not state["up"]:
                raise httpx.ConnectError("down", request=request)
            return httpx.Response(200, json={"success": True, "data": [], "count": 0})

        client = mock_client(handler)
        client.list_startups()
        assert client.mode is ConnectionMode.FALLBACK

        state["up"] = True
        body = client.list_startups()

        assert body["count"] == 0
        assert client.mode is ConnectionMode.LIVE
        assert client.last_error is None

    def test_other_calls_do_not_fall_back(self):
        """Only list and stats degrade; the rest raise."""
        client = mock_client(offline_handler)

        with pytest.raises(ClientError):
            client.run_scenario_simulation("x", [])


class TestAgainstApp:

    def test_round_trip_through_app(self, client, technova_payload):
        """The client drives the real app end to end."""
        api = AnalystClient("http://testserver/api", http=client)

        created = api.create_startup(technova_payload)["data"]
        startup_id = created["startup"]["id"]
        notes = api.generate_deal_notes(startup_id)["data"]
        edited = api.update_deal_notes(startup_id, "Short memo.")["data"]
        sims = api.run_scenario_simulation(startup_id, [{"name": "Base", "growthRate": 10}])
        upload = api.upload_file("deck-pitch.pdf", "pitch-deck", startup_id)

        assert api.list_startups()["count"] == 1
        assert api.mode is ConnectionMode.LIVE
        assert notes["startupId"] == startup_id
        assert edited["summary"] == "Short memo."
        assert sims["data"]["scenarios"][0]["name"] == "Base"
        assert upload["data"]["fileName"] == "deck-pitch.pdf"
        assert api.benchmarks(startup_id)["data"]["peerCount"] == 0
        assert api.dashboard_stats()["data"]["overview"]["totalStartups"] == 1

    def test_not_found_through_app(self, client):
        """404s from the app raise with the server message."""
        api = AnalystClient("http://testserver/api", http=client)

        with pytest.raises(ClientError, match="Startup not found"):
            api.get_startup("missing")

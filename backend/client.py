# backend/client.py

"""
HTTP client for the analyst API, as used by the dashboard.

Every call is a single request with a fixed timeout and no retry. The list
and stats calls degrade to a static fallback dataset when the backend cannot
be reached; the client records that as ConnectionMode.FALLBACK until the next
successful call brings it back to LIVE.
"""

import copy
import logging
from datetime import datetime, timezone
from enum import Enum

import httpx

from backend.demo_data import FALLBACK_STARTUPS, FALLBACK_STATS

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class ConnectionMode(str, Enum):
    LIVE = "live"
    FALLBACK = "fallback"


class ClientError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def fallback_startups():
    now = _now_iso()
    startups = copy.deepcopy(FALLBACK_STARTUPS)
    for s in startups:
        s["uploadedAt"] = now
        s["lastAnalyzed"] = now
    return {"success": True, "data": startups, "count": len(startups)}


def fallback_stats():
    now = _now_iso()
    data = copy.deepcopy(FALLBACK_STATS)
    for activity in data["recentActivity"]:
        activity["timestamp"] = now
    return {"success": True, "data": data}


class AnalystClient:
    def __init__(self, base_url, api_key=None, timeout=DEFAULT_TIMEOUT, http=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http if http is not None else httpx.Client()
        self.headers = {"Content-Type": "application/json"}
        if api_key:
            self.headers["Authorization"] = f"Bearer {api_key}"
        self.mode = ConnectionMode.LIVE
        self.last_error = None

    @classmethod
    def from_settings(cls, base_url, settings, **kwargs):
        kwargs.setdefault("api_key", settings.api_key)
        return cls(base_url, timeout=settings.client_timeout_seconds, **kwargs)

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # -------- Transport --------
    def _request(self, method, endpoint, **kwargs):
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.http.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        except httpx.TimeoutException as exc:
            logger.error("API request timed out for %s: %s", endpoint, exc)
            raise ClientError("Request timeout - please try again") from exc
        except httpx.TransportError as exc:
            logger.error("API request failed for %s: %s", endpoint, exc)
            raise ClientError("Network error - please check your connection") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("error") if isinstance(body, dict) else None
            raise ClientError(
                message or f"HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
            )

        self._mark_live()
        return response.json()

    def _mark_live(self):
        if self.mode is ConnectionMode.FALLBACK:
            logger.info("Backend reachable again, leaving fallback mode")
        self.mode = ConnectionMode.LIVE
        self.last_error = None

    def _mark_fallback(self, error):
        if self.mode is ConnectionMode.LIVE:
            logger.warning("Switching to fallback data: %s", error)
        self.mode = ConnectionMode.FALLBACK
        self.last_error = error

    # -------- Startups --------
    def list_startups(self):
        try:
            return self._request("GET", "/startups")
        except ClientError as exc:
            logger.warning("Failed to fetch live startup data, using fallback")
            self._mark_fallback(exc)
            return fallback_startups()

    def get_startup(self, startup_id):
        return self._request("GET", f"/startups/{startup_id}")

    def create_startup(self, startup):
        return self._request("POST", "/startups", json=startup)

    def analyze_startup(self, startup_id):
        return self._request("POST", f"/startups/{startup_id}/analyze")

    def benchmarks(self, startup_id):
        return self._request("GET", f"/startups/{startup_id}/benchmarks")

    # -------- Files --------
    def upload_file(self, file_name, file_type, startup_id=None):
        return self._request(
            "POST",
            "/upload",
            json={"fileName": file_name, "fileType": file_type, "startupId": startup_id},
        )

    # -------- Dashboard --------
    def dashboard_stats(self):
        body, _, _ = self.fetch_dashboard_stats()
        return body

    def fetch_dashboard_stats(self):
        """Return ``(body, mode, error)`` for this call alone."""
        try:
            return self._request("GET", "/dashboard/stats"), ConnectionMode.LIVE, None
        except ClientError as exc:
            logger.warning("Failed to fetch live data, using fallback")
            self._mark_fallback(exc)
            return fallback_stats(), ConnectionMode.FALLBACK, exc

    # -------- Deal notes --------
    def generate_deal_notes(self, startup_id):
        return self._request("POST", f"/startups/{startup_id}/notes")

    def update_deal_notes(self, startup_id, summary):
        return self._request("PATCH", f"/startups/{startup_id}/notes", json={"summary": summary})

    # -------- Scenarios --------
    def run_scenario_simulation(self, startup_id, scenarios):
        return self._request("POST", f"/startups/{startup_id}/simulate", json={"scenarios": scenarios})

    def health_check(self):
        return self._request("GET", "/health")

# backend/refresher.py

import logging
import threading

from backend.client import ConnectionMode

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30.0


class StatsRefresher:
    """Pull dashboard stats on an interval. Overlapping refreshes are skipped."""

    def __init__(self, client, interval=DEFAULT_INTERVAL, on_update=None, on_error=None):
        self.client = client
        self.interval = interval
        self.on_update = on_update
        self.on_error = on_error

        self.stats = None
        self.live = False
        self.refresh_count = 0
        self.skipped = 0

        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = None

    @classmethod
    def from_settings(cls, client, settings, **kwargs):
        return cls(client, interval=settings.stats_refresh_seconds, **kwargs)

    def refresh(self) -> bool:
        if not self._lock.acquire(blocking=False):
            self.skipped += 1
            logger.warning("Stats refresh already in progress, skipping")
            return False
        try:
            result, mode, error = self.client.fetch_dashboard_stats()
            self.refresh_count += 1

            if mode is ConnectionMode.LIVE:
                self.stats = result["data"]
                self.live = True
                if self.on_update:
                    self.on_update(self.stats)
                return True

            if self.stats is None:
                self.stats = result["data"]
            if self.on_error:
                self.on_error(error)
            return True
        finally:
            self._lock.release()

    def _run(self):
        while not self._stop.is_set():
            try:
                self.refresh()
            except Exception:
                logger.exception("Stats refresh failed")
            self._stop.wait(self.interval)

    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="stats-refresher", daemon=True)
        self._thread.start()

    def stop(self, timeout=None):
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None

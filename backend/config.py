# backend/config.py

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name, default=None):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


class Settings:
    """Runtime configuration, read from the environment (and .env)."""

    def __init__(self, **overrides):
        self.api_key = os.getenv("API_KEY") or None
        self.api_prefix = os.getenv("API_PREFIX", "/api").rstrip("/")
        self.allowed_origins = [
            o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()
        ]
        self.service_name = os.getenv("SERVICE_NAME", "Disha AI Backend")
        self.seed_demo_data = _env_bool("SEED_DEMO_DATA", True)
        self.scoring_seed = _env_int("SCORING_SEED")
        self.storage_base_url = os.getenv(
            "STORAGE_BASE_URL", "https://example.com/storage"
        ).rstrip("/")
        self.max_upload_bytes = _env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.client_timeout_seconds = float(os.getenv("CLIENT_TIMEOUT_SECONDS", "15"))
        self.stats_refresh_seconds = float(os.getenv("STATS_REFRESH_SECONDS", "30"))

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise TypeError(f"Unknown setting: {key}")
            setattr(self, key, value)


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

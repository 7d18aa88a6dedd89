# backend/analyst.py

import logging
import random

from backend import benchmarks, notes, scenarios, stats, uploads
from backend.demo_data import DEMO_STARTUPS
from backend.errors import NotesNotFound, StartupNotFound
from backend.models import StartupCreate, StartupRecord, UploadReceipt, utcnow
from backend.scoring import analyze
from backend.store import KVStore, analysis_key, notes_key, startup_key

logger = logging.getLogger(__name__)


class AnalystService:
    def __init__(self, store=None, rng=None, storage_base_url="https://example.com/storage"):
        self.store = store if store is not None else KVStore()
        self.rng = rng if rng is not None else random.Random()
        self.storage_base_url = storage_base_url

    # -------- Reads --------
    def list_startups(self):
        records = self.store.get_by_prefix("startup:")
        return [r.value for r in records if r.value is not None]

    def get_startup(self, startup_id):
        record = self.store.get(startup_key(startup_id))
        if record is None:
            raise StartupNotFound()
        return record.value

    def get_analysis(self, startup_id):
        record = self.store.get(analysis_key(startup_id))
        return record.value if record else None

    # -------- Analysis --------
    def create_startup(self, payload: StartupCreate):
        now = utcnow()
        profile = payload.with_defaults(now)
        analysis = analyze(profile, self.rng)
        startup = StartupRecord.from_analysis(profile, analysis, now)
        self._save(startup, analysis)
        logger.info("Created startup %s (%s) score=%s", startup.id, startup.name, analysis.overall_score)
        return startup, analysis

    def reanalyze(self, startup_id):
        startup = self.get_startup(startup_id)
        analysis = analyze(startup, self.rng)
        startup = startup.with_analysis(analysis)
        self._save(startup, analysis)
        logger.info("Re-analyzed startup %s score=%s", startup.id, analysis.overall_score)
        return startup, analysis

    def _save(self, startup, analysis):
        self.store.set(startup_key(startup.id), startup)
        self.store.set(analysis_key(startup.id), analysis)

    # -------- Deal notes --------
    def generate_notes(self, startup_id):
        startup_record = self.store.get(startup_key(startup_id))
        analysis = self.get_analysis(startup_id)
        if startup_record is None or analysis is None:
            raise NotesNotFound("Startup or analysis not found")
        deal_notes = notes.generate_deal_notes(startup_record.value, analysis)
        self.store.set(notes_key(startup_id), deal_notes)
        return deal_notes

    def get_notes(self, startup_id):
        record = self.store.get(notes_key(startup_id))
        if record is None:
            raise NotesNotFound()
        return record.value

    def update_notes_summary(self, startup_id, summary):
        updated = notes.edit_summary(self.get_notes(startup_id), summary)
        self.store.set(notes_key(startup_id), updated)
        return updated

    # -------- Scenarios & benchmarks --------
    def simulate(self, startup_id, scenario_inputs):
        return scenarios.project(self.get_startup(startup_id), scenario_inputs)

    def benchmark(self, startup_id):
        return benchmarks.benchmark(self.get_startup(startup_id), self.list_startups())

    def dashboard_stats(self):
        return stats.dashboard_stats(self.list_startups())

    # -------- Uploads --------
    def register_upload(self, file_name, file_type=None, startup_id=None, **extra):
        url = uploads.file_url(self.storage_base_url, file_name)

        if startup_id:
            record = self.store.get(startup_key(startup_id))
            if record is not None:
                if file_type == uploads.PITCH_DECK:
                    self.store.set(startup_key(startup_id), record.value.model_copy(update={"pitch_deck_url": url}))
                elif file_type == uploads.FINANCIALS:
                    self.store.set(startup_key(startup_id), record.value.model_copy(update={"financials_url": url}))

        return UploadReceipt(
            file_url=url,
            file_name=file_name,
            uploaded_at=utcnow(),
            file_type=file_type,
            **extra,
        )

    # -------- Bootstrap --------
    def seed_demo_data(self):
        if self.list_startups():
            logger.info("Demo data already exists, skipping initialization")
            return 0
        for raw in DEMO_STARTUPS:
            self.create_startup(StartupCreate.model_validate(raw))
        logger.info("Seeded %d demo startups", len(DEMO_STARTUPS))
        return len(DEMO_STARTUPS)

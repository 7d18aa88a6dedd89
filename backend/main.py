# backend/main.py

import logging
import random
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, File, Form, Query, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from backend import uploads
from backend.analyst import AnalystService
from backend.config import Settings, configure_logging
from backend.errors import AnalystError, ProcessingFailure, fails_with
from backend.models import NotesUpdate, SimulationRequest, StartupCreate, UploadRequest
from backend.notes import render_markdown
from backend.store import KVStore

logger = logging.getLogger(__name__)


def get_service(request: Request) -> AnalystService:
    return request.app.state.service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def ok(data, message=None, **extra):
    body = {"success": True, "data": data}
    body.update(extra)
    if message:
        body["message"] = message
    return body


def error_response(status_code, message):
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


# -------- Startups --------
router = APIRouter()


@router.get("/startups")
@fails_with("Failed to fetch startups")
def list_startups(service: AnalystService = Depends(get_service)):
    startups = [s.to_json() for s in service.list_startups()]
    return ok(startups, count=len(startups))


@router.get("/startups/{startup_id}")
@fails_with("Failed to fetch startup")
def get_startup(startup_id: str, service: AnalystService = Depends(get_service)):
    startup = service.get_startup(startup_id)
    analysis = service.get_analysis(startup_id)
    return ok({
        "startup": startup.to_json(),
        "analysis": analysis.to_json() if analysis else None,
    })


@router.post("/startups")
@fails_with("Failed to process startup data")
def create_startup(payload: StartupCreate, service: AnalystService = Depends(get_service)):
    startup, analysis = service.create_startup(payload)
    return ok(
        {"startup": startup.to_json(), "analysis": analysis.to_json()},
        "Startup analysis completed",
    )


@router.post("/startups/{startup_id}/analyze")
@fails_with("Failed to re-analyze startup")
def analyze_startup(startup_id: str, service: AnalystService = Depends(get_service)):
    startup, analysis = service.reanalyze(startup_id)
    return ok(
        {"startup": startup.to_json(), "analysis": analysis.to_json()},
        "AI analysis updated successfully",
    )


@router.get("/startups/{startup_id}/benchmarks")
@fails_with("Failed to compute benchmarks")
def startup_benchmarks(startup_id: str, service: AnalystService = Depends(get_service)):
    return ok(service.benchmark(startup_id).to_json())


@router.post("/startups/{startup_id}/simulate")
@fails_with("Simulation failed")
def simulate(startup_id: str, body: SimulationRequest, service: AnalystService = Depends(get_service)):
    results = service.simulate(startup_id, body.scenarios)
    return ok({"scenarios": [r.to_json() for r in results]}, "Scenario simulation completed")


# -------- Deal notes --------
@router.post("/startups/{startup_id}/notes")
@fails_with("Failed to generate deal notes")
def generate_notes(startup_id: str, service: AnalystService = Depends(get_service)):
    return ok(service.generate_notes(startup_id).to_json(), "Deal notes generated successfully")


@router.get("/startups/{startup_id}/notes")
@fails_with("Failed to fetch deal notes")
def get_notes(startup_id: str, service: AnalystService = Depends(get_service)):
    return ok(service.get_notes(startup_id).to_json())


@router.patch("/startups/{startup_id}/notes")
@fails_with("Failed to update deal notes")
def update_notes(startup_id: str, body: NotesUpdate, service: AnalystService = Depends(get_service)):
    updated = service.update_notes_summary(startup_id, body.summary)
    return ok(updated.to_json(), "Deal notes updated successfully")


@router.get("/startups/{startup_id}/notes/export")
@fails_with("Failed to export deal notes")
def export_notes(
    startup_id: str,
    fmt: str = Query("markdown", alias="format", pattern="^(markdown|json)$"),
    service: AnalystService = Depends(get_service),
):
    deal_notes = service.get_notes(startup_id)
    if fmt == "json":
        return JSONResponse(content=deal_notes.to_json())
    return PlainTextResponse(render_markdown(deal_notes), media_type="text/markdown")


# -------- Uploads --------
@router.post("/upload")
@fails_with("File upload failed")
def upload_reference(body: UploadRequest, service: AnalystService = Depends(get_service)):
    receipt = service.register_upload(body.file_name, body.file_type, body.startup_id)
    return ok(receipt.to_json(), "File uploaded successfully")


@router.post("/upload/file")
async def upload_file(
    file: UploadFile = File(...),
    file_type: Optional[str] = Form(None),
    startup_id: Optional[str] = Form(None),
    service: AnalystService = Depends(get_service),
    settings: Settings = Depends(get_settings),
):
    data = await file.read()
    file_name = file.filename or "upload"
    uploads.validate_upload(file_name, file.content_type, len(data), settings.max_upload_bytes)

    extra = {}
    if file.content_type in uploads.PDF_TYPES:
        page_count, preview = uploads.inspect_pdf(data)
        extra = {"page_count": page_count, "text_preview": preview}

    try:
        receipt = service.register_upload(
            file_name,
            file_type or uploads.infer_file_type(file_name),
            startup_id,
            **extra,
        )
    except Exception as exc:
        logger.exception("File upload failed: %s", exc)
        raise ProcessingFailure("File upload failed") from exc
    return ok(receipt.to_json(), "File uploaded successfully")


# -------- Dashboard --------
@router.get("/dashboard/stats")
@fails_with("Failed to fetch dashboard statistics")
def dashboard_stats(service: AnalystService = Depends(get_service)):
    return ok(service.dashboard_stats().to_json())


# -------- Health check --------
@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.service_name,
    }


def create_app(settings=None, store=None):
    settings = settings or Settings()
    configure_logging(settings.log_level)

    service = AnalystService(
        store=store if store is not None else KVStore(),
        rng=random.Random(settings.scoring_seed),
        storage_base_url=settings.storage_base_url,
    )

    @asynccontextmanager
    async def lifespan(app):
        if settings.seed_demo_data:
            service.seed_demo_data()
        logger.info("%s starting", settings.service_name)
        yield

    app = FastAPI(title=settings.service_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.service = service

    # -------- API Key protection --------
    health_path = f"{settings.api_prefix}/health"

    @app.middleware("http")
    async def check_api_key(request: Request, call_next):
        if request.method == "OPTIONS" or request.url.path == health_path:
            return await call_next(request)

        if settings.api_key:  # only check if API_KEY is set
            auth = request.headers.get("authorization", "")
            bearer = auth[7:].strip() if auth.lower().startswith("bearer ") else None
            key = bearer or request.headers.get("x-api-key")
            if key != settings.api_key:
                return error_response(403, "Forbidden")

        return await call_next(request)

    # -------- Request logging --------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    # -------- CORS --------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------- Errors --------
    @app.exception_handler(AnalystError)
    async def analyst_error(request: Request, exc: AnalystError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in exc.errors()
        )
        return error_response(422, f"Invalid request: {details}")

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()

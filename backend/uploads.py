# backend/uploads.py

import io
import logging
import uuid

import pypdf

from backend.errors import UploadRejected

logger = logging.getLogger(__name__)

PDF_TYPES = {"application/pdf"}
SPREADSHEET_TYPES = {
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "text/csv",
}
ACCEPTED_TYPES = PDF_TYPES | SPREADSHEET_TYPES

PITCH_DECK = "pitch-deck"
FINANCIALS = "financials"

PREVIEW_CHARS = 500


def infer_file_type(file_name):
    return PITCH_DECK if "pitch" in file_name.lower() else FINANCIALS


def file_url(base_url, file_name):
    return f"{base_url}/{uuid.uuid4()}-{file_name}"


def validate_upload(file_name, content_type, size, max_bytes):
    if content_type not in ACCEPTED_TYPES:
        raise UploadRejected(
            f"Invalid file type: {file_name}. Please upload PDF, Excel, or CSV files."
        )
    if size > max_bytes:
        raise UploadRejected(
            f"File too large: {file_name}. Maximum size is {max_bytes // (1024 * 1024)}MB."
        )


def inspect_pdf(data):
    """Return (page_count, text_preview); unreadable PDFs give (0, "")."""
    try:
        reader = pypdf.PdfReader(io.BytesIO(data))
        text = ""
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text += page_text + "\n"
            if len(text) >= PREVIEW_CHARS:
                break
        return len(reader.pages), text[:PREVIEW_CHARS]
    except Exception as exc:
        logger.warning("Could not read PDF: %s", exc)
        return 0, ""

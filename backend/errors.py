# backend/errors.py

import functools
import logging

logger = logging.getLogger(__name__)


class AnalystError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class StartupNotFound(AnalystError):
    status_code = 404
    message = "Startup not found"


class NotesNotFound(AnalystError):
    status_code = 404
    message = "Deal notes not found"


class UploadRejected(AnalystError):
    status_code = 400
    message = "Invalid upload"


class ProcessingFailure(AnalystError):
    status_code = 500
    message = "Processing failed"


def fails_with(message):
    """
    Wrap a route so unexpected errors become a ProcessingFailure carrying a
    generic message. AnalystErrors pass through untouched.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except AnalystError:
                raise
            except Exception as exc:
                logger.exception("%s: %s", message, exc)
                raise ProcessingFailure(message) from exc
        return wrapper
    return decorator

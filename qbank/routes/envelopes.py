from typing import Optional
import traceback

from fastapi.responses import JSONResponse

from qbank import settings


def error_response(status_code: int, message: str, details: Optional[str] = None, exc: Optional[BaseException] = None) -> JSONResponse:
    """`{status: "error", message}` plus `error`/`details` in development only."""
    body = {"status": "error", "message": message}
    if settings.is_development():
        if exc is not None:
            body["error"] = str(exc)
            details = details or "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        if details:
            body["details"] = details
    return JSONResponse(status_code=status_code, content=body)

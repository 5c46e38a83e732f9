# main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from qbank.errors import QuestionBankError
from qbank.routes.main import router as api_router
from qbank.routes.cds import router as cds_router
from qbank.routes.upsc import router as upsc_router
from qbank.routes.envelopes import error_response

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("api")


# -----------------------------------------------------------------------------
# App instantiation
# -----------------------------------------------------------------------------
app = FastAPI(
    title="UPSC & CDS Question Bank",
    version="0.1.0",
)


@app.get("/", summary="Welcome")
async def welcome():
    return {
        "status": "success",
        "message": "Welcome to the UPSC & CDS Question Bank API",
        "documentation": "/docs",
    }


# -----------------------------------------------------------------------------
# CORS (open for now; lock down in production!)
# -----------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------------------------------------------------------
# Error envelopes
# -----------------------------------------------------------------------------
@app.exception_handler(QuestionBankError)
async def question_bank_error_handler(request: Request, exc: QuestionBankError):
    logger.warning(f"{request.url.path}: {exc.message}")
    return error_response(exc.status_code, exc.message, exc.details)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(404, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(422, "Invalid request parameters", str(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Error in {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, "Something went wrong!", exc=exc)


# -----------------------------------------------------------------------------
# Question routes
# -----------------------------------------------------------------------------
app.include_router(api_router, tags=["API"])
app.include_router(cds_router, tags=["CDS"])
app.include_router(upsc_router, tags=["UPSC"])

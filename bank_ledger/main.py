"""
Main FastAPI application entry point.
Sets up logging, error handling, middleware and routes.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from bank_ledger import storage
from bank_ledger.api import accounts, transactions
from bank_ledger.core.config import settings
from bank_ledger.core.exceptions import BankLedgerError
from bank_ledger.core.logging_config import setup_logging
from bank_ledger.database import engine, get_db
from bank_ledger.schemas.common import ErrorResponse

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    storage.init_storage(engine)
    logger.info("JSON API server ready (database %s)", engine.url.render_as_string(hide_password=True))
    yield


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc UI
    lifespan=lifespan,
)

# CORS middleware (allows frontend to call API)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info("HTTP %s %s -> %s", request.method, request.url.path, response.status_code)
    return response


# ==================== ERROR HANDLING ====================
# Handled failures answer 400 with a flat {"error": ...} body.

def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(BankLedgerError)
async def ledger_error_handler(request: Request, exc: BankLedgerError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return error_response("invalid input")
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(message)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return error_response("database error")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(f"method `{request.method}` is not allowed")
    # Unknown paths keep their own status
    return error_response(str(exc.detail), status_code=exc.status_code)


# ==================== ROUTES ====================

@app.get("/")
def root():
    """
    Root endpoint - service banner.
    """
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "accounts": "/account",
            "transactions": "/account/transactions"
        }
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint for monitoring.
    """
    db.execute(text("SELECT 1"))
    return {
        "status": "healthy",
        "database": "connected"
    }


# Include API routers
app.include_router(accounts.router)
app.include_router(transactions.router)


def run():
    """Start the HTTP server."""
    logger.info("JSON API server running on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

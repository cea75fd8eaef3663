"""TalentGate — request-contract service for the applicant tracking API.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

from contextlib import asynccontextmanager
import logging

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from talentgate.config import get_settings
from talentgate.api.contracts import InvalidJSONError, UnknownShapeError
from talentgate.api.router import api_router
from talentgate.contracts import registry
from talentgate.validators import ContractViolationError

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().LOG_LEVEL.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG, strict_contracts=settings.STRICT_CONTRACTS)

    app.state.registry = registry
    logger.info("app_started", shapes=len(registry))

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="TalentGate",
    description=(
        "Request-contract layer of the applicant tracking API. "
        "Declares the shape of every inbound request body and admits or "
        "rejects untyped JSON against it before business logic runs."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(ContractViolationError)
async def contract_violation_handler(request: Request, exc: ContractViolationError):
    """Rejected request body: every violation, verbatim."""
    return JSONResponse(status_code=400, content=exc.to_response())


@app.exception_handler(InvalidJSONError)
async def invalid_json_handler(request: Request, exc: InvalidJSONError):
    return JSONResponse(
        status_code=400,
        content={"error": "invalid_json", "message": f"Request body is not valid JSON: {exc}"},
    )


@app.exception_handler(UnknownShapeError)
async def unknown_shape_handler(request: Request, exc: UnknownShapeError):
    return JSONResponse(
        status_code=404,
        content={"error": "unknown_shape", "message": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle configuration errors such as a malformed shape definition."""
    logger.error("value_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "TalentGate",
        "version": "1.0.0",
        "description": "Request-contract layer of the applicant tracking API",
        "docs": "/docs",
        "health": "/api/v1/health",
        "contracts": "/api/v1/contracts",
    }

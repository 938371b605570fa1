# ───────────────────────────────────────────────────────────────
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ─── Local imports ─────────────────────────────────────────────
from src.labportal.config.settings import CORS_ORIGINS, LOG_LEVEL
from src.labportal.db.session import create_db_and_tables
from src.labportal.routers import (
    auth_router, assignment_router, submission_router, execution_router
)
from src.labportal.utils.errors import PortalError

# ─── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# ─── FastAPI app ───────────────────────────────────────────────
app = FastAPI(
    title="Lab Portal",
    description="API for publishing coding assignments, running code and grading submissions",
    version="1.0.0",
)

# ─── Middlewares ───────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


# ─── Error translation ─────────────────────────────────────────
@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal error occurred."},
    )


# ─── Startup ───────────────────────────────────────────────────
@app.on_event("startup")
def on_startup():
    logger.info("Creating database and tables...")
    try:
        create_db_and_tables()
    except Exception as e:
        logger.error(f"Failed to create database and tables: {e}", exc_info=True)
        raise


# ─── Routers ───────────────────────────────────────────────────
app.include_router(auth_router.router, prefix="/api")
app.include_router(assignment_router.router, prefix="/api")
app.include_router(submission_router.router, prefix="/api")
app.include_router(execution_router.router, prefix="/api")


# ─── Simple endpoints ──────────────────────────────────────────
@app.get("/")
async def root():
    return {
        "message": "Welcome to the Lab Portal API",
        "docs_url": "/docs",
        "redoc_url": "/redoc",
    }


@app.get("/health")
async def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

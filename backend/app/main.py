import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.core.dependencies import get_holiday_repository
from app.core.exceptions import HolidayTrackerError, StorageUnavailableError
from app.core.rate_limit import limiter
from app.repositories.holiday_repository import HolidayRepository
from app.routers import holidays, team_members, weeks

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Startup tasks
# ---------------------------------------------------------------------------
async def _prepare_database() -> None:
    """Create tables and seed demo data when configured to (development)."""
    from app.database import Base, async_session, engine
    from app.services.sample_data import seed_sample_data

    if settings.CREATE_TABLES_ON_STARTUP:
        from app import models  # noqa: F401 — populate Base.metadata

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    if settings.SEED_SAMPLE_DATA:
        async with async_session() as db:
            await seed_sample_data(HolidayRepository(db))
            await db.commit()


# ---------------------------------------------------------------------------
# Lifespan context manager
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: runs on startup and shutdown."""
    await _prepare_database()
    logger.info("Holiday tracker API started")
    yield
    from app.database import engine

    await engine.dispose()
    logger.info("Holiday tracker API shutting down")


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)


# -- Middleware ---------------------------------------------------------------
@app.middleware("http")
async def limit_request_body(request: Request, call_next):
    """Reject requests with Content-Length exceeding the limit."""
    content_length = request.headers.get("content-length")
    if content_length and not content_length.isdigit():
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid Content-Length header"},
        )
    if content_length and int(content_length) > settings.MAX_BODY_SIZE:
        return JSONResponse(
            status_code=413,
            content={"detail": "Request body too large"},
        )
    return await call_next(request)


app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# -- Rate limiting ------------------------------------------------------------
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# -- Domain errors ------------------------------------------------------------
@app.exception_handler(HolidayTrackerError)
async def holiday_tracker_error_handler(request: Request, exc: HolidayTrackerError):
    """Render domain errors as ``{"detail": message}`` with their HTTP status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
async def health_check(repo: HolidayRepository = Depends(get_holiday_repository)):
    """Health check with DB connectivity verification."""
    checks: dict[str, str] = {"db": "ok"}

    try:
        await repo.ping()
    except StorageUnavailableError:
        checks["db"] = "error"

    degraded = any(v == "error" for v in checks.values())
    return {
        "status": "degraded" if degraded else "ok",
        "app": settings.APP_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **checks,
    }


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(team_members.router, prefix=settings.API_V1_PREFIX)
app.include_router(holidays.router, prefix=settings.API_V1_PREFIX)
app.include_router(weeks.router, prefix=settings.API_V1_PREFIX)

import logging as _logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .components.matching.repository import RepositoryFetchError
from .platform.brand import BRAND_APP_DESCRIPTION, BRAND_NAME
from .platform.config import settings
from .platform.logging import setup_logging
from .platform.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware

# Set up logging
logger = setup_logging()

REPOSITORY_UNAVAILABLE_DETAIL = "Could not load directory data. Please try again later."

# ---------------------------------------------------------------------------
# Disable interactive API docs in production (information disclosure)
# ---------------------------------------------------------------------------
_docs_url = None if settings.is_production else "/api/docs"
_openapi_url = None if settings.is_production else "/api/openapi.json"


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    logger.info(
        "%s API started | env=%s | mentor_budget_hard_filter=%s",
        BRAND_NAME,
        settings.DEPLOYMENT_ENV,
        settings.MENTOR_BUDGET_HARD_FILTER,
    )
    yield


app = FastAPI(
    title=f"{BRAND_NAME} API",
    description=BRAND_APP_DESCRIPTION,
    version="1.0.0",
    docs_url=_docs_url,
    openapi_url=_openapi_url,
    lifespan=_lifespan,
)

_val_logger = _logging.getLogger("startup911.validation")
_err_logger = _logging.getLogger("startup911.errors")


def _sanitize_errors(errors: list) -> list:
    """Ensure validation error details are JSON-serializable."""

    def _json_safe(value):
        if isinstance(value, (str, int, float, bool)) or value is None:
            return value
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if isinstance(value, dict):
            return {str(k): _json_safe(v) for k, v in value.items()}
        if isinstance(value, (list, tuple, set)):
            return [_json_safe(v) for v in value]
        return str(value)

    return [_json_safe(err) for err in errors]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    _val_logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return JSONResponse(
        status_code=422,
        content={"detail": _sanitize_errors(exc.errors())},
    )


@app.exception_handler(RepositoryFetchError)
async def repository_fetch_error_handler(request: Request, exc: RepositoryFetchError):
    # No partial results: the whole request fails when any directory read fails
    _err_logger.error(
        "Directory read failed on %s %s: %s (kind=%s)",
        request.method,
        request.url.path,
        exc,
        exc.kind.value if exc.kind else "-",
        exc_info=exc,
    )
    return JSONResponse(status_code=503, content={"detail": REPOSITORY_UNAVAILABLE_DETAIL})


app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)

# CORS: frontend URL + localhost + any extra origins
_cors_origins = [
    settings.FRONTEND_URL,
    "http://localhost:3000",
    "http://localhost:5173",
]
if settings.CORS_EXTRA_ORIGINS:
    _cors_origins.extend(o.strip() for o in settings.CORS_EXTRA_ORIGINS.split(",") if o.strip())
_cors_origin_regex = settings.CORS_ALLOW_ORIGIN_REGEX
if not _cors_origin_regex and "vercel.app" in (settings.FRONTEND_URL or ""):
    _cors_origin_regex = r"https://.*\.vercel\.app"
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(dict.fromkeys(o for o in _cors_origins if o)),
    allow_origin_regex=_cors_origin_regex,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID", "X-Requested-With"],
)

# Request logging
app.add_middleware(RequestLoggingMiddleware)

# Sentry (optional)
if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.DEPLOYMENT_ENV,
        traces_sample_rate=0.1,
        integrations=[FastApiIntegration(), SqlalchemyIntegration()],
    )

# Include routers
from .api.v1.tags import router as tags_router
from .api.v1.grants import router as grants_router
from .api.v1.vcs import router as vcs_router
from .api.v1.mentors import router as mentors_router
from .api.v1.waitlist import router as waitlist_router

app.include_router(tags_router, prefix="/api/v1")
app.include_router(grants_router, prefix="/api/v1")
app.include_router(vcs_router, prefix="/api/v1")
app.include_router(mentors_router, prefix="/api/v1")
app.include_router(waitlist_router, prefix="/api/v1")


@app.get("/health")
def health_check():
    db_ok = False
    try:
        from sqlalchemy import text
        from .platform.database import SessionLocal
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
        db_ok = True
    except Exception:
        logger.warning("Health check: database unreachable", exc_info=True)
        db_ok = False

    return {
        "status": "healthy" if db_ok else "degraded",
        "service": "startup911-api",
        "database": db_ok,
    }

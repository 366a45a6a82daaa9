import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from slack_notify.config import settings
from slack_notify.database import engine
from slack_notify.errors import NotifyError
from slack_notify.middleware import (
    CORSHeadersMiddleware,
    RequestSizeLimitMiddleware,
    cors_headers,
)
from slack_notify.routers import notify

API_VERSION = "0.1.0"

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Forward site analytics notifications to Slack incoming webhooks.",
    version=API_VERSION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_middleware(RequestSizeLimitMiddleware)
app.add_middleware(CORSHeadersMiddleware)


# --- Exception Handlers ---


@app.exception_handler(NotifyError)
async def notify_exception_handler(request: Request, exc: NotifyError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed notify request: %s", exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=cors_headers(),
    )


# --- Routes ---

app.include_router(notify.router)


@app.get("/", summary="API root")
async def root():
    return {"name": settings.app_name, "status": "ok", "version": API_VERSION}


@app.get("/health", summary="Health check")
async def health_ping():
    status = "healthy"
    checks = {}

    try:
        from slack_notify.database import async_session

        async with async_session() as session:
            await session.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception:
        logger.warning("Health check could not reach the database", exc_info=True)
        checks["database"] = "unavailable"
        status = "degraded"

    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
        "checks": checks,
    }

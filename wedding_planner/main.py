# File: wedding_planner/main.py
import time
import logging
from contextlib import asynccontextmanager
from typing import Callable
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from wedding_planner.api.api import api_router
from wedding_planner.core.config import settings
from wedding_planner.core.exceptions import AccessDenied, NoTenant, NotAuthenticated, StorageError
from wedding_planner.db.database import Base, engine
from wedding_planner import models  # noqa: F401  registers tables on Base.metadata

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_DATA and not settings.is_production:
        from wedding_planner.seed import seed_demo_wedding
        seed_demo_wedding()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
    expose_headers=["X-Process-Time"],
    max_age=3600,
)


@app.middleware("http")
async def log_requests(request: Request, call_next: Callable) -> Response:
    """Log every request with its status and timing"""
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception:
        process_time = time.time() - start_time
        logger.exception(f"{request.method} {request.url.path} failed after {process_time:.4f}s")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.4f}s"
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


# Domain errors -> HTTP. NoTenant is reported as "not found" on purpose.
@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return JSONResponse(status_code=401, content={"error": "Authentication required"})


@app.exception_handler(NoTenant)
async def no_tenant_handler(request: Request, exc: NoTenant):
    return JSONResponse(status_code=404, content={"error": "Wedding profile not found"})


@app.exception_handler(AccessDenied)
async def access_denied_handler(request: Request, exc: AccessDenied):
    return JSONResponse(status_code=403, content={"error": "Access denied"})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Storage failure"})


app.include_router(api_router, prefix=settings.API_STR)


@app.get("/health")
def health_check():
    """Liveness plus a database connectivity check"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "error"
    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "environment": settings.ENVIRONMENT,
        "database": db_status,
        "timestamp": time.time(),
    }

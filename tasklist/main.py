import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded as SlowAPIRateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from tasklist.api.v1.api import api_router
from tasklist.api.v1.auth import router as auth_router
from tasklist.core.config import settings
from tasklist.core.exceptions import RateLimitExceeded, TaskListError
from tasklist.core.limiter import limiter
from tasklist.core.logging import logger
from tasklist.services.assistant import AssistantConfig, build_task_assistant
from tasklist.services.database_service import database_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "application_startup",
        project_name=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT.value,
    )
    database_service.init_db()
    # Fails fast when no provider key is configured
    app.state.assistant = build_task_assistant(AssistantConfig.from_settings(settings))
    yield
    logger.info("application_shutdown")
    database_service.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# IP based limits (slowapi)
app.state.limiter = limiter
app.add_exception_handler(SlowAPIRateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID", "Retry-After"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    start = time.perf_counter()
    response = await call_next(request)
    duration = time.perf_counter() - start

    response.headers["X-Request-ID"] = request_id
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration * 1000, 2),
    )
    return response


@app.exception_handler(TaskListError)
async def tasklist_error_handler(request: Request, exc: TaskListError):
    content = {"detail": exc.message}
    headers = {}
    if isinstance(exc, RateLimitExceeded):
        content["retry_after"] = exc.retry_after
        headers["Retry-After"] = str(exc.retry_after)
    elif exc.status_code == 401:
        headers["WWW-Authenticate"] = "Bearer"

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(auth_router)
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
@limiter.exempt
async def health_check(request: Request):
    db_healthy = database_service.health_check()
    return JSONResponse(
        status_code=200 if db_healthy else 503,
        content={
            "status": "healthy" if db_healthy else "degraded",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT.value,
            "components": {"api": "healthy", "database": "healthy" if db_healthy else "unhealthy"},
        },
    )


@app.get("/")
@limiter.exempt
async def root(request: Request):
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tasklist.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)

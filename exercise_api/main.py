from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .database import engine, Base
from .exceptions import ExerciseAPIError, InvalidRequestBodyError
from .log_config import configure_logging
from .calculator import router as calculator_router
from .greeting import router as greeting_router
from .users import router as users_router
from .users.models import User  # noqa: F401 - Import so Base.metadata sees it

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger("app")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create tables when enabled
    if settings.CREATE_TABLES_ON_STARTUP:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    logger.info("app_started", app=settings.APP_NAME)

    yield

    # Shutdown: Close database connections
    await engine.dispose()
    logger.info("app_stopped", app=settings.APP_NAME)

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Global exception handlers
@app.exception_handler(ExerciseAPIError)
async def exercise_api_exception_handler(request: Request, exc: ExerciseAPIError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message}
    )

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    reason = errors[0].get("msg", "malformed JSON") if errors else "malformed JSON"
    logger.info("request_body_invalid", path=request.url.path, reason=reason)
    return await exercise_api_exception_handler(request, InvalidRequestBodyError(reason))

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

# Include routers
app.include_router(calculator_router)
app.include_router(users_router)
app.include_router(greeting_router)

"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import settings
from app.core.logger import setup_logger
from app.api.v1.router import api_router
from app.schedule.cache import MonthlyPlanCache
from app.schedule.errors import NotFoundError, ScheduleLoadError, ValidationError

setup_logger()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Monthly training calendar: recorded activities and coach-assigned workouts.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# One plan cache per process, invalidated by assignment mutations
app.state.plan_cache = MonthlyPlanCache()

# Include API router
app.include_router(api_router, prefix="/api/v1")


# ======================================================================
# Calendar error handlers
# ======================================================================


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ScheduleLoadError)
async def schedule_load_error_handler(request: Request, exc: ScheduleLoadError):
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY,
                        content={"detail": "Could not load the schedule, please retry", "error": str(exc)})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "School of Sharks API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "school-of-sharks-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }

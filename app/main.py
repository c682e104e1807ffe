"""
Seoul Population API - Main Application Entry Point

FastAPI application that reshapes Seoul floating-population aggregates
from the population backend into chart-ready series for the dashboard:
age pyramids, weekday and week trends, and hourly series.

Run with: uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import (
    API_TITLE, API_DESCRIPTION, API_VERSION,
    CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL
)
from app.exceptions import ClientException, InvalidDistrictId
from app.models.schemas import ErrorResponse

# Import all routers
from app.routers import districts, favorites, population

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configure CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include all routers
app.include_router(districts.router)
app.include_router(population.router)
app.include_router(favorites.router)


# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint providing API information and available sections.
    """
    return {
        "message": "Welcome to the Seoul Population API",
        "version": API_VERSION,
        "documentation": "/docs",
        "sections": {
            "districts": "District id / administrative code registry",
            "population": "Age distribution, pyramid, weekday, week and hourly series",
            "favorites": "Per-user favorite districts"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for monitoring.
    """
    return {"status": "healthy", "service": "Seoul Population API"}


@app.exception_handler(InvalidDistrictId)
async def invalid_district_handler(request: Request, exc: InvalidDistrictId):
    """
    Unknown district ids cannot be queried at all.
    """
    logger.warning(f"{exc.message} ({request.url.path})")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="InvalidDistrictId",
            message=exc.message,
            details={"districtId": exc.district_id}
        ).model_dump()
    )


@app.exception_handler(ClientException)
async def client_exception_handler(request: Request, exc: ClientException):
    """
    Other caller errors.
    """
    logger.warning(f"{exc.message} ({request.url.path})")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=type(exc).__name__,
            message=exc.message
        ).model_dump()
    )


# Custom exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.
    """
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message=str(exc),
            details={"path": str(request.url)}
        ).model_dump()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

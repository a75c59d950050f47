"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from calcbox.api import router as api_router
from calcbox.calculations.errors import CalculationError
from calcbox.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Personal finance, health and utility calculators",
    version="0.1.0",
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(CalculationError)
async def calculation_error_handler(request: Request, exc: CalculationError):
    """Report typed calculation failures as 400s with a stable error code."""
    logger.info(f"{request.url.path} rejected: {exc.code}: {exc}")
    return JSONResponse(status_code=400, content={"error": exc.code, "detail": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}


def run():
    """Serve the API with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run("calcbox.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())

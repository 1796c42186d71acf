from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
import logging

from vidscrape.api.form import router as form_router, close_submission_controller
from vidscrape.middleware.error_handler import ErrorHandlingMiddleware, validation_exception_handler
from vidscrape.core.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format=settings.log_format
)

app = FastAPI(
    title="VidScrape API",
    description="Video metadata scraper form backend",
    version="1.0.0"
)

# Error handling middleware (should be first)
app.add_middleware(ErrorHandlingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include API routers
app.include_router(form_router)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger = logging.getLogger(__name__)
    logger.info("Starting VidScrape API services")
    logger.info(f"Scrape service endpoint: {settings.scrape_service_url}")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup services on shutdown."""
    logger = logging.getLogger(__name__)
    logger.info("Shutting down VidScrape API services")

    await close_submission_controller()
    logger.info("Scrape service client closed")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

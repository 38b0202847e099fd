"""
FastAPI Main Application

Backend for brand crawling, thumbnail generation, uploads and social publishing.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv

# Load environment variables from .env.local
load_dotenv('.env.local')

# Setup logging with rotation
logs_dir = Path(__file__).parent.parent / 'logs'
logs_dir.mkdir(parents=True, exist_ok=True)
log_file = logs_dir / 'backend.log'

# Create handlers
file_handler = RotatingFileHandler(
    log_file,
    maxBytes=10_000_000,  # 10MB per file
    backupCount=5,  # Keep 5 backup files
    encoding='utf-8'
)
console_handler = logging.StreamHandler()

# Set format
log_format = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
file_handler.setFormatter(log_format)
console_handler.setFormatter(log_format)

# Configure root logger with environment variable support
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    handlers=[file_handler, console_handler]
)

logger = logging.getLogger(__name__)
logger.info(f"Logging to file: {log_file}")

# Import routes
from app.dependencies import error_response, get_credentials
from app.routes import brands, crawl, publish, thumbnail, upload
from core.config import Config, Credentials
from core.exceptions import ConfigurationError
from core.storage_manager import StorageManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    # Startup
    logger.info("🚀 Starting Brand Studio Backend")
    logger.info(f"   Environment: {os.getenv('ENVIRONMENT', 'development')}")

    status_report = Config.validate_environment(get_credentials())
    missing = [name for name, present in status_report['configured'].items() if not present]
    if missing:
        logger.warning(f"⚠️ Not configured: {', '.join(missing)} (dependent endpoints will return 503)")
    else:
        logger.info("✅ All integrations configured")

    logger.info(f"✅ Upload directory: {upload_dir}")

    yield

    # Shutdown
    logger.info("👋 Shutting down Brand Studio Backend")


# Create FastAPI app
app = FastAPI(
    title="Brand Studio API",
    description="Brand crawling, thumbnail generation, uploads and social publishing",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(crawl.router, prefix="/api", tags=["brands"])
app.include_router(brands.router, prefix="/api", tags=["brands"])
app.include_router(thumbnail.router, prefix="/api", tags=["thumbnails"])
app.include_router(upload.router, prefix="/api", tags=["uploads"])
app.include_router(publish.router, prefix="/api", tags=["publishing"])

# Serve stored uploads at the paths the upload endpoint returns
upload_dir = StorageManager().ensure_upload_dir()
app.mount(StorageManager.URL_PREFIX, StaticFiles(directory=str(upload_dir)), name="uploads")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Brand Studio API",
        "version": "1.0.0",
        "status": "online"
    }


@app.get("/health")
async def health_check(credentials: Credentials = Depends(get_credentials)):
    """Health check endpoint"""
    status_report = Config.validate_environment(credentials)

    return {
        "status": "healthy",
        "integrations": status_report['configured'],
        "uploads": upload_dir.exists(),
        "environment": os.getenv('ENVIRONMENT', 'development')
    }


# Body fields whose wrong type gets the same message as a missing value
VALIDATION_MESSAGES = {
    'url': "URL is required",
    'websiteUrl': "URL is required",
    'platforms': "At least one platform is required",
    'content': "Content is required",
    'transcript': "Transcript or customPrompt is required",
    'customPrompt': "Transcript or customPrompt is required",
}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies get the 400 error envelope instead of FastAPI's 422"""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get('loc', ())[1:]]

    message = VALIDATION_MESSAGES.get(location[0]) if location else None
    if message is None:
        message = f"Invalid request: {'.'.join(location) or 'body'} {first.get('msg', '')}".rstrip()

    logger.warning(f"⚠️ Invalid request on {request.url.path}: {message}")
    return error_response(message)


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    """Missing credentials for the requested integration"""
    logger.error(f"❌ Configuration error on {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"success": False, "error": str(exc)}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal server error",
            "message": str(exc),
            "path": str(request.url)
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

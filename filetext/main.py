from .gateway import APIGateway
from .routers import extract
from .routers.dependencies import initialize_services
from .core.config import ENVIRONMENT, MAX_FILE_SIZE, EXTRACT_TIMEOUT, CORS_ORIGINS
from .core.logging_config import setup_logging, get_logger
from .services.text_extractors import ExtractorFactory

# Initialize logging
setup_logging()
logger = get_logger(__name__)

# Initialize API Gateway
gateway = APIGateway(
    title="filetext API",
    description="Plain text and metadata extraction from documents",
    version="1.0.0"
)

# Setup middleware (CORS, request IDs, request logging)
gateway.setup_middleware()

# Register routers, with and without the version prefix
gateway.register_router(extract.router, prefix="/api/v1", tags=["Extraction"])
gateway.register_router(extract.router, tags=["Extraction"])

# Register health check endpoints
gateway.register_health_endpoints()

initialize_services()

# Get FastAPI app instance
app = gateway.get_app()


@app.on_event("startup")
async def startup_event():
    """Log the effective configuration on startup."""
    logger.info("=" * 60)
    logger.info("Starting filetext API...")
    logger.info(f"  → Environment: {ENVIRONMENT}")
    logger.info(f"  → Docs URL: {app.docs_url if app.docs_url else 'Disabled (production)'}")
    logger.info(f"  → Max file size: {MAX_FILE_SIZE or 'unlimited'} bytes")
    logger.info(f"  → Timeout: {EXTRACT_TIMEOUT or 'unlimited'} s")
    logger.info(f"  → Allowed Origins: {', '.join(CORS_ORIGINS)}")
    logger.info(f"  → Supported extensions: {', '.join(ExtractorFactory.get_supported_extensions())}")
    logger.info("=" * 60)

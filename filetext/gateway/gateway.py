"""
API Gateway

Main gateway class that wires middleware, error handlers and routers.
Acts as the single entry point for all API requests.
"""
from typing import Optional, List
from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import CORS_ORIGINS, ENVIRONMENT
from ..core.logging_config import get_logger
from .error_handlers import register_exception_handlers
from .middleware import RequestIDMiddleware, RequestLoggingMiddleware

logger = get_logger(__name__)


class APIGateway:
    """
    API Gateway that manages middleware, error handling and routing.

    Responsibilities:
    - Initialize FastAPI application
    - Register middleware (CORS, request IDs, request logging)
    - Register extraction error handlers
    - Register routers
    - Provide health check endpoints
    """

    def __init__(
        self,
        title: str = "filetext API",
        description: str = "Plain text and metadata extraction from documents",
        version: str = "1.0.0",
        enable_docs: Optional[bool] = None
    ):
        """
        Initialize API Gateway.

        Args:
            title: API title
            description: API description
            version: API version
            enable_docs: Enable API docs (auto-detected from ENVIRONMENT if None)
        """
        self.title = title
        self.description = description
        self.version = version
        self.enable_docs = enable_docs if enable_docs is not None else (
            ENVIRONMENT != "production"
        )

        self.app = FastAPI(
            title=self.title,
            description=self.description,
            version=self.version,
            docs_url="/docs" if self.enable_docs else None,
            redoc_url="/redoc" if self.enable_docs else None
        )
        register_exception_handlers(self.app)

        logger.info("API Gateway initialized")

    def setup_middleware(self, cors_origins: Optional[List[str]] = None):
        """Configure all middleware. The last one added runs first."""
        logger.info("Setting up middleware...")

        # Request logging (runs inside RequestID so the ID is available)
        self.app.add_middleware(RequestLoggingMiddleware)
        logger.debug("  → Request logging middleware added")

        # Request ID (for tracing)
        self.app.add_middleware(RequestIDMiddleware)
        logger.debug("  → Request ID middleware added")

        cors_origins = cors_origins or CORS_ORIGINS
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )
        logger.debug(f"  → CORS middleware added (origins: {', '.join(cors_origins)})")

        logger.info("All middleware configured")

    def register_router(self, router: APIRouter, prefix: str = "", tags: Optional[List[str]] = None):
        """
        Register a router with the gateway.

        Args:
            router: FastAPI router instance
            prefix: URL prefix for the router (e.g., "/api/v1")
            tags: OpenAPI tags for documentation
        """
        self.app.include_router(router, prefix=prefix, tags=tags or [])
        logger.info(f"Registered router at prefix '{prefix}'")

    def register_health_endpoints(self):
        """Register health check endpoints."""

        @self.app.get("/")
        async def root():
            """Root endpoint - API information."""
            return {
                "message": f"{self.title} is running",
                "version": self.version,
                "status": "healthy",
            }

        @self.app.get("/health")
        async def health_check():
            """Liveness probe; extraction has no external dependencies to check."""
            return {"status": "healthy"}

        logger.info("Health check endpoints registered")

    def get_app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self.app

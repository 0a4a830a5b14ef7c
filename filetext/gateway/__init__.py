"""
API Gateway Module

This module assembles the FastAPI application:
- Middleware management (CORS, request IDs, request logging)
- Centralized error handling for extraction errors
- Router registration and health endpoints
"""
from .gateway import APIGateway
from .error_handlers import register_exception_handlers

__all__ = ["APIGateway", "register_exception_handlers"]

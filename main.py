"""
Brewery FastAPI Application
Main entry point wiring configuration, middleware, error translation and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import beer, customer, health
from api.dependencies import beer_repository, customer_repository
from app.config import settings
from api.middleware import (
    RequestLoggingMiddleware,
    constraint_violation_exception_handler,
    binding_exception_handler,
    http_exception_handler,
    not_found_exception_handler,
    general_exception_handler,
)
from app.exceptions import ConstraintViolationError, NotFoundError
from services.sample_data import load_sample_data

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("brewery.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Loads sample data into the in-memory repositories when enabled.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    if settings.seed_sample_data:
        load_sample_data(beer_repository, customer_repository)

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url="/openapi.json" if not settings.is_production() else None,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers; these apply to every router
app.add_exception_handler(ConstraintViolationError, constraint_violation_exception_handler)
app.add_exception_handler(RequestValidationError, binding_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(NotFoundError, not_found_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router)
app.include_router(beer.router, prefix=settings.api_prefix)
app.include_router(customer.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )

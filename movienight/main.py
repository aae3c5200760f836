"""
=============================================================================
MOVIE NIGHT API - Platform/genre/rating movie discovery
=============================================================================
Features:
  - /api/movies: platform any-of + minimum rating in the catalog store,
    genre any-of refinement in memory
  - /api/results: genre names, optional random suggestion
  - JSON logging with request correlation ids
  - Per-client rate limiting
=============================================================================
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings, APP_VERSION
from .dependencies import init_resources, close_resources
from .exceptions import (
    MovieNightException,
    movienight_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .limiter import limiter
from .logging_config import setup_logging
from .middleware import RequestTrackingMiddleware
from .routers import health_router, movie_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie Night API",
    description="Find something to watch on the platforms you already have",
    version=APP_VERSION
)

# =============================================================================
# MIDDLEWARE
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_middleware(RequestTrackingMiddleware)

app.state.limiter = limiter

# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================
app.add_exception_handler(MovieNightException, movienight_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(Exception, global_exception_handler)

# =============================================================================
# STARTUP & SHUTDOWN
# =============================================================================
@app.on_event("startup")
async def startup():
    """Initialize connections on startup"""
    await init_resources()
    logger.info("All connections initialized")


@app.on_event("shutdown")
async def shutdown():
    """Cleanup connections on shutdown"""
    await close_resources()
    logger.info("All connections closed")


app.include_router(health_router.router)
app.include_router(movie_router.router)

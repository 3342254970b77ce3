"""
Blog API.

FastAPI application serving user accounts and blog posts.
"""

import logging
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from blog_api.config import settings, validate_settings
from blog_api.database import close_db, init_db
from blog_api.errors import BlogAPIError, first_error_message
from blog_api.logging_config import configure_logging
from blog_api.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from blog_api.routers.auth import router as auth_router
from blog_api.routers.posts import router as posts_router

# Import models to register them with Base.metadata
from blog_api.models import Credential, Post, User  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    """Application lifespan handler for startup/shutdown."""
    configure_logging()
    validate_settings()
    await init_db()
    logger.info("Blog API started")
    yield
    await close_db()
    logger.info("Blog API stopped")


app = FastAPI(
    title="Blog API",
    description="Accounts and posts for the blog frontend",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(posts_router)


# --- Middleware ---


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add a unique request ID to each request."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# --- Exception Handlers ---


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies, query strings and fields as 400s."""
    message = first_error_message(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message},
    )


@app.exception_handler(BlogAPIError)
async def blog_api_exception_handler(request: Request, exc: BlogAPIError) -> JSONResponse:
    """Map domain errors onto their status codes."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    # Responses built here bypass the request-id middleware.
    request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
    logger.exception("Unhandled error on %s %s (request %s)", request.method, request.url.path, request_id)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
        headers={"X-Request-ID": request_id},
    )


# --- Health Check ---


@app.get("/", tags=["System"])
async def root() -> dict[str, str]:
    """Liveness message."""
    return {"message": "Blog Backend API is running!"}


@app.get("/api/health", tags=["System"])
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns 200 OK if the API is running.
    """
    return {"status": "OK"}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("blog_api.main:app", host=settings.host, port=settings.port)

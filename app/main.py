# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import auth_router, profile_router, post_router, health_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    MongoDB and the outbound HTTP client connect lazily; shutdown closes both.
    """
    logger.info("Application startup complete")

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)
    close_database()
    logger.info("Application shutdown complete")


async def validation_error_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 with the failing fields"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": [
                {
                    "field": ".".join(str(part) for part in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exception.errors()
            ]
        },
    )


async def unexpected_error_handler(request: Request, exception: RuntimeError) -> JSONResponse:
    """Log store/connectivity failures and hide their details from the client"""
    logger.error(
        f"Unexpected error on {request.method} {request.url.path}: {exception}",
        exc_info=exception
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server Error"},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Loads `.env`, configures logging and CORS, registers the error handler
    for unexpected failures and mounts the routers.
    """
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    setup_logging()
    settings = get_settings()

    application = FastAPI(
        title="DevConnect API",
        version="1.0.0",
        description="Developer social network: profiles, posts, likes and comments",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(RuntimeError, unexpected_error_handler)

    application.include_router(health_router)
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(profile_router, prefix="/api/v1/profile")
    application.include_router(post_router, prefix="/api/v1/posts")

    return application


# Create application instance
app = create_application()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .db import Database
from .errors import StorageError
from .routers import greet_router, todos_router

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "incorrect todo entered"
SERVER_ERROR_MESSAGE = "server error occurred"

openapi_tags = [
    {"name": "greet", "description": "Fixed greeting endpoint."},
    {"name": "todos", "description": "List and create Todo items."},
]


# PUBLIC_INTERFACE
def create_app(database: Database) -> FastAPI:
    """
    Build the FastAPI application around an already opened storage handle.

    Args:
        database: Shared storage handle, exposed to handlers via app.state.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Todo API",
        description="Minimal HTTP service for listing and creating todos.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.database = database

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        """Malformed request bodies are reported as a plaintext 400."""
        logger.info("rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return PlainTextResponse(BAD_REQUEST_MESSAGE, status_code=400)

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError) -> PlainTextResponse:
        """Storage failures end the request with a plaintext 500 and nothing else."""
        logger.error("storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)

    app.include_router(greet_router)
    app.include_router(todos_router)
    return app

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from shared.errors import StorefrontError, StoreError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Turn storefront errors that escape a handler into plain-text responses."""

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        if isinstance(exc, StoreError):
            logger.error("store_error", path=request.url.path, operation=exc.operation)
        return PlainTextResponse(exc.message, status_code=exc.http_status)

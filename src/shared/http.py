"""HTTP mapping of the storefront error taxonomy."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers as register_protean_exception_handlers

from shared.errors import AuthRequired, RemoteWriteFailed

logger = structlog.get_logger(__name__)


async def _auth_required(request: Request, exc: AuthRequired):
    return JSONResponse(status_code=401, content={"error": exc.message})


async def _remote_write_failed(request: Request, exc: RemoteWriteFailed):
    logger.warning("Write failed", path=request.url.path, operation=exc.operation, reason=exc.reason)
    return JSONResponse(
        status_code=503,
        content={"error": str(exc), "operation": exc.operation},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Protean's validation/not-found handlers plus the storefront errors."""
    register_protean_exception_handlers(app)
    app.add_exception_handler(AuthRequired, _auth_required)
    app.add_exception_handler(RemoteWriteFailed, _remote_write_failed)

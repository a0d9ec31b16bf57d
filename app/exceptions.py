"""
Gestion des exceptions pour FastAPI
"""
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Gestionnaire d'exceptions HTTP

    Returns:
        JSONResponse: {"error", "status_code"}
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "status_code": exc.status_code}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Corps de requête illisible (JSON invalide, type inattendu)"""
    logger.warning(
        "Invalid request body on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body", "status_code": 422}
    )


async def general_exception_handler(request: Request, exc: Exception):
    """
    Gestionnaire d'exceptions générales

    Returns:
        JSONResponse: erreur 500 générique
    """
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "status_code": 500}
    )


def setup_exception_handlers(app):
    """
    Configure les gestionnaires d'exceptions

    Args:
        app: Application FastAPI
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

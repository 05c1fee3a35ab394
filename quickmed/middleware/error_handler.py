from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
import logging

from quickmed.engines.errors import AnalysisProviderError, CredentialMissingError

logger = logging.getLogger("ErrorHandler")

def register_exception_handlers(app: FastAPI):
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global Exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error. Please try again later."})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(f"HTTP Exception: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(CredentialMissingError)
    async def credential_missing_handler(request: Request, exc: CredentialMissingError):
        logger.warning(f"{exc.kind} analysis unavailable: {exc.message}")
        return JSONResponse(status_code=503, content={"detail": exc.message, "kind": exc.kind})

    @app.exception_handler(AnalysisProviderError)
    async def provider_error_handler(request: Request, exc: AnalysisProviderError):
        logger.error(f"{exc.kind} analysis failed: {exc.message}")
        return JSONResponse(status_code=502, content={"detail": exc.message, "kind": exc.kind})

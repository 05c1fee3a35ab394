import logging
import time
from fastapi import Request
from pythonjsonlogger import jsonlogger

from quickmed.config import settings
from quickmed.services.metrics_service import MetricsService

def setup_logging():
    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL)

async def logging_middleware(request: Request, call_next):
    start_time = time.time()
    logger = logging.getLogger("Middleware")
    correlation_id = getattr(request.state, "correlation_id", "N/A")
    logger.info(f"Incoming Request: {request.method} {request.url.path}", extra={"correlation_id": correlation_id})
    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        MetricsService.record_request(request.method, request.url.path, response.status_code)
        logger.info(f"Request Completed: {response.status_code} (Time: {process_time:.4f}s)",
                    extra={"correlation_id": correlation_id})
        return response
    except Exception as e:
        logger.error(f"Request Failed: {e}", extra={"correlation_id": correlation_id})
        raise e

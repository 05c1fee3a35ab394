from quickmed.middleware.logging_middleware import setup_logging
setup_logging()

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from quickmed.api.analyze import router as analyze_router, get_gateway
from quickmed.engines.gemini_engine import AnalysisGateway
from quickmed.api.calculators import router as calculators_router
from quickmed.api.reference import router as reference_router
from quickmed.middleware.error_handler import register_exception_handlers
from quickmed.middleware.logging_middleware import logging_middleware
from quickmed.middleware.observability import TracingMiddleware
from quickmed.services.metrics_service import MetricsService, metrics_endpoint
from quickmed.config import settings

app = FastAPI(
    title="QuickMed Nepal API",
    version=settings.VERSION,
    docs_url="/docs"
)

register_exception_handlers(app)

app.middleware("http")(logging_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(TracingMiddleware)

@app.get("/health")
def health_check(gateway: AnalysisGateway = Depends(get_gateway)):
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "gateway_credential": gateway.has_credential,
        "analysis": MetricsService.get_health_report(),
        "engine_versions": settings.VERSION_MANIFEST
    }

@app.get("/metrics")
def get_metrics():
    return metrics_endpoint()

app.include_router(analyze_router)
app.include_router(calculators_router)
app.include_router(reference_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

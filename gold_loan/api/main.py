"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from gold_loan.api.middleware import RequestIDMiddleware, MetricsMiddleware
from gold_loan.api.v1 import calculate, gold_rates, interest_schemes
from gold_loan.domain.exceptions import (
    DomainException,
    GoldRateNotFoundError,
    InvalidInputError,
    RateNotFoundError,
    SchemeNotFoundError,
)
from gold_loan.infrastructure.observability.logging import setup_logging
from gold_loan.config import settings

# Setup structured logging
setup_logging(settings.log_level)

ERROR_STATUS = {
    InvalidInputError: 400,
    RateNotFoundError: 404,
    SchemeNotFoundError: 404,
    GoldRateNotFoundError: 404,
}


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Render domain errors as {"message": ...} with a matching status code"""
    status_code = ERROR_STATUS.get(type(exc), 400)
    body = {"message": str(exc)}
    field = getattr(exc, "field", None)
    if field:
        body["field"] = field
    return JSONResponse(status_code=status_code, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(
        f"Unexpected error: {exc}",
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Gold Loan Calculator",
        description="Gold-backed loan eligibility by amount or by weight",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculate.router, prefix="/api", tags=["calculations"])
    app.include_router(gold_rates.router, prefix="/api", tags=["gold-rates"])
    app.include_router(interest_schemes.router, prefix="/api", tags=["interest-schemes"])

    return app


app = create_app()

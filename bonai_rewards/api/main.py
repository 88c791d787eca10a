"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bonai_rewards.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bonai_rewards.api.v1 import bills, brands, screens
from bonai_rewards.infrastructure.bill_store import BillCollection
from bonai_rewards.infrastructure.fixtures import seed_bill_collection
from bonai_rewards.infrastructure.observability.logging import setup_logging
from bonai_rewards.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(collection: BillCollection | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    The bill collection is created once here and shared by every request;
    pass one in to render screens over different bills.
    """
    app = FastAPI(
        title="BonAI Rewards",
        description="Bill list and reward redemption screens rendered as view frames",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.bill_collection = collection if collection is not None else seed_bill_collection()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(bills.router, prefix="/v1", tags=["bills"])
    app.include_router(screens.router, prefix="/v1", tags=["screens"])
    app.include_router(brands.router, prefix="/v1", tags=["brands"])

    return app


app = create_app()

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Response
from fastapi.staticfiles import StaticFiles
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from storefront.config import Settings, settings
from storefront.middleware.metrics import MetricsMiddleware
from storefront.middleware.request_id import RequestIDMiddleware
from storefront.routers import cart, menu, orders
from storefront.schemas.health import HealthResponse
from storefront.services.store import StorefrontStore
from storefront.utils.logging import setup_logging
from storefront.utils.tracing import setup_tracing

setup_logging(settings.log_level, service_name="storefront")
logger = logging.getLogger(__name__)

setup_tracing("storefront", settings.otlp_endpoint)


def create_app(config: Settings | None = None) -> FastAPI:
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Restaurant Store App running",
            extra={"url": f"http://localhost:{config.port}"},
        )
        yield
        logger.info(
            "Shutting down",
            extra={
                "cart_size": len(app.state.store.cart),
                "order_count": len(app.state.store.orders),
            },
        )

    app = FastAPI(
        title="Restaurant Storefront",
        description="Menu, shared cart and in-memory order log",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = StorefrontStore()

    FastAPIInstrumentor.instrument_app(app)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.include_router(menu.router, prefix="/api/menu", tags=["menu"])
    app.include_router(cart.router, prefix="/api/cart", tags=["cart"])
    app.include_router(orders.router, prefix="/api/orders", tags=["orders"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))

    # Prometheus scrape endpoint; a route so the static mount below cannot shadow it
    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Landing page and assets; mounted last so it only sees unmatched paths
    static_dir = Path(config.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(
            "Static directory not found, landing page disabled",
            extra={"static_dir": str(static_dir)},
        )

    return app


app = create_app()
